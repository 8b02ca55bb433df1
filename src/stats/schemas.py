from src.shared.schemas import CamelModel


class StatsResponse(CamelModel):
    active_clients: int
    ongoing_projects: int
    monthly_revenue: float
    documents_generated: int
