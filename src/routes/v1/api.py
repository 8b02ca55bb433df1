from fastapi import APIRouter

from src.clients.router import router as clients_router
from src.projects.router import router as projects_router
from src.documents.router import router as documents_router
from src.resumes.router import router as resumes_router, ai_router
from src.external_data.router import router as external_data_router, webhook_router
from src.stats.router import router as stats_router

api_router = APIRouter()

api_router.include_router(clients_router)
api_router.include_router(projects_router)
api_router.include_router(documents_router)
api_router.include_router(resumes_router)
api_router.include_router(ai_router)
api_router.include_router(webhook_router)
api_router.include_router(external_data_router)
api_router.include_router(stats_router)
