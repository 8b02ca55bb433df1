import asyncio
from src.database import engine, Base

# Import all models to ensure they are registered in Base.metadata
from src.clients.models import Client
from src.projects.models import Project
from src.documents.models import Document
from src.resumes.models import Resume
from src.external_data.models import ExternalData

async def init_models():
    async with engine.begin() as conn:
        # await conn.run_sync(Base.metadata.drop_all) # Optional: Reset DB
        await conn.run_sync(Base.metadata.create_all)
    print("Database tables created.")

if __name__ == "__main__":
    asyncio.run(init_models())
