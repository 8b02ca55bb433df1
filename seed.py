import asyncio
from datetime import datetime
from sqlalchemy import select
from src.database import AsyncSessionLocal
from src.clients.models import Client
from src.projects.models import Project
from src.projects.lifecycle import ProjectStatus


async def seed_data():
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Client).limit(1))
        if result.scalars().first():
            print("Database already has clients, skipping seed.")
            return

        tom = Client(name="Tom Cook", email="tom@example.com", company="Acme Corporation", language="English, German")
        sarah = Client(name="Sarah Johnson", email="sarah@techstyle.com", company="TechStyle Inc.", language="English, Spanish")
        michael = Client(name="Michael Rodriguez", email="michael@greenleaf.com", company="GreenLeaf Agency", language="French, Italian")
        session.add_all([tom, sarah, michael])
        await session.flush()  # Get the IDs before creating projects

        session.add_all([
            Project(
                client_id=tom.id,
                name="Website Translation - German",
                description="Translate website content to German",
                deadline=datetime(2025, 5, 25),
                amount=950, volume=15000,
                source_lang="English", target_lang="German",
                status=ProjectStatus.IN_PROGRESS,
            ),
            Project(
                client_id=sarah.id,
                name="Product Description Editing",
                description="Edit product descriptions for clarity and SEO",
                deadline=datetime(2025, 6, 10),
                amount=480, volume=8000,
                source_lang="English", target_lang="Spanish",
                status=ProjectStatus.IN_PROGRESS,
            ),
            Project(
                client_id=michael.id,
                name="Marketing Copywriting",
                description="Create marketing copy for new campaign",
                deadline=datetime(2025, 5, 18),
                amount=750, volume=5000,
                source_lang="French", target_lang="English",
                status=ProjectStatus.DELIVERED,
                invoice_sent=True,
            ),
            Project(
                client_id=sarah.id,
                name="Blog Post Series",
                description="Create a series of blog posts about travel",
                deadline=datetime(2025, 5, 15),
                amount=1200, volume=20000,
                source_lang="Spanish", target_lang="English",
                status=ProjectStatus.PAID,
                invoice_sent=True, is_paid=True,
            ),
            Project(
                client_id=tom.id,
                name="Technical Manual Translation",
                description="Translate technical manual for industrial equipment",
                deadline=datetime(2025, 4, 10),
                amount=2500, volume=45000,
                source_lang="English", target_lang="German",
                status=ProjectStatus.IN_PROGRESS,
            ),
        ])

        await session.commit()
        print("Data seeded successfully!")

if __name__ == "__main__":
    asyncio.run(seed_data())
