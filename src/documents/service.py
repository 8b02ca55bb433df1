import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.clients.models import Client
from src.core.errors import not_found, validation_error
from src.documents.generator import render_document
from src.documents.models import Document, DocumentType
from src.documents.schemas import DocumentCreate, DocumentGenerate
from src.projects.lifecycle import check_invoice_generation
from src.projects.models import Project

logger = logging.getLogger(__name__)


class DocumentService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_documents(self, project_id: Optional[int] = None) -> List[Document]:
        """All documents, or those of one project, newest first."""
        query = select(Document).order_by(Document.created_at.desc(), Document.id.desc())
        if project_id is not None:
            query = query.where(Document.project_id == project_id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_document(self, document_id: int) -> Document:
        document = await self.db.get(Document, document_id)
        if not document:
            raise not_found("Document")
        return document

    async def create_document(self, document_in: DocumentCreate) -> Document:
        if document_in.project_id is not None and await self.db.get(Project, document_in.project_id) is None:
            raise validation_error("Invalid document data", "projectId", "Project not found")

        document = Document(**document_in.model_dump())
        self.db.add(document)
        await self.db.commit()
        await self.db.refresh(document)
        return document

    async def update_content(self, document_id: int, content: str) -> Document:
        document = await self.get_document(document_id)
        document.content = content
        await self.db.commit()
        await self.db.refresh(document)
        return document

    async def delete_document(self, document_id: int) -> None:
        document = await self.get_document(document_id)
        await self.db.delete(document)
        await self.db.commit()

    async def generate_document(self, request: DocumentGenerate) -> Document:
        """Render an invoice or contract for a project and store it.

        Invoices are gated on the project lifecycle; contracts are not.
        """
        try:
            document_type = DocumentType(request.type)
        except ValueError:
            raise validation_error(
                "Invalid document type. Must be 'invoice' or 'contract'",
                "type",
                f"Unsupported document type: {request.type!r}",
            )
        if request.project_id is None:
            raise validation_error("Project ID is required", "projectId", "Required")

        project = await self.db.get(Project, request.project_id)
        if not project:
            raise not_found("Project")

        if document_type == DocumentType.INVOICE:
            check_invoice_generation(project)

        client = await self.db.get(Client, project.client_id)
        if not client:
            raise not_found("Client")

        document = Document(
            type=document_type,
            project_id=project.id,
            content=render_document(document_type, project, client),
        )
        self.db.add(document)
        await self.db.commit()
        await self.db.refresh(document)
        logger.info(f"Generated {document_type.value} {document.id} for project {project.id}")
        return document
