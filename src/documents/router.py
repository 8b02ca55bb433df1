from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.documents.service import DocumentService
from src.documents.schemas import DocumentCreate, DocumentGenerate, DocumentResponse, DocumentUpdate

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=List[DocumentResponse])
async def list_documents(
    project_id: Optional[int] = Query(default=None, alias="projectId"),
    db: AsyncSession = Depends(get_db),
):
    service = DocumentService(db)
    return await service.list_documents(project_id)


@router.post("", response_model=DocumentResponse, status_code=201)
async def create_document(
    document: DocumentCreate,
    db: AsyncSession = Depends(get_db),
):
    service = DocumentService(db)
    return await service.create_document(document)


@router.post("/generate", response_model=DocumentResponse, status_code=201)
async def generate_document(
    request: DocumentGenerate,
    db: AsyncSession = Depends(get_db),
):
    """Render an invoice or contract from a project and its client."""
    service = DocumentService(db)
    return await service.generate_document(request)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = DocumentService(db)
    return await service.get_document(document_id)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    document: DocumentUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Only the content of a document can change."""
    service = DocumentService(db)
    return await service.update_content(document_id, document.content)


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = DocumentService(db)
    await service.delete_document(document_id)
    return Response(status_code=204)
