from typing import List, Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.resumes.cover_letter import CoverLetterService
from src.resumes.models import ResumeType
from src.resumes.schemas import (
    CoverLetterRequest,
    CoverLetterResponse,
    ResumeCreate,
    ResumeResponse,
    ResumeUpdate,
)
from src.resumes.service import ResumeService

router = APIRouter(prefix="/resumes", tags=["resumes"])
ai_router = APIRouter(prefix="/ai", tags=["ai"])


def get_cover_letter_service() -> CoverLetterService:
    return CoverLetterService()


@router.get("", response_model=List[ResumeResponse])
async def list_resumes(
    type: Optional[ResumeType] = None,
    db: AsyncSession = Depends(get_db),
):
    service = ResumeService(db)
    return await service.list_resumes(type)


@router.post("", response_model=ResumeResponse, status_code=201)
async def create_resume(
    resume: ResumeCreate,
    db: AsyncSession = Depends(get_db),
):
    service = ResumeService(db)
    return await service.create_resume(resume)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = ResumeService(db)
    return await service.get_resume(resume_id)


@router.patch("/{resume_id}", response_model=ResumeResponse)
async def update_resume(
    resume_id: int,
    resume: ResumeUpdate,
    db: AsyncSession = Depends(get_db),
):
    service = ResumeService(db)
    return await service.update_resume(resume_id, resume)


@router.delete("/{resume_id}", status_code=204)
async def delete_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = ResumeService(db)
    await service.delete_resume(resume_id)
    return Response(status_code=204)


@ai_router.post("/generate-cover-letter", response_model=CoverLetterResponse)
async def generate_cover_letter(
    request: CoverLetterRequest,
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    """Draft a cover letter with the configured chat model."""
    cover_letter = await service.generate(request)
    return {"cover_letter": cover_letter}
