import logging

from fastapi import HTTPException
from langchain_core.prompts import ChatPromptTemplate

from src.core.errors import validation_error
from src.llm.factory import get_writing_llm
from src.resumes.prompts import (
    COVER_LETTER_SYSTEM_PROMPT,
    COVER_LETTER_USER_PROMPT,
    DEFAULT_JOB_DESCRIPTION,
    DEFAULT_JOB_TITLE,
    DEFAULT_PROJECTS,
    DEFAULT_SKILLS,
)
from src.resumes.schemas import CoverLetterRequest

logger = logging.getLogger(__name__)


class CoverLetterService:
    def __init__(self, llm=None):
        self.llm = llm

    @staticmethod
    def _describe_projects(projects: list) -> str:
        return "\n".join(
            f"Project: {p.get('name', 'Untitled')} - {p.get('description') or 'No description'}"
            for p in projects
        )

    async def generate(self, request: CoverLetterRequest) -> str:
        if not request.target_position or not request.target_company:
            raise validation_error(
                "Missing required fields",
                "targetPosition" if not request.target_position else "targetCompany",
                "Target position and company are required",
            )

        prompt = ChatPromptTemplate.from_messages([
            ("system", COVER_LETTER_SYSTEM_PROMPT),
            ("user", COVER_LETTER_USER_PROMPT),
        ])

        try:
            chain = prompt | (self.llm or get_writing_llm())
            response = await chain.ainvoke({
                "name": request.name,
                "job_title": request.job_title or DEFAULT_JOB_TITLE,
                "target_position": request.target_position,
                "target_company": request.target_company,
                "skills": ", ".join(request.skills) if request.skills else DEFAULT_SKILLS,
                "projects": self._describe_projects(request.selected_projects) or DEFAULT_PROJECTS,
                "job_description": request.job_description or DEFAULT_JOB_DESCRIPTION,
            })
        except Exception:
            logger.exception("Cover letter generation failed")
            raise HTTPException(status_code=500, detail="Failed to generate cover letter. Please try again.")

        return response.content or ""
