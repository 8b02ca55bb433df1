import pytest
from httpx import AsyncClient
from langchain_core.language_models import FakeListChatModel

from src.main import app
from src.resumes.cover_letter import CoverLetterService
from src.resumes.router import get_cover_letter_service

LETTER = "Dear Hiring Manager,\n\nI would love to localize your product.\n\nSincerely, Ana"


@pytest.fixture
def fake_writer():
    """Swap the configured chat model for a canned one."""
    app.dependency_overrides[get_cover_letter_service] = lambda: CoverLetterService(
        llm=FakeListChatModel(responses=[LETTER])
    )
    yield
    app.dependency_overrides.pop(get_cover_letter_service, None)


@pytest.fixture
def broken_writer():
    def explode(_prompt):
        raise RuntimeError("model unavailable")

    app.dependency_overrides[get_cover_letter_service] = lambda: CoverLetterService(llm=explode)
    yield
    app.dependency_overrides.pop(get_cover_letter_service, None)


@pytest.mark.asyncio
async def test_resume_crud(async_client: AsyncClient, make_project):
    project = await make_project()

    response = await async_client.post(
        "/api/resumes",
        json={"name": "Main CV", "content": "Ten years of DE-EN translation", "projectId": project["id"]},
    )
    assert response.status_code == 201
    resume = response.json()
    assert resume["type"] == "resume"

    response = await async_client.patch(f"/api/resumes/{resume['id']}", json={"content": "Eleven years"})
    assert response.status_code == 200
    assert response.json()["content"] == "Eleven years"
    assert response.json()["name"] == "Main CV"

    response = await async_client.delete(f"/api/resumes/{resume['id']}")
    assert response.status_code == 204
    assert (await async_client.get(f"/api/resumes/{resume['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_list_resumes_by_type(async_client: AsyncClient):
    await async_client.post("/api/resumes", json={"name": "CV", "content": "..."})
    await async_client.post(
        "/api/resumes",
        json={
            "name": "Letter for Globex",
            "type": "coverLetter",
            "content": LETTER,
            "targetPosition": "Localization Lead",
            "targetCompany": "Globex",
        },
    )

    response = await async_client.get("/api/resumes", params={"type": "coverLetter"})
    assert response.status_code == 200
    letters = response.json()
    assert [r["name"] for r in letters] == ["Letter for Globex"]
    assert letters[0]["targetCompany"] == "Globex"

    assert len((await async_client.get("/api/resumes")).json()) == 2


@pytest.mark.asyncio
async def test_resume_for_missing_project_is_rejected(async_client: AsyncClient):
    response = await async_client.post("/api/resumes", json={"name": "CV", "content": "...", "projectId": 12})
    assert response.status_code == 400
    assert response.json()["errors"] == {"projectId": ["Project not found"]}


@pytest.mark.asyncio
async def test_generate_cover_letter(async_client: AsyncClient, fake_writer):
    response = await async_client.post(
        "/api/ai/generate-cover-letter",
        json={
            "name": "Ana",
            "targetPosition": "Localization Lead",
            "targetCompany": "Globex",
            "skills": ["German", "Trados"],
            "selectedProjects": [{"name": "Legal Translation", "description": "Contracts, ES-EN"}],
        },
    )
    assert response.status_code == 200
    assert response.json() == {"coverLetter": LETTER}


@pytest.mark.asyncio
async def test_cover_letter_requires_target(async_client: AsyncClient, fake_writer):
    response = await async_client.post(
        "/api/ai/generate-cover-letter",
        json={"name": "Ana", "targetCompany": "Globex"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"
    assert "targetPosition" in response.json()["errors"]


@pytest.mark.asyncio
async def test_cover_letter_model_failure_is_500(async_client: AsyncClient, broken_writer):
    response = await async_client.post(
        "/api/ai/generate-cover-letter",
        json={"name": "Ana", "targetPosition": "Translator", "targetCompany": "Globex"},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to generate cover letter. Please try again."}


@pytest.mark.asyncio
async def test_snake_case_cover_letter_type_is_rejected(async_client: AsyncClient):
    response = await async_client.post(
        "/api/resumes",
        json={"name": "Letter", "type": "cover_letter", "content": LETTER},
    )
    assert response.status_code == 400
    assert "type" in response.json()["errors"]
