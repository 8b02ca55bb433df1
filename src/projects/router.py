from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession
from src.database import get_db
from src.projects.schemas import (
    MindMap,
    MindMapSaved,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)
from src.projects.service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    client_id: Optional[int] = Query(default=None, alias="clientId"),
    sort: Optional[Literal["urgency"]] = None,
    db: AsyncSession = Depends(get_db),
):
    """List projects with dashboard labels, most urgent first when sort=urgency."""
    service = ProjectService(db)
    return await service.list_projects(client_id=client_id, sort=sort)


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(
    project: ProjectCreate,
    db: AsyncSession = Depends(get_db),
):
    service = ProjectService(db)
    return await service.create_project(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Single project with every label that applies to it."""
    service = ProjectService(db)
    return await service.get_project_detail(project_id)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    project: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
):
    service = ProjectService(db)
    return await service.update_project(project_id, project)


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = ProjectService(db)
    await service.delete_project(project_id)
    return Response(status_code=204)


@router.get("/{project_id}/mindmap", response_model=MindMap)
async def get_mind_map(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = ProjectService(db)
    return await service.get_mind_map(project_id)


@router.post("/{project_id}/mindmap", response_model=MindMapSaved)
async def save_mind_map(
    project_id: int,
    mind_map: MindMap,
    db: AsyncSession = Depends(get_db),
):
    service = ProjectService(db)
    return await service.save_mind_map(project_id, mind_map.nodes, mind_map.edges)
