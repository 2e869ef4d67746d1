"""
프로젝트 API
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ....models.project import WorkflowType
from ....schemas.project import (
    ProjectCreate, ProjectCreateRequest, ProjectFind, ProjectPatch, ProjectPatchRequest,
    ProjectResponse,
)
from ....services.project_service import ProjectService
from ...deps import get_principal_id, get_project_service

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
def list_projects(
    key: Optional[str] = None,
    workflow_type: Optional[WorkflowType] = None,
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 목록 조회"""
    return service.find_list(ProjectFind(key=key, workflow_type=workflow_type))


@router.post("", response_model=ProjectResponse, status_code=201)
def create_project(
    data: ProjectCreateRequest,
    principal_id: int = Depends(get_principal_id),
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 생성 (UI 모드로 시작)"""
    return service.create(ProjectCreate(creator_id=principal_id, **data.model_dump()))


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    """프로젝트 상세 조회"""
    project = service.find(ProjectFind(id=project_id))
    if not project:
        raise HTTPException(status_code=404, detail="프로젝트를 찾을 수 없습니다.")
    return project


@router.patch("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    data: ProjectPatchRequest,
    principal_id: int = Depends(get_principal_id),
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 수정"""
    return service.patch(ProjectPatch(
        id=project_id,
        updater_id=principal_id,
        **data.model_dump(exclude_unset=True),
    ))
