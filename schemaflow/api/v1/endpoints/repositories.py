"""
리포지토리(VCS 연동) API
"""

import secrets
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ....core.config import settings
from ....schemas.repository import (
    RepositoryCreate, RepositoryCreateRequest, RepositoryDelete, RepositoryFind,
    RepositoryPatch, RepositoryPatchRequest, RepositoryPublic,
)
from ....schemas.vcs import VcsFind
from ....services.repository_service import RepositoryService
from ....services.vcs_service import VcsService
from ...deps import get_principal_id, get_repository_service, get_vcs_service

router = APIRouter(tags=["repositories"])


@router.get("/repositories", response_model=list[RepositoryPublic])
def list_repositories(
    vcs_id: Optional[int] = None,
    webhook_endpoint_id: Optional[str] = None,
    service: RepositoryService = Depends(get_repository_service),
):
    """리포지토리 목록 조회"""
    return service.find_list(RepositoryFind(vcs_id=vcs_id, webhook_endpoint_id=webhook_endpoint_id))


@router.post("/projects/{project_id}/repository", response_model=RepositoryPublic, status_code=201)
def create_repository(
    project_id: int,
    data: RepositoryCreateRequest,
    principal_id: int = Depends(get_principal_id),
    service: RepositoryService = Depends(get_repository_service),
    vcs_service: VcsService = Depends(get_vcs_service),
):
    """프로젝트에 리포지토리 연결 (프로젝트는 VCS 모드로 전환)"""
    # FK 검증
    if not vcs_service.find(VcsFind(id=data.vcs_id)):
        raise HTTPException(status_code=404, detail="VCS를 찾을 수 없습니다.")

    values = data.model_dump()
    values["webhook_url_host"] = data.webhook_url_host or settings.external_url
    values["webhook_endpoint_id"] = data.webhook_endpoint_id or uuid.uuid4().hex
    values["webhook_secret_token"] = data.webhook_secret_token or secrets.token_hex(16)

    return service.create(RepositoryCreate(
        creator_id=principal_id,
        project_id=project_id,
        **values,
    ))


@router.get("/projects/{project_id}/repository", response_model=RepositoryPublic)
def get_repository(project_id: int, service: RepositoryService = Depends(get_repository_service)):
    """프로젝트의 리포지토리 조회"""
    repository = service.find(RepositoryFind(project_id=project_id))
    if not repository:
        raise HTTPException(status_code=404, detail="리포지토리를 찾을 수 없습니다.")
    return repository


@router.patch("/projects/{project_id}/repository", response_model=RepositoryPublic)
def update_repository(
    project_id: int,
    data: RepositoryPatchRequest,
    principal_id: int = Depends(get_principal_id),
    service: RepositoryService = Depends(get_repository_service),
):
    """리포지토리 설정/토큰 수정"""
    repository = service.find(RepositoryFind(project_id=project_id))
    if not repository:
        raise HTTPException(status_code=404, detail="리포지토리를 찾을 수 없습니다.")

    return service.patch(RepositoryPatch(
        id=repository.id,
        updater_id=principal_id,
        **data.model_dump(exclude_unset=True),
    ))


@router.delete("/projects/{project_id}/repository")
def delete_repository(
    project_id: int,
    principal_id: int = Depends(get_principal_id),
    service: RepositoryService = Depends(get_repository_service),
):
    """리포지토리 연결 해제 (프로젝트는 UI 모드로 복귀)"""
    repository = service.find(RepositoryFind(project_id=project_id))
    if not repository:
        raise HTTPException(status_code=404, detail="리포지토리를 찾을 수 없습니다.")

    service.delete(RepositoryDelete(project_id=project_id, deleter_id=principal_id))
    return {"message": f"'{repository.full_path}' 리포지토리 연결이 해제되었습니다."}
