"""
VCS 연결 API
"""

from fastapi import APIRouter, Depends, HTTPException

from ....schemas.vcs import (
    VcsCreate, VcsCreateRequest, VcsDelete, VcsFind, VcsPatch, VcsPatchRequest, VcsResponse,
)
from ....services.vcs_service import VcsService
from ...deps import get_principal_id, get_vcs_service

router = APIRouter(prefix="/vcs", tags=["vcs"])


@router.get("", response_model=list[VcsResponse])
def list_vcs(service: VcsService = Depends(get_vcs_service)):
    """VCS 목록 조회"""
    return service.find_list(VcsFind())


@router.post("", response_model=VcsResponse, status_code=201)
def create_vcs(
    data: VcsCreateRequest,
    principal_id: int = Depends(get_principal_id),
    service: VcsService = Depends(get_vcs_service),
):
    """VCS 등록"""
    return service.create(VcsCreate(creator_id=principal_id, **data.model_dump()))


@router.get("/{vcs_id}", response_model=VcsResponse)
def get_vcs(vcs_id: int, service: VcsService = Depends(get_vcs_service)):
    """VCS 상세 조회"""
    vcs = service.find(VcsFind(id=vcs_id))
    if not vcs:
        raise HTTPException(status_code=404, detail="VCS를 찾을 수 없습니다.")
    return vcs


@router.patch("/{vcs_id}", response_model=VcsResponse)
def update_vcs(
    vcs_id: int,
    data: VcsPatchRequest,
    principal_id: int = Depends(get_principal_id),
    service: VcsService = Depends(get_vcs_service),
):
    """VCS 수정"""
    return service.patch(VcsPatch(
        id=vcs_id,
        updater_id=principal_id,
        **data.model_dump(exclude_unset=True),
    ))


@router.delete("/{vcs_id}")
def delete_vcs(
    vcs_id: int,
    principal_id: int = Depends(get_principal_id),
    service: VcsService = Depends(get_vcs_service),
):
    """VCS 삭제 (연결된 리포지토리가 있으면 409)"""
    service.delete(VcsDelete(id=vcs_id, deleter_id=principal_id))
    return {"message": f"VCS(id={vcs_id})가 삭제되었습니다."}
