"""
구독 플랜 / 기능 API
"""

from fastapi import APIRouter, Depends

from ....schemas.plan import FeatureResponse, PlanPatch, PlanResponse
from ....services.plan_service import PlanService
from ...deps import get_plan_service

router = APIRouter(tags=["plan"])


@router.get("/plan", response_model=PlanResponse)
def get_plan(service: PlanService = Depends(get_plan_service)):
    """현재 플랜 조회"""
    return service.get_plan()


@router.patch("/plan", response_model=PlanResponse)
def update_plan(data: PlanPatch, service: PlanService = Depends(get_plan_service)):
    """플랜 변경"""
    return service.patch_plan(data)


@router.get("/features", response_model=list[FeatureResponse])
def list_features(service: PlanService = Depends(get_plan_service)):
    """기능 매트릭스 및 현재 플랜 사용 가능 여부"""
    return service.list_features()
