"""
구독 플랜 / 기능 Pydantic 스키마
"""

from pydantic import BaseModel

from ..core.features import PlanType, FeatureType


class PlanResponse(BaseModel):
    type: PlanType


class PlanPatch(BaseModel):
    type: PlanType


class FeatureResponse(BaseModel):
    feature: FeatureType
    name: str
    minimum_plan: PlanType
    enabled: bool
