"""
구독 플랜 서비스

현재 플랜은 app_settings 에 저장되며 기능 사용 가능 여부는 정적 기능 매트릭스로 판단한다.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..core.errors import ErrorCode, StoreError, format_error
from ..core.features import (
    FEATURE_MATRIX, FeatureType, PlanType,
    access_error_message, is_feature_enabled, minimum_supported_plan,
)
from ..schemas.plan import FeatureResponse, PlanPatch, PlanResponse
from . import config_service

logger = logging.getLogger(__name__)


class PlanService:
    """플랜 조회/변경 및 기능 게이트"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_plan(self) -> PlanResponse:
        try:
            with self._session_factory() as db:
                value = config_service.get_setting(db, config_service.PLAN_TYPE_KEY)
        except SQLAlchemyError as e:
            raise format_error(e) from e

        try:
            plan_type = PlanType(str(value).upper())
        except ValueError:
            logger.warning(f"알 수 없는 플랜 값 '{value}' - FREE로 처리합니다.")
            plan_type = PlanType.FREE
        return PlanResponse(type=plan_type)

    def patch_plan(self, patch: PlanPatch) -> PlanResponse:
        try:
            with self._session_factory.begin() as db:
                config_service.put_setting(
                    db, config_service.PLAN_TYPE_KEY, patch.type.value, "구독 플랜"
                )
        except SQLAlchemyError as e:
            raise format_error(e) from e

        logger.info(f"플랜 변경: {patch.type.value}")
        return PlanResponse(type=patch.type)

    def feature_enabled(self, feature: FeatureType) -> bool:
        return is_feature_enabled(self.get_plan().type, feature)

    def require_feature(self, feature: FeatureType) -> None:
        """현재 플랜에서 사용할 수 없는 기능이면 FORBIDDEN"""
        if not self.feature_enabled(feature):
            raise StoreError(ErrorCode.FORBIDDEN, access_error_message(feature))

    def list_features(self) -> list[FeatureResponse]:
        plan_type = self.get_plan().type
        return [
            FeatureResponse(
                feature=feature,
                name=feature.display_name,
                minimum_plan=minimum_supported_plan(feature),
                enabled=is_feature_enabled(plan_type, feature),
            )
            for feature in FEATURE_MATRIX
        ]
