"""
구독 플랜별 기능 매트릭스

기능 → (FREE, TEAM, ENTERPRISE) 활성화 여부를 담은 정적 테이블.
모듈 로드 시 한 번 생성되며 런타임에 변경할 수 없다.
"""

import enum
from types import MappingProxyType
from typing import Mapping


class PlanType(str, enum.Enum):
    """구독 플랜 (하위 → 상위 순)"""
    FREE = "FREE"
    TEAM = "TEAM"
    ENTERPRISE = "ENTERPRISE"

    @property
    def rank(self) -> int:
        return PLAN_ORDER.index(self)


PLAN_ORDER: tuple[PlanType, ...] = (PlanType.FREE, PlanType.TEAM, PlanType.ENTERPRISE)


class FeatureType(str, enum.Enum):
    """플랜으로 제어되는 기능"""

    # 변경 워크플로우
    BACKWARD_COMPATIBILITY = "schemaflow.feature.backward-compatibility"
    SCHEMA_DRIFT = "schemaflow.feature.schema-drift"
    TASK_SCHEDULE_TIME = "schemaflow.feature.task-schedule-time"
    MULTI_TENANCY = "schemaflow.feature.multi-tenancy"
    DBA_WORKFLOW = "schemaflow.feature.dba-workflow"
    # 데이터 소스 개념은 아직 노출하지 않음 (모든 플랜 비활성)
    DATA_SOURCE = "schemaflow.feature.data-source"

    # 정책
    APPROVAL_POLICY = "schemaflow.feature.approval-policy"
    BACKUP_POLICY = "schemaflow.feature.backup-policy"

    # 관리/보안
    RBAC = "schemaflow.feature.rbac"
    THIRD_PARTY_LOGIN = "schemaflow.feature.3rd-party-login"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    FeatureType.BACKWARD_COMPATIBILITY: "Backward compatibility",
    FeatureType.SCHEMA_DRIFT: "Schema drift",
    FeatureType.TASK_SCHEDULE_TIME: "Task schedule time",
    FeatureType.MULTI_TENANCY: "Multi-tenancy",
    FeatureType.DBA_WORKFLOW: "DBA workflow",
    FeatureType.DATA_SOURCE: "Data source",
    FeatureType.APPROVAL_POLICY: "Approval policy",
    FeatureType.BACKUP_POLICY: "Backup policy",
    FeatureType.RBAC: "RBAC",
    FeatureType.THIRD_PARTY_LOGIN: "3rd party login",
}

FEATURE_MATRIX: Mapping[FeatureType, tuple[bool, bool, bool]] = MappingProxyType({
    FeatureType.BACKWARD_COMPATIBILITY: (False, True, True),
    FeatureType.SCHEMA_DRIFT: (False, True, True),
    FeatureType.TASK_SCHEDULE_TIME: (False, True, True),
    FeatureType.MULTI_TENANCY: (False, True, True),
    FeatureType.DBA_WORKFLOW: (False, False, True),
    FeatureType.DATA_SOURCE: (False, False, False),
    FeatureType.APPROVAL_POLICY: (False, True, True),
    FeatureType.BACKUP_POLICY: (False, True, True),
    FeatureType.RBAC: (False, True, True),
    FeatureType.THIRD_PARTY_LOGIN: (False, True, True),
})


def is_feature_enabled(plan: PlanType, feature: FeatureType) -> bool:
    """플랜에서 기능 사용 가능 여부"""
    return FEATURE_MATRIX[feature][plan.rank]


def minimum_supported_plan(feature: FeatureType) -> PlanType:
    """기능을 지원하는 최소 플랜 (지원 플랜이 없으면 ENTERPRISE)"""
    for plan, enabled in zip(PLAN_ORDER, FEATURE_MATRIX[feature]):
        if enabled:
            return plan
    return PlanType.ENTERPRISE


def access_error_message(feature: FeatureType) -> str:
    """기능 접근 불가 시 안내 메시지"""
    plan = minimum_supported_plan(feature)
    return f"{feature.display_name}은(는) {plan.value} 플랜 기능입니다. 업그레이드 후 이용해 주세요."
