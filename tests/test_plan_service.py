import pytest

from schemaflow.core.errors import ErrorCode, StoreError
from schemaflow.core.features import FEATURE_MATRIX, FeatureType, PlanType
from schemaflow.schemas.plan import PlanPatch
from schemaflow.services import config_service


def test_plan_falls_back_to_environment(plan_service):
    assert plan_service.get_plan().type == PlanType.FREE


def test_patch_plan_persists(plan_service, db_session):
    plan_service.patch_plan(PlanPatch(type=PlanType.ENTERPRISE))

    assert plan_service.get_plan().type == PlanType.ENTERPRISE
    assert config_service.get_setting(db_session, config_service.PLAN_TYPE_KEY) == "ENTERPRISE"


def test_unknown_stored_plan_is_treated_as_free(plan_service, session_factory):
    with session_factory.begin() as db:
        config_service.put_setting(db, config_service.PLAN_TYPE_KEY, "platinum")

    assert plan_service.get_plan().type == PlanType.FREE


def test_put_setting_updates_existing_row(session_factory):
    with session_factory.begin() as db:
        config_service.put_setting(db, "plan.type", "TEAM", "구독 플랜")
    with session_factory.begin() as db:
        row = config_service.put_setting(db, "plan.type", "FREE")
        assert row.description == "구독 플랜"

    with session_factory() as db:
        assert config_service.get_setting(db, "plan.type") == "FREE"


def test_unknown_key_uses_default(db_session):
    assert config_service.get_setting(db_session, "missing.key", "fallback") == "fallback"


def test_require_feature(plan_service):
    with pytest.raises(StoreError) as exc_info:
        plan_service.require_feature(FeatureType.MULTI_TENANCY)
    assert exc_info.value.code == ErrorCode.FORBIDDEN

    plan_service.patch_plan(PlanPatch(type=PlanType.TEAM))
    plan_service.require_feature(FeatureType.MULTI_TENANCY)


def test_list_features_reflects_current_plan(plan_service):
    features = {f.feature: f for f in plan_service.list_features()}

    assert set(features) == set(FEATURE_MATRIX)
    assert features[FeatureType.MULTI_TENANCY].enabled is False
    assert features[FeatureType.MULTI_TENANCY].minimum_plan == PlanType.TEAM
