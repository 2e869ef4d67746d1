"""
설정 관리 서비스 - DB-first, .env fallback
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..core.config import settings
from ..models.app_setting import AppSetting

logger = logging.getLogger(__name__)

PLAN_TYPE_KEY = "plan.type"


def get_setting(db: Session, key: str, default: str = None) -> Optional[str]:
    """DB에서 설정 조회, 없으면 .env fallback"""
    row = db.query(AppSetting).filter(AppSetting.key == key).first()
    if row:
        return row.value

    # .env fallback
    env_map = {
        PLAN_TYPE_KEY: settings.plan_type,
    }
    return env_map.get(key, default)


def put_setting(db: Session, key: str, value: str, description: str = None) -> AppSetting:
    """설정 저장 (없으면 생성) - 커밋은 호출자 책임"""
    row = db.query(AppSetting).filter(AppSetting.key == key).first()
    if row:
        row.value = value
        if description is not None:
            row.description = description
    else:
        row = AppSetting(key=key, value=value, description=description)
        db.add(row)
    db.flush()
    logger.info(f"설정 저장: {key}={value}")
    return row
