"""
API 의존성 - 서비스 조립 및 요청 주체 식별
"""

from fastapi import Depends, Header
from sqlalchemy.orm import sessionmaker

from ..core.config import SYSTEM_BOT_ID
from ..core.database import get_session_factory
from ..services.plan_service import PlanService
from ..services.project_service import ProjectService
from ..services.repository_service import RepositoryService
from ..services.vcs_service import VcsService


def get_principal_id(x_principal_id: int = Header(default=SYSTEM_BOT_ID)) -> int:
    """요청 주체 ID (인증 계층이 없으므로 헤더 값 사용)"""
    return x_principal_id


def get_plan_service(session_factory: sessionmaker = Depends(get_session_factory)) -> PlanService:
    return PlanService(session_factory)


def get_project_service(
    session_factory: sessionmaker = Depends(get_session_factory),
    plan_service: PlanService = Depends(get_plan_service),
) -> ProjectService:
    return ProjectService(session_factory, plan_service)


def get_vcs_service(session_factory: sessionmaker = Depends(get_session_factory)) -> VcsService:
    return VcsService(session_factory)


def get_repository_service(
    session_factory: sessionmaker = Depends(get_session_factory),
    project_service: ProjectService = Depends(get_project_service),
) -> RepositoryService:
    return RepositoryService(session_factory, project_service)
