"""
프로젝트 서비스
"""

import logging
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..core.errors import conflict, format_error, not_found
from ..core.features import FeatureType
from ..core.query import SetBuilder, WhereBuilder
from ..models.project import Project, TenantMode, WorkflowType
from ..schemas.project import ProjectCreate, ProjectFind, ProjectPatch, ProjectResponse

logger = logging.getLogger(__name__)

_TABLE = Project.__table__


def _to_response(row) -> ProjectResponse:
    return ProjectResponse.model_validate(dict(row._mapping))


class ProjectService:
    """프로젝트 CRUD 서비스"""

    def __init__(self, session_factory: sessionmaker, plan_service=None):
        self._session_factory = session_factory
        self._plan_service = plan_service

    def create(self, create: ProjectCreate) -> ProjectResponse:
        self._check_tenant_mode(create.tenant_mode)

        statement = (
            insert(_TABLE)
            .values(
                creator_id=create.creator_id,
                updater_id=create.creator_id,
                name=create.name,
                key=create.key,
                workflow_type=WorkflowType.UI,
                tenant_mode=create.tenant_mode,
            )
            .returning(*_TABLE.c)
        )
        try:
            with self._session_factory.begin() as db:
                project = _to_response(db.execute(statement).one())
        except SQLAlchemyError as e:
            logger.error(f"프로젝트 생성 실패 (key={create.key}): {e}")
            raise format_error(e) from e

        logger.info(f"프로젝트 생성: id={project.id}, key={project.key}")
        return project

    def find_list(self, find: ProjectFind) -> list[ProjectResponse]:
        where = (
            WhereBuilder(_TABLE)
            .eq("id", find.id)
            .eq("key", find.key)
            .eq("workflow_type", find.workflow_type)
            .build()
        )
        statement = select(_TABLE).where(where).order_by(_TABLE.c.id)
        try:
            with self._session_factory() as db:
                return [_to_response(row) for row in db.execute(statement).all()]
        except SQLAlchemyError as e:
            raise format_error(e) from e

    def find(self, find: ProjectFind) -> Optional[ProjectResponse]:
        """단건 조회 - 없으면 None, 2건 이상이면 CONFLICT"""
        projects = self.find_list(find)
        if not projects:
            return None
        if len(projects) > 1:
            raise conflict(
                f"프로젝트가 {len(projects)}건 조회되었습니다. 1건이어야 합니다. "
                f"(filter: {find.model_dump(exclude_none=True)})"
            )
        return projects[0]

    def patch(self, patch: ProjectPatch) -> ProjectResponse:
        self._check_tenant_mode(patch.tenant_mode)
        try:
            with self._session_factory.begin() as db:
                project = self.patch_project_tx(db, patch)
        except SQLAlchemyError as e:
            logger.error(f"프로젝트 수정 실패 (id={patch.id}): {e}")
            raise format_error(e) from e

        logger.info(f"프로젝트 수정: id={project.id}, updater_id={patch.updater_id}")
        return project

    def patch_project_tx(self, db: Session, patch: ProjectPatch) -> ProjectResponse:
        """호출자 세션(트랜잭션) 안에서 프로젝트 수정"""
        values = (
            SetBuilder(_TABLE)
            .set("updater_id", patch.updater_id)
            .set("name", patch.name)
            .set("key", patch.key)
            .set("workflow_type", patch.workflow_type)
            .set("tenant_mode", patch.tenant_mode)
            .touch("updated_ts")
            .build()
        )
        where = WhereBuilder(_TABLE).eq("id", patch.id).build()

        statement = update(_TABLE).where(where).values(values).returning(*_TABLE.c)
        row = db.execute(statement).first()
        if row is None:
            raise not_found(f"프로젝트를 찾을 수 없습니다: id={patch.id}")
        return _to_response(row)

    def patch_project_workflow_mode(
        self,
        db: Session,
        project_id: int,
        updater_id: int,
        workflow_type: WorkflowType,
    ) -> None:
        """리포지토리 생성/삭제 시 워크플로우 모드 전환 (호출자 트랜잭션 사용)"""
        project = self.patch_project_tx(
            db,
            ProjectPatch(id=project_id, updater_id=updater_id, workflow_type=workflow_type),
        )
        logger.info(f"프로젝트 워크플로우 전환: id={project.id} → {project.workflow_type.value}")

    def _check_tenant_mode(self, tenant_mode: Optional[TenantMode]):
        if tenant_mode == TenantMode.TENANT and self._plan_service is not None:
            self._plan_service.require_feature(FeatureType.MULTI_TENANCY)
