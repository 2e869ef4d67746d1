"""
리포지토리 서비스

프로젝트와 VCS 프로젝트의 연결(repository)을 관리한다.
생성/삭제 시 같은 트랜잭션 안에서 프로젝트의 워크플로우 모드를 함께 전환하므로
두 변경은 함께 커밋되거나 함께 롤백된다.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy import delete as sa_delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..core.errors import conflict, format_error, not_found
from ..core.query import SetBuilder, WhereBuilder
from ..models.project import WorkflowType
from ..models.repository import Repository
from ..schemas.repository import (
    RepositoryCreate, RepositoryFind, RepositoryPatch, RepositoryDelete, RepositoryResponse,
)

logger = logging.getLogger(__name__)

_TABLE = Repository.__table__


class WorkflowModeUpdater(Protocol):
    """호출자의 트랜잭션 안에서 프로젝트 워크플로우 모드를 변경"""

    def patch_project_workflow_mode(
        self,
        db: Session,
        project_id: int,
        updater_id: int,
        workflow_type: WorkflowType,
    ) -> None:
        ...


def _to_response(row) -> RepositoryResponse:
    return RepositoryResponse.model_validate(dict(row._mapping))


class RepositoryService:
    """리포지토리 CRUD 서비스"""

    def __init__(self, session_factory: sessionmaker, workflow_updater: WorkflowModeUpdater):
        self._session_factory = session_factory
        self._workflow_updater = workflow_updater

    def create(self, create: RepositoryCreate) -> RepositoryResponse:
        """리포지토리 생성 + 프로젝트 VCS 모드 전환"""
        try:
            with self._session_factory.begin() as db:
                repository = self._create(db, create)
        except SQLAlchemyError as e:
            logger.error(f"리포지토리 생성 실패 (project_id={create.project_id}): {e}")
            raise format_error(e) from e

        logger.info(
            f"리포지토리 생성: id={repository.id}, project_id={repository.project_id}, "
            f"path={repository.full_path}"
        )
        return repository

    def find_list(self, find: RepositoryFind) -> list[RepositoryResponse]:
        """필터 조건에 맞는 리포지토리 목록 (등록 순)"""
        try:
            with self._session_factory() as db:
                return _find_list(db, find)
        except SQLAlchemyError as e:
            raise format_error(e) from e

    def find(self, find: RepositoryFind) -> Optional[RepositoryResponse]:
        """단건 조회 - 없으면 None, 2건 이상이면 CONFLICT"""
        repositories = self.find_list(find)
        if not repositories:
            return None
        if len(repositories) > 1:
            raise conflict(
                f"리포지토리가 {len(repositories)}건 조회되었습니다. 1건이어야 합니다. "
                f"(filter: {find.model_dump(exclude_none=True)})"
            )
        return repositories[0]

    def patch(self, patch: RepositoryPatch) -> RepositoryResponse:
        """지정된 필드만 수정 - 대상이 없으면 NOT_FOUND"""
        try:
            with self._session_factory.begin() as db:
                repository = _patch(db, patch)
        except SQLAlchemyError as e:
            logger.error(f"리포지토리 수정 실패 (id={patch.id}): {e}")
            raise format_error(e) from e

        logger.info(f"리포지토리 수정: id={repository.id}, updater_id={patch.updater_id}")
        return repository

    def delete(self, delete: RepositoryDelete) -> None:
        """프로젝트의 리포지토리 삭제 + 프로젝트 UI 모드 복귀"""
        try:
            with self._session_factory.begin() as db:
                deleted = self._delete(db, delete)
        except SQLAlchemyError as e:
            logger.error(f"리포지토리 삭제 실패 (project_id={delete.project_id}): {e}")
            raise format_error(e) from e

        logger.info(f"리포지토리 삭제: project_id={delete.project_id}, {deleted}건")

    def _create(self, db: Session, create: RepositoryCreate) -> RepositoryResponse:
        # 프로젝트 모드 전환이 실패하면 INSERT 전에 중단
        self._workflow_updater.patch_project_workflow_mode(
            db, create.project_id, create.creator_id, WorkflowType.VCS
        )

        statement = (
            insert(_TABLE)
            .values(updater_id=create.creator_id, **create.model_dump())
            .returning(*_TABLE.c)
        )
        return _to_response(db.execute(statement).one())

    def _delete(self, db: Session, delete: RepositoryDelete) -> int:
        self._workflow_updater.patch_project_workflow_mode(
            db, delete.project_id, delete.deleter_id, WorkflowType.UI
        )

        where = WhereBuilder(_TABLE).eq("project_id", delete.project_id).build()
        result = db.execute(sa_delete(_TABLE).where(where))
        return result.rowcount


def _find_list(db: Session, find: RepositoryFind) -> list[RepositoryResponse]:
    where = (
        WhereBuilder(_TABLE)
        .eq("id", find.id)
        .eq("vcs_id", find.vcs_id)
        .eq("project_id", find.project_id)
        .eq("webhook_endpoint_id", find.webhook_endpoint_id)
        .build()
    )
    statement = select(_TABLE).where(where).order_by(_TABLE.c.id)
    return [_to_response(row) for row in db.execute(statement).all()]


def _patch(db: Session, patch: RepositoryPatch) -> RepositoryResponse:
    values = (
        SetBuilder(_TABLE)
        .set("updater_id", patch.updater_id)
        .set("branch_filter", patch.branch_filter)
        .set("base_directory", patch.base_directory)
        .set("file_path_template", patch.file_path_template)
        .set("schema_path_template", patch.schema_path_template)
        .set("access_token", patch.access_token)
        .set("expires_ts", patch.expires_ts)
        .set("refresh_token", patch.refresh_token)
        .touch("updated_ts")
        .build()
    )
    where = WhereBuilder(_TABLE).eq("id", patch.id).build()

    statement = update(_TABLE).where(where).values(values).returning(*_TABLE.c)
    row = db.execute(statement).first()
    if row is None:
        raise not_found(f"리포지토리를 찾을 수 없습니다: id={patch.id}")
    return _to_response(row)
