"""
VCS 연결 서비스
"""

import logging
from typing import Optional

from sqlalchemy import delete as sa_delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..core.errors import conflict, format_error, not_found
from ..core.query import SetBuilder, WhereBuilder
from ..models.repository import Repository
from ..models.vcs import Vcs, VcsType
from ..schemas.vcs import VcsCreate, VcsFind, VcsPatch, VcsDelete, VcsResponse

logger = logging.getLogger(__name__)

_TABLE = Vcs.__table__
_REPOSITORY = Repository.__table__


def _to_response(row) -> VcsResponse:
    return VcsResponse.model_validate(dict(row._mapping))


def default_api_url(vcs_type: VcsType, instance_url: str) -> str:
    """VCS 종류별 기본 API 주소"""
    if vcs_type == VcsType.GITLAB_SELF_HOST:
        return f"{instance_url.rstrip('/')}/api/v4"
    return instance_url


class VcsService:
    """VCS 연결 CRUD 서비스"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create(self, create: VcsCreate) -> VcsResponse:
        statement = (
            insert(_TABLE)
            .values(
                creator_id=create.creator_id,
                updater_id=create.creator_id,
                name=create.name,
                type=create.type,
                instance_url=create.instance_url.rstrip("/"),
                api_url=create.api_url or default_api_url(create.type, create.instance_url),
                application_id=create.application_id,
                secret=create.secret,
            )
            .returning(*_TABLE.c)
        )
        try:
            with self._session_factory.begin() as db:
                vcs = _to_response(db.execute(statement).one())
        except SQLAlchemyError as e:
            logger.error(f"VCS 생성 실패 ({create.instance_url}): {e}")
            raise format_error(e) from e

        logger.info(f"VCS 생성: id={vcs.id}, url={vcs.instance_url}")
        return vcs

    def find_list(self, find: VcsFind) -> list[VcsResponse]:
        where = WhereBuilder(_TABLE).eq("id", find.id).build()
        statement = select(_TABLE).where(where).order_by(_TABLE.c.id)
        try:
            with self._session_factory() as db:
                return [_to_response(row) for row in db.execute(statement).all()]
        except SQLAlchemyError as e:
            raise format_error(e) from e

    def find(self, find: VcsFind) -> Optional[VcsResponse]:
        vcs_list = self.find_list(find)
        if not vcs_list:
            return None
        if len(vcs_list) > 1:
            raise conflict(f"VCS가 {len(vcs_list)}건 조회되었습니다. 1건이어야 합니다.")
        return vcs_list[0]

    def patch(self, patch: VcsPatch) -> VcsResponse:
        values = (
            SetBuilder(_TABLE)
            .set("updater_id", patch.updater_id)
            .set("name", patch.name)
            .set("application_id", patch.application_id)
            .set("secret", patch.secret)
            .touch("updated_ts")
            .build()
        )
        where = WhereBuilder(_TABLE).eq("id", patch.id).build()
        statement = update(_TABLE).where(where).values(values).returning(*_TABLE.c)
        try:
            with self._session_factory.begin() as db:
                row = db.execute(statement).first()
                if row is None:
                    raise not_found(f"VCS를 찾을 수 없습니다: id={patch.id}")
                vcs = _to_response(row)
        except SQLAlchemyError as e:
            raise format_error(e) from e

        logger.info(f"VCS 수정: id={vcs.id}")
        return vcs

    def delete(self, delete: VcsDelete) -> None:
        """연결된 리포지토리가 남아 있으면 CONFLICT"""
        linked_count = (
            select(func.count())
            .select_from(_REPOSITORY)
            .where(WhereBuilder(_REPOSITORY).eq("vcs_id", delete.id).build())
        )
        try:
            with self._session_factory.begin() as db:
                linked = db.execute(linked_count).scalar_one()
                if linked:
                    raise conflict(
                        f"VCS(id={delete.id})에 연결된 리포지토리 {linked}건이 있어 삭제할 수 없습니다."
                    )
                where = WhereBuilder(_TABLE).eq("id", delete.id).build()
                result = db.execute(sa_delete(_TABLE).where(where))
                if result.rowcount == 0:
                    raise not_found(f"VCS를 찾을 수 없습니다: id={delete.id}")
        except SQLAlchemyError as e:
            raise format_error(e) from e

        logger.info(f"VCS 삭제: id={delete.id}, deleter_id={delete.deleter_id}")
