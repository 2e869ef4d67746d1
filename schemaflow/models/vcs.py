"""
VCS 모델 - 외부 VCS(GitLab) 연결 정보
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, func

from ..core.database import Base


class VcsType(str, enum.Enum):
    """VCS 종류"""
    GITLAB_SELF_HOST = "GITLAB_SELF_HOST"


class Vcs(Base):
    """VCS 연결 (OAuth 애플리케이션 정보 포함)"""
    __tablename__ = "vcs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    creator_id = Column(Integer, nullable=False)
    created_ts = Column(DateTime, server_default=func.now(), nullable=False)
    updater_id = Column(Integer, nullable=False)
    updated_ts = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    name = Column(String(100), nullable=False)
    type = Column(Enum(VcsType), nullable=False, default=VcsType.GITLAB_SELF_HOST)
    instance_url = Column(String(500), nullable=False)
    api_url = Column(String(500), nullable=False)
    application_id = Column(String(200), nullable=False)
    secret = Column(String(500), nullable=False)

    def __repr__(self):
        return f"<Vcs(id={self.id}, name='{self.name}', url='{self.instance_url}')>"
