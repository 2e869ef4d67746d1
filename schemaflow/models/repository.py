"""
Repository 모델 - 프로젝트와 VCS 프로젝트 연결 정보
"""

from sqlalchemy import Column, Integer, BigInteger, String, DateTime, ForeignKey, Index, func

from ..core.database import Base


class Repository(Base):
    """VCS 리포지토리 연결 (프로젝트당 최대 1개)"""
    __tablename__ = "repository"

    id = Column(Integer, primary_key=True, autoincrement=True)
    creator_id = Column(Integer, nullable=False)
    created_ts = Column(DateTime, server_default=func.now(), nullable=False)
    updater_id = Column(Integer, nullable=False)
    updated_ts = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    vcs_id = Column(Integer, ForeignKey("vcs.id"), nullable=False)
    project_id = Column(Integer, ForeignKey("project.id"), nullable=False, unique=True)

    # 표시용 정보
    name = Column(String(200), nullable=False)
    full_path = Column(String(500), nullable=False)
    web_url = Column(String(500), nullable=False, default="")

    # 동기화 설정
    branch_filter = Column(String(200), nullable=False, default="")
    base_directory = Column(String(500), nullable=False, default="")
    file_path_template = Column(String(500), nullable=False, default="")
    schema_path_template = Column(String(500), nullable=False, default="")

    # 외부 참조
    external_id = Column(String(200), nullable=False)
    external_webhook_id = Column(String(200), nullable=False)

    # Webhook 라우팅
    webhook_url_host = Column(String(500), nullable=False)
    webhook_endpoint_id = Column(String(200), nullable=False)
    webhook_secret_token = Column(String(200), nullable=False)

    # OAuth 토큰
    access_token = Column(String(500), nullable=False)
    expires_ts = Column(BigInteger, nullable=False, default=0)
    refresh_token = Column(String(500), nullable=False)

    __table_args__ = (
        Index("idx_repository_webhook_endpoint_id", "webhook_endpoint_id"),
    )

    def __repr__(self):
        return f"<Repository(id={self.id}, project_id={self.project_id}, path='{self.full_path}')>"
