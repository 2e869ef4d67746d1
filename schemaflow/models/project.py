"""
Project 모델 - 스키마 변경 관리 대상 프로젝트
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, func

from ..core.database import Base


class WorkflowType(str, enum.Enum):
    """스키마 변경 방식"""
    UI = "UI"    # 콘솔에서 직접 변경
    VCS = "VCS"  # VCS 연동 (GitOps)


class TenantMode(str, enum.Enum):
    """테넌트 모드"""
    DISABLED = "DISABLED"
    TENANT = "TENANT"


class Project(Base):
    """프로젝트"""
    __tablename__ = "project"

    id = Column(Integer, primary_key=True, autoincrement=True)
    creator_id = Column(Integer, nullable=False)
    created_ts = Column(DateTime, server_default=func.now(), nullable=False)
    updater_id = Column(Integer, nullable=False)
    updated_ts = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    name = Column(String(200), nullable=False)
    key = Column(String(50), nullable=False, unique=True)
    workflow_type = Column(Enum(WorkflowType), nullable=False, default=WorkflowType.UI)
    tenant_mode = Column(Enum(TenantMode), nullable=False, default=TenantMode.DISABLED)

    def __repr__(self):
        return f"<Project(id={self.id}, key='{self.key}', workflow={self.workflow_type})>"
