"""
Project Pydantic 스키마
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models.project import WorkflowType, TenantMode


class ProjectCreate(BaseModel):
    creator_id: int
    name: str = Field(..., max_length=200)
    key: str = Field(..., max_length=50, pattern="^[A-Z][A-Z0-9]*$")
    tenant_mode: TenantMode = TenantMode.DISABLED


class ProjectFind(BaseModel):
    id: Optional[int] = None
    key: Optional[str] = None
    workflow_type: Optional[WorkflowType] = None


class ProjectPatch(BaseModel):
    id: int
    updater_id: int
    name: Optional[str] = Field(None, max_length=200)
    key: Optional[str] = Field(None, max_length=50, pattern="^[A-Z][A-Z0-9]*$")
    workflow_type: Optional[WorkflowType] = None
    tenant_mode: Optional[TenantMode] = None


class ProjectResponse(BaseModel):
    id: int
    creator_id: int
    created_ts: datetime
    updater_id: int
    updated_ts: datetime
    name: str
    key: str
    workflow_type: WorkflowType
    tenant_mode: TenantMode

    model_config = {"from_attributes": True}


class ProjectCreateRequest(BaseModel):
    name: str = Field(..., max_length=200)
    key: str = Field(..., max_length=50, pattern="^[A-Z][A-Z0-9]*$")
    tenant_mode: TenantMode = TenantMode.DISABLED


class ProjectPatchRequest(BaseModel):
    """워크플로우 모드는 리포지토리 연결로만 전환되므로 제외"""
    name: Optional[str] = Field(None, max_length=200)
    key: Optional[str] = Field(None, max_length=50, pattern="^[A-Z][A-Z0-9]*$")
    tenant_mode: Optional[TenantMode] = None
