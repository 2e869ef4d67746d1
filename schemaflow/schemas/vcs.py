"""
VCS Pydantic 스키마
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models.vcs import VcsType


class VcsCreate(BaseModel):
    creator_id: int
    name: str = Field(..., max_length=100)
    type: VcsType = VcsType.GITLAB_SELF_HOST
    instance_url: str = Field(..., max_length=500, pattern="^https?://")
    api_url: Optional[str] = Field(None, max_length=500)
    application_id: str = Field(..., max_length=200)
    secret: str = Field(..., max_length=500)


class VcsFind(BaseModel):
    id: Optional[int] = None


class VcsPatch(BaseModel):
    id: int
    updater_id: int
    name: Optional[str] = Field(None, max_length=100)
    application_id: Optional[str] = Field(None, max_length=200)
    secret: Optional[str] = Field(None, max_length=500)


class VcsDelete(BaseModel):
    id: int
    deleter_id: int


class VcsResponse(BaseModel):
    """응답 스키마 - secret 필드 제외 (보안)"""
    id: int
    creator_id: int
    created_ts: datetime
    updater_id: int
    updated_ts: datetime
    name: str
    type: VcsType
    instance_url: str
    api_url: str
    application_id: str

    model_config = {"from_attributes": True}


class VcsCreateRequest(BaseModel):
    name: str = Field(..., max_length=100)
    type: VcsType = VcsType.GITLAB_SELF_HOST
    instance_url: str = Field(..., max_length=500, pattern="^https?://")
    api_url: Optional[str] = Field(None, max_length=500)
    application_id: str = Field(..., max_length=200)
    secret: str = Field(..., max_length=500)


class VcsPatchRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    application_id: Optional[str] = Field(None, max_length=200)
    secret: Optional[str] = Field(None, max_length=500)
