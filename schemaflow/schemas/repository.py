"""
Repository Pydantic 스키마
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RepositoryCreate(BaseModel):
    """리포지토리 생성 요청 (생성과 동시에 프로젝트가 VCS 모드로 전환됨)"""
    creator_id: int
    vcs_id: int
    project_id: int

    name: str = Field(..., max_length=200)
    full_path: str = Field(..., max_length=500)
    web_url: str = Field(default="", max_length=500)

    branch_filter: str = Field(default="", max_length=200)
    base_directory: str = Field(default="", max_length=500)
    file_path_template: str = Field(default="", max_length=500)
    schema_path_template: str = Field(default="", max_length=500)

    external_id: str = Field(..., max_length=200)
    external_webhook_id: str = Field(default="", max_length=200)

    webhook_url_host: str = Field(..., max_length=500)
    webhook_endpoint_id: str = Field(..., max_length=200)
    webhook_secret_token: str = Field(..., max_length=200)

    access_token: str = Field(..., max_length=500)
    expires_ts: int = 0
    refresh_token: str = Field(default="", max_length=500)


class RepositoryFind(BaseModel):
    """조회 필터 - 지정된 필드만 AND 조건으로 적용"""
    id: Optional[int] = None
    vcs_id: Optional[int] = None
    project_id: Optional[int] = None
    webhook_endpoint_id: Optional[str] = None


class RepositoryPatch(BaseModel):
    """부분 수정 요청 - None 필드는 변경하지 않음"""
    id: int
    updater_id: int

    branch_filter: Optional[str] = Field(None, max_length=200)
    base_directory: Optional[str] = Field(None, max_length=500)
    file_path_template: Optional[str] = Field(None, max_length=500)
    schema_path_template: Optional[str] = Field(None, max_length=500)

    # 토큰 갱신
    access_token: Optional[str] = Field(None, max_length=500)
    expires_ts: Optional[int] = None
    refresh_token: Optional[str] = Field(None, max_length=500)


class RepositoryDelete(BaseModel):
    """프로젝트 단위 삭제 요청 (프로젝트는 UI 모드로 복귀)"""
    project_id: int
    deleter_id: int


class RepositoryResponse(BaseModel):
    id: int
    creator_id: int
    created_ts: datetime
    updater_id: int
    updated_ts: datetime

    vcs_id: int
    project_id: int

    name: str
    full_path: str
    web_url: str

    branch_filter: str
    base_directory: str
    file_path_template: str
    schema_path_template: str

    external_id: str
    external_webhook_id: str

    webhook_url_host: str
    webhook_endpoint_id: str
    webhook_secret_token: str

    access_token: str
    expires_ts: int
    refresh_token: str

    model_config = {"from_attributes": True}


class RepositoryPublic(BaseModel):
    """API 응답 스키마 - 토큰/시크릿 필드 제외 (보안)"""
    id: int
    creator_id: int
    created_ts: datetime
    updater_id: int
    updated_ts: datetime
    vcs_id: int
    project_id: int
    name: str
    full_path: str
    web_url: str
    branch_filter: str
    base_directory: str
    file_path_template: str
    schema_path_template: str
    external_id: str
    webhook_endpoint_id: str

    model_config = {"from_attributes": True}


# ============================================================
# API 요청 (생성자/프로젝트는 요청 컨텍스트에서 채움)
# ============================================================

class RepositoryCreateRequest(BaseModel):
    vcs_id: int
    name: str = Field(..., max_length=200)
    full_path: str = Field(..., max_length=500)
    web_url: str = Field(default="", max_length=500)
    branch_filter: str = Field(default="", max_length=200)
    base_directory: str = Field(default="", max_length=500)
    file_path_template: str = Field(default="", max_length=500)
    schema_path_template: str = Field(default="", max_length=500)
    external_id: str = Field(..., max_length=200)
    external_webhook_id: str = Field(default="", max_length=200)
    webhook_url_host: Optional[str] = Field(None, max_length=500)
    webhook_endpoint_id: Optional[str] = Field(None, max_length=200)
    webhook_secret_token: Optional[str] = Field(None, max_length=200)
    access_token: str = Field(..., max_length=500)
    expires_ts: int = 0
    refresh_token: str = Field(default="", max_length=500)


class RepositoryPatchRequest(BaseModel):
    branch_filter: Optional[str] = Field(None, max_length=200)
    base_directory: Optional[str] = Field(None, max_length=500)
    file_path_template: Optional[str] = Field(None, max_length=500)
    schema_path_template: Optional[str] = Field(None, max_length=500)
    access_token: Optional[str] = Field(None, max_length=500)
    expires_ts: Optional[int] = None
    refresh_token: Optional[str] = Field(None, max_length=500)
