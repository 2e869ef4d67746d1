"""
헬스체크 엔드포인트
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func

from ....core.config import APP_VERSION
from ....core.database import get_db
from ....models.project import Project, WorkflowType
from ....models.repository import Repository
from ....models.vcs import Vcs

router = APIRouter()


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """서비스 상태 확인"""
    project_count = db.query(func.count(Project.id)).scalar()
    vcs_project_count = db.query(func.count(Project.id)).filter(
        Project.workflow_type == WorkflowType.VCS
    ).scalar()
    repository_count = db.query(func.count(Repository.id)).scalar()
    vcs_count = db.query(func.count(Vcs.id)).scalar()

    return {
        "status": "ok",
        "service": "SchemaFlow",
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {
            "projects": project_count,
            "vcs_projects": vcs_project_count,
            "repositories": repository_count,
            "vcs": vcs_count,
        },
    }
