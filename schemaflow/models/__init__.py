from .project import Project, WorkflowType, TenantMode
from .vcs import Vcs, VcsType
from .repository import Repository
from .app_setting import AppSetting

__all__ = [
    "Project", "WorkflowType", "TenantMode",
    "Vcs", "VcsType", "Repository", "AppSetting",
]
