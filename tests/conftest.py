import os

# 앱 모듈 import 전에 테스트용 설정 주입
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["RUN_MIGRATIONS"] = "false"
os.environ["PLAN_TYPE"] = "FREE"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from schemaflow import models
from schemaflow.core.database import Base, build_engine, get_db, get_session_factory
from schemaflow.services.plan_service import PlanService
from schemaflow.services.project_service import ProjectService
from schemaflow.services.repository_service import RepositoryService
from schemaflow.services.vcs_service import VcsService


@pytest.fixture
def engine():
    """테스트마다 독립된 in-memory SQLite"""
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def plan_service(session_factory):
    return PlanService(session_factory)


@pytest.fixture
def project_service(session_factory, plan_service):
    return ProjectService(session_factory, plan_service)


@pytest.fixture
def vcs_service(session_factory):
    return VcsService(session_factory)


@pytest.fixture
def repository_service(session_factory, project_service):
    return RepositoryService(session_factory, project_service)


@pytest.fixture
def project_factory(session_factory):
    def _create(project_id=None, key=None, workflow_type=models.WorkflowType.UI):
        with session_factory.begin() as db:
            project = models.Project(
                id=project_id,
                creator_id=1,
                updater_id=1,
                name=f"Project {key or project_id}",
                key=key or f"P{project_id}",
                workflow_type=workflow_type,
                tenant_mode=models.TenantMode.DISABLED,
            )
            db.add(project)
            db.flush()
            return project.id
    return _create


@pytest.fixture
def vcs_factory(session_factory):
    def _create(vcs_id=None, name="GitLab"):
        with session_factory.begin() as db:
            vcs = models.Vcs(
                id=vcs_id,
                creator_id=1,
                updater_id=1,
                name=name,
                type=models.VcsType.GITLAB_SELF_HOST,
                instance_url="https://gitlab.example.com",
                api_url="https://gitlab.example.com/api/v4",
                application_id="app-id",
                secret="app-secret",
            )
            db.add(vcs)
            db.flush()
            return vcs.id
    return _create


@pytest.fixture
def client(session_factory):
    from schemaflow.main import app

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
