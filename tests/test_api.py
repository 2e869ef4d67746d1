import pytest

from schemaflow.core.config import settings

PRINCIPAL = {"X-Principal-Id": "42"}


@pytest.fixture
def vcs_id(client):
    response = client.post("/api/v1/vcs", json={
        "name": "GitLab",
        "instance_url": "https://gitlab.example.com",
        "application_id": "app",
        "secret": "secret",
    })
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def project_id(client):
    response = client.post("/api/v1/projects", json={"name": "Shop", "key": "SHOP"}, headers=PRINCIPAL)
    assert response.status_code == 201
    return response.json()["id"]


def _link(client, project_id, vcs_id, **overrides):
    body = {
        "vcs_id": vcs_id,
        "name": "svc",
        "full_path": "org/svc",
        "branch_filter": "main",
        "external_id": "42",
        "access_token": "t1",
    }
    body.update(overrides)
    return client.post(f"/api/v1/projects/{project_id}/repository", json=body, headers=PRINCIPAL)


def test_root_and_health(client):
    assert client.get("/").json()["service"] == "SchemaFlow"

    health = client.get("/api/v1/health").json()
    assert health["status"] == "ok"
    assert health["database"]["projects"] == 0


def test_create_project_uses_principal_header(client, project_id):
    project = client.get(f"/api/v1/projects/{project_id}").json()

    assert project["creator_id"] == 42
    assert project["workflow_type"] == "UI"


def test_create_project_rejects_lowercase_key(client):
    response = client.post("/api/v1/projects", json={"name": "Shop", "key": "shop"})

    assert response.status_code == 422


def test_duplicate_project_key_is_409(client, project_id):
    response = client.post("/api/v1/projects", json={"name": "Again", "key": "SHOP"})

    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


def test_missing_project_is_404(client):
    assert client.get("/api/v1/projects/999").status_code == 404
    assert client.patch("/api/v1/projects/999", json={"name": "x"}).status_code == 404


def test_repository_lifecycle(client, project_id, vcs_id):
    created = _link(client, project_id, vcs_id)
    assert created.status_code == 201
    repository = created.json()
    assert "access_token" not in repository
    assert "webhook_secret_token" not in repository
    assert len(repository["webhook_endpoint_id"]) == 32

    project = client.get(f"/api/v1/projects/{project_id}").json()
    assert project["workflow_type"] == "VCS"

    patched = client.patch(
        f"/api/v1/projects/{project_id}/repository",
        json={"base_directory": "migrations"},
        headers={"X-Principal-Id": "7"},
    )
    assert patched.status_code == 200
    assert patched.json()["base_directory"] == "migrations"
    assert patched.json()["branch_filter"] == "main"
    assert patched.json()["updater_id"] == 7

    listed = client.get("/api/v1/repositories", params={"vcs_id": vcs_id}).json()
    assert [r["id"] for r in listed] == [repository["id"]]

    deleted = client.delete(f"/api/v1/projects/{project_id}/repository")
    assert deleted.status_code == 200
    assert client.get(f"/api/v1/projects/{project_id}/repository").status_code == 404
    assert client.get(f"/api/v1/projects/{project_id}").json()["workflow_type"] == "UI"


def test_repository_fills_webhook_host_from_settings(client, project_id, vcs_id, repository_service):
    from schemaflow.schemas.repository import RepositoryFind

    _link(client, project_id, vcs_id)

    repository = repository_service.find(RepositoryFind(project_id=project_id))
    assert repository.webhook_url_host == settings.external_url
    assert len(repository.webhook_secret_token) == 32


def test_second_repository_for_project_is_409(client, project_id, vcs_id):
    assert _link(client, project_id, vcs_id).status_code == 201

    response = _link(client, project_id, vcs_id)

    assert response.status_code == 409
    assert client.get(f"/api/v1/projects/{project_id}").json()["workflow_type"] == "VCS"


def test_repository_for_unknown_vcs_is_404(client, project_id):
    assert _link(client, project_id, 999).status_code == 404


def test_repository_for_unknown_project_is_404(client, vcs_id):
    response = _link(client, 999, vcs_id)

    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


def test_delete_linked_vcs_is_409(client, project_id, vcs_id):
    _link(client, project_id, vcs_id)

    response = client.delete(f"/api/v1/vcs/{vcs_id}")

    assert response.status_code == 409
    client.delete(f"/api/v1/projects/{project_id}/repository")
    assert client.delete(f"/api/v1/vcs/{vcs_id}").status_code == 200


def test_vcs_response_hides_secret(client, vcs_id):
    vcs = client.get(f"/api/v1/vcs/{vcs_id}").json()

    assert "secret" not in vcs
    assert vcs["api_url"] == "https://gitlab.example.com/api/v4"


def test_plan_and_tenant_gate(client):
    assert client.get("/api/v1/plan").json() == {"type": "FREE"}

    forbidden = client.post("/api/v1/projects", json={"name": "T", "key": "TEN", "tenant_mode": "TENANT"})
    assert forbidden.status_code == 403
    assert forbidden.json()["code"] == "forbidden"

    assert client.patch("/api/v1/plan", json={"type": "TEAM"}).json() == {"type": "TEAM"}
    allowed = client.post("/api/v1/projects", json={"name": "T", "key": "TEN", "tenant_mode": "TENANT"})
    assert allowed.status_code == 201

    features = {f["feature"]: f for f in client.get("/api/v1/features").json()}
    assert features["schemaflow.feature.multi-tenancy"]["enabled"] is True
