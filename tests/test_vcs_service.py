import pytest

from schemaflow.core.errors import ErrorCode, StoreError
from schemaflow.models.vcs import VcsType
from schemaflow.schemas.vcs import VcsCreate, VcsDelete, VcsFind, VcsPatch
from schemaflow.services.vcs_service import default_api_url


def _create(vcs_service, **overrides):
    values = dict(
        creator_id=1,
        name="Company GitLab",
        instance_url="https://gitlab.example.com/",
        application_id="app",
        secret="secret",
    )
    values.update(overrides)
    return vcs_service.create(VcsCreate(**values))


def test_create_fills_default_api_url(vcs_service):
    vcs = _create(vcs_service)

    assert vcs.type == VcsType.GITLAB_SELF_HOST
    assert vcs.instance_url == "https://gitlab.example.com"
    assert vcs.api_url == "https://gitlab.example.com/api/v4"
    assert not hasattr(vcs, "secret")


def test_create_keeps_explicit_api_url(vcs_service):
    vcs = _create(vcs_service, api_url="https://api.gitlab.example.com")

    assert vcs.api_url == "https://api.gitlab.example.com"


def test_default_api_url_strips_trailing_slash():
    assert default_api_url(VcsType.GITLAB_SELF_HOST, "https://git.local/") == "https://git.local/api/v4"


def test_patch_renames(vcs_service):
    vcs = _create(vcs_service)

    patched = vcs_service.patch(VcsPatch(id=vcs.id, updater_id=2, name="Renamed"))

    assert patched.name == "Renamed"
    assert patched.application_id == "app"
    assert patched.updater_id == 2


def test_patch_missing_vcs_is_not_found(vcs_service):
    with pytest.raises(StoreError) as exc_info:
        vcs_service.patch(VcsPatch(id=404, updater_id=1, name="x"))

    assert exc_info.value.code == ErrorCode.NOT_FOUND


def test_delete_unlinked_vcs(vcs_service):
    vcs = _create(vcs_service)

    vcs_service.delete(VcsDelete(id=vcs.id, deleter_id=1))

    assert vcs_service.find(VcsFind(id=vcs.id)) is None


def test_delete_missing_vcs_is_not_found(vcs_service):
    with pytest.raises(StoreError) as exc_info:
        vcs_service.delete(VcsDelete(id=404, deleter_id=1))

    assert exc_info.value.code == ErrorCode.NOT_FOUND


def test_delete_linked_vcs_conflicts(vcs_service, db_session, vcs_factory, project_factory):
    from schemaflow.models import Repository

    vcs_id = vcs_factory(vcs_id=3)
    project_factory(project_id=7)
    db_session.add(Repository(
        creator_id=1, updater_id=1, vcs_id=vcs_id, project_id=7,
        name="svc", full_path="org/svc", web_url="", external_id="1", external_webhook_id="",
        webhook_url_host="http://localhost", webhook_endpoint_id="ep", webhook_secret_token="s",
        access_token="t", expires_ts=0, refresh_token="",
    ))
    db_session.commit()

    with pytest.raises(StoreError) as exc_info:
        vcs_service.delete(VcsDelete(id=vcs_id, deleter_id=1))

    assert exc_info.value.code == ErrorCode.CONFLICT
    assert vcs_service.find(VcsFind(id=vcs_id)) is not None
