import pytest
from sqlalchemy import func, select, true, update

from schemaflow.core.query import Predicate, SetBuilder, WhereBuilder
from schemaflow.models import Repository

TABLE = Repository.__table__


def _compile(statement):
    compiled = statement.compile()
    return str(compiled), compiled.params


def test_where_builder_empty_matches_everything():
    where = WhereBuilder(TABLE).build()
    assert where.compare(true())


def test_where_builder_skips_none_and_keeps_order():
    where = (
        WhereBuilder(TABLE)
        .eq("id", None)
        .eq("vcs_id", 3)
        .eq("project_id", 7)
        .build()
    )
    sql, params = _compile(select(TABLE).where(where))

    assert "WHERE repository.vcs_id = :vcs_id_1 AND repository.project_id = :project_id_1" in sql
    assert "repository.id =" not in sql
    assert params == {"vcs_id_1": 3, "project_id_1": 7}


def test_where_builder_binds_values():
    where = WhereBuilder(TABLE).eq("webhook_endpoint_id", "x' OR '1'='1").build()
    sql, params = _compile(select(TABLE).where(where))

    assert "OR" not in sql
    assert params == {"webhook_endpoint_id_1": "x' OR '1'='1"}


def test_where_builder_rejects_unknown_column():
    with pytest.raises(ValueError):
        WhereBuilder(TABLE).eq("id; DROP TABLE project", 1)


def test_predicate_rejects_unsupported_operator():
    with pytest.raises(ValueError):
        Predicate(TABLE.c.id, 1, "LIKE")


def test_predicate_inequality():
    sql, params = _compile(select(TABLE).where(Predicate(TABLE.c.vcs_id, 3, "<>").clause()))

    assert "repository.vcs_id != :vcs_id_1" in sql
    assert params == {"vcs_id_1": 3}


def test_set_builder_with_touch():
    values = (
        SetBuilder(TABLE)
        .set("updater_id", 2)
        .set("branch_filter", None)
        .set("access_token", "t2")
        .touch("updated_ts")
        .build()
    )
    assert list(values) == ["updater_id", "access_token", "updated_ts"]

    sql, params = _compile(update(TABLE).where(TABLE.c.id == 5).values(values))

    assert "updated_ts=now()" in sql
    assert "branch_filter" not in sql
    assert params == {"updater_id": 2, "access_token": "t2", "id_1": 5}


def test_set_builder_touch_uses_database_clock():
    values = SetBuilder(TABLE).touch("updated_ts").build()

    assert values["updated_ts"].compare(func.now())


def test_set_builder_requires_at_least_one_column():
    with pytest.raises(ValueError):
        SetBuilder(TABLE).set("name", None).build()


def test_set_builder_rejects_unknown_column():
    with pytest.raises(ValueError):
        SetBuilder(TABLE).set("no_such_column", 1)
