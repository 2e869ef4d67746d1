"""
동적 WHERE/SET 절 빌더

선택적 필터/패치 필드를 (column, operator, value) 목록으로 모은 뒤
SQLAlchemy 조건식 / values() 딕셔너리로 변환한다.
값은 항상 바인딩 파라미터로 전달된다.
"""

import operator
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Column, Table, and_, func, true
from sqlalchemy.sql.elements import ColumnElement

# 범위/패턴 비교는 지원하지 않음
OPERATORS = {
    "=": operator.eq,
    "<>": operator.ne,
}


def table_column(table: Table, name: str) -> Column:
    """테이블에 없는 컬럼명이면 ValueError"""
    try:
        return table.c[name]
    except KeyError:
        raise ValueError(f"'{table.name}' 테이블에 없는 컬럼: {name!r}") from None


@dataclass(frozen=True)
class Predicate:
    """단일 비교 조건"""
    column: Column
    value: Any
    operator: str = "="

    def __post_init__(self):
        if self.operator not in OPERATORS:
            raise ValueError(f"지원하지 않는 연산자: {self.operator!r}")

    def clause(self) -> ColumnElement:
        return OPERATORS[self.operator](self.column, self.value)


@dataclass
class WhereBuilder:
    """AND로만 결합되는 WHERE 절 빌더"""
    table: Table
    predicates: list[Predicate] = field(default_factory=list)

    def eq(self, column: str, value: Any) -> "WhereBuilder":
        """값이 None이면 조건을 추가하지 않음 (= 전체 매칭)"""
        if value is not None:
            self.predicates.append(Predicate(table_column(self.table, column), value))
        return self

    def build(self) -> ColumnElement:
        if not self.predicates:
            return true()
        return and_(*[pred.clause() for pred in self.predicates])


@dataclass
class SetBuilder:
    """UPDATE ... SET 값 빌더"""
    table: Table
    values: dict[str, Any] = field(default_factory=dict)

    def set(self, column: str, value: Any) -> "SetBuilder":
        """값이 None이면 변경하지 않음"""
        if value is not None:
            self.values[table_column(self.table, column).name] = value
        return self

    def touch(self, column: str) -> "SetBuilder":
        """DB 시각으로 갱신"""
        self.values[table_column(self.table, column).name] = func.now()
        return self

    def build(self) -> dict[str, Any]:
        if not self.values:
            raise ValueError("변경할 컬럼이 없습니다.")
        return dict(self.values)
