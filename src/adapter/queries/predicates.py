"""Predicate composition for the filtered list queries.

Filters are collected as an ordered list of (column, operator) fragments with
a parallel list of values. Statements are assembled from engine-owned column
objects and the fixed operator table below; every value is sent as a bound
parameter.
"""
from typing import Any, Callable, Dict, List, NamedTuple, Optional
from sqlalchemy import Text, bindparam
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.functions import FunctionElement

LIKE_ESCAPE = "\\"


class body_text(FunctionElement):
    """Text decoding of a binary message body"""

    type = Text()
    name = "body_text"
    inherit_cache = True


@compiles(body_text)
def _compile_body_text(element, compiler, **kw):
    return "CAST(%s AS TEXT)" % compiler.process(element.clauses, **kw)


@compiles(body_text, "postgresql")
def _compile_body_text_postgresql(element, compiler, **kw):
    return "encode(%s, 'escape')" % compiler.process(element.clauses, **kw)


OPERATORS: Dict[str, Callable[[Any, Any], ColumnElement]] = {
    "=": lambda column, param: column == param,
    ">": lambda column, param: column > param,
    ">=": lambda column, param: column >= param,
    "<=": lambda column, param: column <= param,
    "ILIKE": lambda column, param: column.ilike(param, escape=LIKE_ESCAPE),
}


class Predicate(NamedTuple):
    column: Any
    operator: str


def escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class PredicateBuilder:
    """
    Collects optional filter criteria.

    Each method is a no-op when its value is absent, so callers can pass every
    filter unconditionally.
    """

    def __init__(self):
        self._fragments: List[Predicate] = []
        self._values: List[Any] = []

    @property
    def fragments(self) -> List[Predicate]:
        return list(self._fragments)

    @property
    def values(self) -> List[Any]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._fragments)

    def _add(self, column, operator: str, value) -> "PredicateBuilder":
        if operator not in OPERATORS:
            raise ValueError(f"Unsupported operator: {operator}")
        self._fragments.append(Predicate(column, operator))
        self._values.append(value)
        return self

    def equals(self, column, value: Optional[Any]) -> "PredicateBuilder":
        """Exact match, skipped for None and empty strings"""
        if value is None or value == "":
            return self
        return self._add(column, "=", value)

    def contains_text(self, column, value: Optional[str]) -> "PredicateBuilder":
        """Case-insensitive substring match against the decoded body"""
        if not value:
            return self
        return self._add(body_text(column), "ILIKE", f"%{escape_like(value)}%")

    def at_least(self, column, value) -> "PredicateBuilder":
        if value is None:
            return self
        return self._add(column, ">=", value)

    def at_most(self, column, value) -> "PredicateBuilder":
        if value is None:
            return self
        return self._add(column, "<=", value)

    def newer_than(self, column, value) -> "PredicateBuilder":
        if value is None:
            return self
        return self._add(column, ">", value)

    def clauses(self) -> List[ColumnElement]:
        """
        Render the fragments as SQL expressions.

        Values are bound positionally as p0, p1, ... in fragment order.
        """
        return [
            OPERATORS[predicate.operator](
                predicate.column,
                bindparam(f"p{index}", value, type_=predicate.column.type),
            )
            for index, (predicate, value) in enumerate(zip(self._fragments, self._values))
        ]

    def apply(self, statement):
        """Add a WHERE clause to statement, or return it unchanged when empty"""
        clauses = self.clauses()
        if not clauses:
            return statement
        return statement.where(*clauses)
