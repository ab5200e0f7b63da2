"""
Whitelisted filter queries.

A ``FilterQuery`` turns a mapping of optional query parameters into an ordered
list of ``FilterClause`` objects and from there into a SQLAlchemy ``select``.
Only keys declared on the query are recognised, so column names never come
from the client; every value is sent as a bound parameter.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from sqlalchemy import Select, func, or_, select
from sqlalchemy.sql.elements import ColumnElement

EQ = "eq"
IEQ = "ieq"
CONTAINS_ANY = "contains_any"

LIKE_ESCAPE = "\\"
MAX_RECORD_ID = 2 ** 31 - 1


def escape_like(term: str) -> str:
    """Make ``%`` and ``_`` in a search term match literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def as_record_id(term: str) -> Optional[int]:
    """The term as an id when it is a plain ASCII integer that fits the INTEGER id column."""
    if not (term.isascii() and term.isdigit()):
        return None
    value = int(term)
    return value if value <= MAX_RECORD_ID else None


@dataclass(frozen=True)
class FilterClause:
    """One ``AND`` term of a WHERE clause."""

    column: Union[str, tuple[str, ...]]
    operator: str
    value: Any


class FilterQuery:
    """Filter builder for one model.

    ``filters`` maps a recognised parameter name to the column it narrows.
    ``search_columns`` are OR-ed together for the ``search`` parameter.
    """

    SEARCH_KEY = "search"

    def __init__(
        self,
        model,
        filters: Mapping[str, str],
        search_columns: Sequence[str] = (),
        case_insensitive: bool = False,
        numeric_search_matches_id: bool = False,
    ):
        self.model = model
        self.filters = dict(filters)
        self.search_columns = tuple(search_columns)
        self.case_insensitive = case_insensitive
        self.numeric_search_matches_id = numeric_search_matches_id

    @property
    def recognized_keys(self) -> tuple[str, ...]:
        keys = tuple(self.filters)
        if self.search_columns:
            keys += (self.SEARCH_KEY,)
        return keys

    def clauses(self, params: Optional[Mapping[str, Any]]) -> list[FilterClause]:
        """Build clauses for the present, non-empty recognised keys."""
        params = params or {}
        result = []
        operator = IEQ if self.case_insensitive else EQ
        for key, column in self.filters.items():
            value = params.get(key)
            if value is None or value == "":
                continue
            result.append(FilterClause(column, operator, value))

        term = params.get(self.SEARCH_KEY) if self.search_columns else None
        if term is not None and term != "":
            term = str(term)
            record_id = as_record_id(term) if self.numeric_search_matches_id else None
            if record_id is not None:
                result.append(FilterClause("id", EQ, record_id))
            else:
                result.append(FilterClause(self.search_columns, CONTAINS_ANY, f"%{escape_like(term)}%"))
        return result

    def condition(self, clause: FilterClause) -> ColumnElement:
        if clause.operator == EQ:
            return getattr(self.model, clause.column) == clause.value
        if clause.operator == IEQ:
            return func.lower(getattr(self.model, clause.column)) == func.lower(clause.value)
        if clause.operator == CONTAINS_ANY:
            return or_(*(
                getattr(self.model, column).ilike(clause.value, escape=LIKE_ESCAPE)
                for column in clause.column
            ))
        raise ValueError(f"Unsupported filter operator: {clause.operator}")

    def where(self, params: Optional[Mapping[str, Any]]) -> list[ColumnElement]:
        return [self.condition(clause) for clause in self.clauses(params)]

    def select(self, params: Optional[Mapping[str, Any]] = None) -> Select:
        """``SELECT ... WHERE <clauses> ORDER BY created_at DESC``."""
        return (
            select(self.model)
            .where(*self.where(params))
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        )

    def count(self, params: Optional[Mapping[str, Any]] = None) -> Select:
        return select(func.count()).select_from(self.model).where(*self.where(params))
