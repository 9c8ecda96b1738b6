"""Table-driven validation and encoding of query parameters.

Every query type declares an ordered ``PARAMS`` table of :class:`Param`
entries (attribute name, API parameter key, validation rules) and an
``EXCLUSIVE`` tuple of attribute groups of which at most one may be set.
:func:`validate` and :func:`encode` walk those tables; nothing is discovered
by introspection.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any, ClassVar, Protocol

from newsdata.errors import QueryValidationError
from newsdata.query.values import MAX_TIMEFRAME_HOURS, MAX_TIMEFRAME_MINUTES


@dataclass(frozen=True)
class Rule:
    """A named check returning an error message, or None when the value is valid."""

    name: str
    check: Callable[[Any], str | None]


@dataclass(frozen=True)
class Param:
    """One row of a query's parameter table."""

    attr: str
    key: str
    rules: tuple[Rule, ...] = ()


class ParamTable(Protocol):
    PARAMS: ClassVar[tuple[Param, ...]]
    EXCLUSIVE: ClassVar[tuple[tuple[str, ...], ...]]


def is_set(value: Any) -> bool:
    """Whether a field carries a value that should be validated and sent."""
    if value is None:
        return False
    if isinstance(value, str | list | tuple | set | frozenset):
        return len(value) > 0
    return True


# ============================================================
# Rules
# ============================================================


def _list_of_values(value: Any) -> str | None:
    if isinstance(value, str):
        return "must be a list of values, not a string"
    return None


def max_length(limit: int) -> Rule:
    def check(value: str) -> str | None:
        if len(value) > limit:
            return f"cannot be longer than {limit} characters"
        return None

    return Rule("max_length", check)


def max_items(limit: int) -> Rule:
    def check(value: Collection[str]) -> str | None:
        if len(value) > limit:
            return f"cannot contain more than {limit} values"
        return None

    return Rule("max_items", check)


def one_of(allowed: Collection[str]) -> Rule:
    """Membership check; applies to a single string or to every element of a list."""

    def check(value: str | Collection[str]) -> str | None:
        values = [value] if isinstance(value, str) else list(value)
        for item in values:
            if item not in allowed:
                return f"has invalid value {item!r}"
        return None

    return Rule("one_of", check)


def between(low: int, high: int) -> Rule:
    def check(value: int) -> str | None:
        if value < low or value > high:
            return f"must be between {low} and {high}"
        return None

    return Rule("between", check)


def _in_past(value: date) -> str | None:
    if isinstance(value, datetime):
        now = datetime.now(tz=UTC) if value.tzinfo else datetime.now()
        if value > now:
            return "must not be in the future"
        return None
    if value > date.today():
        return "must not be in the future"
    return None


def _timeframe(value: str) -> str | None:
    if value.endswith("m"):
        amount, limit, unit = value[:-1], MAX_TIMEFRAME_MINUTES, "minutes"
    else:
        amount, limit, unit = value, MAX_TIMEFRAME_HOURS, "hours"
    if not amount.isdigit():
        return f"has invalid value {value!r}"
    if not 1 <= int(amount) <= limit:
        return f"must be between 1 and {limit} {unit}"
    return None


list_of_values = Rule("list_of_values", _list_of_values)
in_past = Rule("in_past", _in_past)
timeframe_range = Rule("timeframe", _timeframe)


# ============================================================
# Validation & encoding
# ============================================================


def validate(query: ParamTable) -> None:
    """Check a query against its exclusivity groups, then its parameter table.

    Raises:
        QueryValidationError: On the first violated rule.
    """
    for group in query.EXCLUSIVE:
        used = [attr for attr in group if is_set(getattr(query, attr))]
        if len(used) > 1:
            raise QueryValidationError(
                f"{' and '.join(used)} cannot be used together",
                field=used[1],
                rule="exclusive",
            )

    for param in query.PARAMS:
        value = getattr(query, param.attr)
        if not is_set(value):
            continue
        for rule in param.rules:
            problem = rule.check(value)
            if problem:
                raise QueryValidationError(
                    f"{param.attr} {problem}", field=param.attr, rule=rule.name
                )


def encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, set | frozenset):
        return ",".join(sorted(str(v) for v in value))
    if isinstance(value, list | tuple):
        return ",".join(str(v) for v in value)
    return str(value)


def encode(query: ParamTable) -> dict[str, str]:
    """Flatten a query into API parameters, omitting unset fields."""
    params: dict[str, str] = {}
    for param in query.PARAMS:
        value = getattr(query, param.attr)
        if is_set(value):
            params[param.key] = encode_value(value)
    return params
