"""Sequential projection driver shared by all engines.

Every engine follows the same template: validate the input record, then walk
a fixed number of periods, letting a per-period ``step`` closure resolve
overrides, advance its accumulators and emit one row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Mapping, Optional, Sequence, TypeVar

from pydantic import BaseModel

from projections.schemas.common import FieldError

logger = logging.getLogger(__name__)

OverrideT = TypeVar("OverrideT", bound=BaseModel)
RowT = TypeVar("RowT")
ValueT = TypeVar("ValueT")


class InputValidationError(ValueError):
    """Raised by a driver when its validator reports one or more errors."""

    def __init__(self, engine: str, errors: Sequence[FieldError]):
        self.engine = engine
        self.errors: List[FieldError] = list(errors)
        super().__init__(
            f"{engine} input validation failed: "
            + "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        )


def pick(override: Optional[BaseModel], field: str, default: ValueT) -> ValueT:
    """Return the override's value for ``field`` if present, else ``default``.

    Presence means "not None"; an override of 0 still wins.
    """
    if override is None:
        return default
    value = getattr(override, field)
    return default if value is None else value


def has_any_value(override: Optional[BaseModel]) -> bool:
    if override is None:
        return False
    return any(value is not None for value in override.model_dump().values())


@dataclass(frozen=True)
class Period(Generic[OverrideT]):
    index: int
    key: int
    override: Optional[OverrideT] = None

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def has_override(self) -> bool:
        return has_any_value(self.override)

    def pick(self, field: str, default: ValueT) -> ValueT:
        return pick(self.override, field, default)


def ensure_valid(engine: str, errors: Sequence[FieldError]) -> None:
    if errors:
        logger.info("%s input rejected with %d error(s)", engine, len(errors))
        raise InputValidationError(engine, errors)


def run_projection(
    first_key: int,
    periods: int,
    step: Callable[[Period[OverrideT]], RowT],
    overrides: Optional[Mapping[int, OverrideT]] = None,
    stop_when: Optional[Callable[[RowT], bool]] = None,
) -> List[RowT]:
    """Run ``step`` once per period and collect the rows in order.

    ``first_key`` is the key of period 0 (a calendar year, or month 1 for
    amortization). ``stop_when`` is checked after each row is recorded and ends
    the run early when it returns True.
    """
    overrides = overrides or {}
    rows: List[RowT] = []
    for index in range(periods):
        key = first_key + index
        row = step(Period(index=index, key=key, override=overrides.get(key)))
        rows.append(row)
        if stop_when is not None and stop_when(row):
            break
    return rows


__all__ = [
    "InputValidationError",
    "Period",
    "ensure_valid",
    "has_any_value",
    "pick",
    "run_projection",
]
