"""
Stat Values (Data Model)
========================
Defines the five stat identifiers and the fixed-size record holding their totals.

Classes:
    StatId: The five stats, declared in clockwise order starting at the top.
    StatValues: Immutable record with one integer total per stat.
    StatSource: Interface for whatever layer persists the totals.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any, Iterator, Mapping, Protocol, Union
import logging

logger = logging.getLogger(__name__)


class StatId(StrEnum):
    """Stat identifiers. Declaration order is the arm order on the star."""
    PHYSICAL = "physical"
    MENTAL = "mental"
    SOCIAL = "social"
    CREATIVE = "creative"
    PRODUCTIVE = "productive"


STAT_ORDER: tuple[StatId, ...] = tuple(StatId)


@dataclass(frozen=True)
class StatValues:
    """
    Point totals for the five stats.

    Values are expected to be non-negative. They are NOT clamped here; a
    negative total distorts the arm radius and is the caller's problem.
    """
    physical: int = 0
    mental: int = 0
    social: int = 0
    creative: int = 0
    productive: int = 0

    @classmethod
    def zero(cls) -> StatValues:
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Mapping[Union[StatId, str], Any]) -> StatValues:
        """
        Build a record from a loose mapping (e.g. JSON loaded by the storage layer).

        Missing stats become 0 and unknown keys are ignored.

        Raises:
            ValueError: If a value cannot be converted to an integer.
        """
        known = {stat.value for stat in STAT_ORDER}
        values: dict[str, int] = {}
        for key, raw in mapping.items():
            name = str(key)
            if name not in known:
                logger.debug(f"Ignoring unknown stat key '{name}'.")
                continue
            try:
                values[name] = int(raw)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Stat '{name}' has non-integer value {raw!r}.") from e
        return cls(**values)

    def get(self, stat: Union[StatId, str]) -> int:
        return getattr(self, StatId(stat).value)

    def __iter__(self) -> Iterator[tuple[StatId, int]]:
        for stat in STAT_ORDER:
            yield stat, self.get(stat)

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def max_value(self) -> int:
        """Largest total, floored at 1 so it is always a safe divisor."""
        return max(*(value for _, value in self), 1)

    def total(self) -> int:
        return sum(value for _, value in self)


class StatSource(Protocol):
    """Anything that can hand the engine the current totals (storage, API, ...)."""
    def load_stats(self) -> StatValues: ...
