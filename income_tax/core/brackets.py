from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

Formula = Callable[[float], float]


@dataclass(frozen=True)
class Bracket:
    """Half-open income interval ``[lower, upper)`` and the formula taxing it.

    ``upper`` of ``None`` marks the top bracket, unbounded above.
    """

    lower: float
    upper: float | None
    formula: Formula
    name: str = ""

    def contains(self, income: float) -> bool:
        if income < self.lower:
            return False
        return self.upper is None or income < self.upper

    def tax(self, income: float) -> float:
        return self.formula(income)


def validate_partition(brackets: Iterable[Bracket]) -> tuple[Bracket, ...]:
    """Check that ``brackets`` cover ``[0, inf)`` without gaps or overlaps."""
    ordered = tuple(brackets)
    if not ordered:
        raise ValueError("At least one bracket is required")
    if ordered[0].lower != 0:
        raise ValueError(f"First bracket must start at 0, got {ordered[0].lower}")
    for current, following in zip(ordered, ordered[1:]):
        if current.upper is None:
            raise ValueError(f"Unbounded bracket starting at {current.lower} is not the last one")
        if current.upper <= current.lower:
            raise ValueError(f"Empty bracket [{current.lower}, {current.upper})")
        if current.upper != following.lower:
            raise ValueError(
                f"Brackets [{current.lower}, {current.upper}) and "
                f"[{following.lower}, ...) do not meet"
            )
    if ordered[-1].upper is not None:
        raise ValueError(f"Last bracket must be unbounded, got upper={ordered[-1].upper}")
    return ordered


def find_bracket(brackets: Sequence[Bracket], income: float) -> Bracket:
    for bracket in brackets:
        if bracket.contains(income):
            return bracket
    raise ValueError(f"No bracket covers income {income}")


__all__ = ["Bracket", "Formula", "validate_partition", "find_bracket"]
