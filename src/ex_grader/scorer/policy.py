from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from attrs import field, frozen

from ex_grader.exercise import Difficulty

from .exceptions import PolicyError

DEFAULT_DIFFICULTY_MULTIPLIERS: Final[Mapping[str, float]] = MappingProxyType(
    {
        Difficulty.BEGINNER: 0.8,
        Difficulty.EASY: 1.0,
        Difficulty.MEDIUM: 1.25,
        Difficulty.INTERMEDIATE: 1.25,
        Difficulty.HARD: 1.5,
        Difficulty.ADVANCED: 1.5,
        Difficulty.EXPERT: 1.75,
    }
)


def _readonly(value: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({str(k).lower(): float(v) for k, v in value.items()})


@frozen
class ScoringPolicy:
    """
    Constants of the points computation.

    The defaults reproduce the standard grading scheme; build a custom policy
    and hand it to a scorer to tune them.
    """

    base_points: float = 100.0
    """Points for a fully correct answer before modifiers."""

    difficulty_multipliers: Mapping[str, float] = field(
        default=DEFAULT_DIFFICULTY_MULTIPLIERS, converter=_readonly
    )
    """Multiplier per difficulty tier, keyed by lowercase tier name."""

    default_difficulty_multiplier: float = 1.0
    """Multiplier for a missing or unrecognized difficulty."""

    hint_step: float = 0.1
    """Fraction of points lost per hint used."""

    hint_floor: float = 0.5
    """Lowest hint multiplier, however many hints were used."""

    time_bonus_window_ms: float = 10_000.0
    """Answers faster than this earn a time bonus (choice exercises only)."""

    time_bonus_divisor_ms: float = 20_000.0
    """Bonus fraction is `(window - elapsed) / divisor`, at most window / divisor."""

    perfect_sequence_bonus: float = 25.0
    """Flat points added for an exactly ordered sequence."""

    def __attrs_post_init__(self) -> None:
        if not 0.0 <= self.hint_floor <= 1.0:
            raise PolicyError(f"hint_floor must lie in [0, 1], got {self.hint_floor}")
        if self.hint_step < 0:
            raise PolicyError(f"hint_step must not be negative, got {self.hint_step}")
        if self.time_bonus_divisor_ms <= 0:
            raise PolicyError(
                f"time_bonus_divisor_ms must be positive, got {self.time_bonus_divisor_ms}"
            )
        if any(m < 0 for m in self.difficulty_multipliers.values()):
            raise PolicyError("difficulty multipliers must not be negative")
