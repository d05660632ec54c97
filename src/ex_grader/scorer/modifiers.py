from __future__ import annotations

import math

from .policy import ScoringPolicy

DEFAULT_POLICY = ScoringPolicy()


def difficulty_multiplier(
    difficulty: str | None, policy: ScoringPolicy = DEFAULT_POLICY
) -> float:
    """Multiplier for a difficulty tier; unknown or missing tiers get the default."""
    if not difficulty:
        return policy.default_difficulty_multiplier
    return policy.difficulty_multipliers.get(
        difficulty.strip().lower(), policy.default_difficulty_multiplier
    )


def hint_penalty(
    hints_used: float | None, policy: ScoringPolicy = DEFAULT_POLICY
) -> float:
    """
    Multiplier left after hint deductions.

    Each hint removes `hint_step` of the points, down to `hint_floor`. The
    result lies in `[hint_floor, 1]` and never increases with more hints.
    """
    hints = max(0, hints_used or 0)
    return max(policy.hint_floor, 1.0 - hints * policy.hint_step)


def time_bonus(
    time_to_answer_ms: float | None, policy: ScoringPolicy = DEFAULT_POLICY
) -> float:
    """Bonus fraction for a fast answer, 0 when slow, missing or unusable."""
    if time_to_answer_ms is None or not math.isfinite(time_to_answer_ms):
        return 0.0
    if not 0 <= time_to_answer_ms < policy.time_bonus_window_ms:
        return 0.0
    return (policy.time_bonus_window_ms - time_to_answer_ms) / policy.time_bonus_divisor_ms


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(value + 0.5)
