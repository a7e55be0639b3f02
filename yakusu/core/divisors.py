from __future__ import annotations

from typing import Set

# Upper bound on the number of divisor buttons shown (and checked).
MAX_BUTTON_DISPLAY = 40


def button_range(n: int, cap: int = MAX_BUTTON_DISPLAY) -> range:
    """Candidate values offered for ``n``: 1 up to ``min(n, cap)``."""
    return range(1, min(n, cap) + 1)


def divisors_of(n: int, cap: int = MAX_BUTTON_DISPLAY) -> Set[int]:
    """Return the divisors of ``n`` that fall within the display window."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if cap < 1:
        raise ValueError(f"cap must be >= 1, got {cap}")
    return {i for i in button_range(n, cap) if n % i == 0}
