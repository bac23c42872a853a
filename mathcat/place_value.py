# mathcat/place_value.py

from __future__ import annotations

from typing import List


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"place values are only defined for non-negative integers, got {n}")


def get_place_value_components(n: int) -> List[int]:
    """
    Break a number into its nonzero place-value components, most significant first.

        123 -> [100, 20, 3]
        305 -> [300, 5]
        0   -> [0]
    """
    _require_non_negative(n)
    components: List[int] = []
    place = 0
    while n > 0:
        digit = n % 10
        if digit:
            components.insert(0, digit * 10**place)
        n //= 10
        place += 1
    return components or [0]


decompose = get_place_value_components


def digits_right_to_left(n: int) -> List[int]:
    """Digits of n, least significant first. Zero digits are kept; 0 -> [0]."""
    _require_non_negative(n)
    digits: List[int] = []
    while n > 0:
        digits.append(n % 10)
        n //= 10
    return digits or [0]
