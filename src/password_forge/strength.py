from __future__ import annotations

import re

from .models import StrengthResult


MAX_POINTS = 8
LENGTH_THRESHOLDS = (8, 12, 16)

# (minimum percentage, label, color tag), highest first
STRENGTH_BANDS = (
    (80.0, "very strong", "green"),
    (60.0, "strong", "blue"),
    (40.0, "medium", "yellow"),
    (20.0, "weak", "orange"),
)
FALLBACK_BAND = ("very weak", "red")

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^A-Za-z0-9]")


def count_points(password: str) -> int:
    length = len(password)
    has_lower = bool(_LOWER.search(password))
    has_upper = bool(_UPPER.search(password))
    has_digit = bool(_DIGIT.search(password))
    has_symbol = bool(_SYMBOL.search(password))

    points = sum(1 for threshold in LENGTH_THRESHOLDS if length >= threshold)
    points += sum([has_lower, has_upper, has_digit, has_symbol])
    # Composite bonus overlaps the individual checks above.
    if length >= 8 and has_lower and has_upper and has_digit:
        points += 1
    return points


def band_for(percentage: float) -> tuple[str, str]:
    for minimum, label, color_tag in STRENGTH_BANDS:
        if percentage >= minimum:
            return label, color_tag
    return FALLBACK_BAND


def score_password(password: str) -> StrengthResult:
    points = count_points(password)
    percentage = points / MAX_POINTS * 100
    label, color_tag = band_for(percentage)
    return StrengthResult(score=percentage, label=label, color_tag=color_tag, points=points)
