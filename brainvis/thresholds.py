"""Threshold range for the detailed matrix: slider dragging and typed input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

Point = Tuple[float, float]

RANGE_TYPES = ("between", "outside")


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Whether ``point`` lies inside ``polygon`` (even-odd crossing rule)."""
    x, y = point
    inside = False
    if not polygon:
        return False
    xj, yj = polygon[-1]
    for xi, yi in polygon:
        crosses = (yi < y <= yj) or (yj < y <= yi)
        if crosses and (xi <= x or xj <= x):
            inside ^= xi + (y - yi) / (yj - yi) * (xj - xi) < x
        xj, yj = xi, yi
    return inside


def slider_value(
    x: float,
    slider_start: float,
    slider_width: float,
    min_value: float,
    max_value: float,
) -> float:
    """Map a horizontal slider position to a value, clamped to the range ends."""
    if x < slider_start:
        return min_value
    if x > slider_start + slider_width:
        return max_value
    return ((x - slider_start) / slider_width) * (max_value - min_value) + min_value


def _parse(text: str, label: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError):
        raise ValueError(f"{label} is invalid format") from None


def parse_thresholds(
    thres_min: str, lower: str, upper: str, thres_max: str
) -> Tuple[float, float, float, float]:
    """Parse four threshold strings and check that they are in ascending order."""
    min_value = _parse(thres_min, "Thres min")
    lower_value = _parse(lower, "Lower thres")
    upper_value = _parse(upper, "Upper thres")
    max_value = _parse(thres_max, "Thres max")

    if not min_value <= lower_value:
        raise ValueError("Lower thres must be equal or larger than thres min")
    if not lower_value <= upper_value:
        raise ValueError("Upper thres must be equal or larger than lower thres")
    if not upper_value <= max_value:
        raise ValueError("Thres max must be equal or larger than upper thres")
    return min_value, lower_value, upper_value, max_value


@dataclass
class Thresholds:
    """Lower and upper thresholds inside a min-max range, set by a slider."""

    min_value: float
    lower: float
    upper: float
    max_value: float
    range_type: str = "between"
    slider_start: float = 0.02
    slider_width: float = 0.96

    def __post_init__(self) -> None:
        if self.range_type not in RANGE_TYPES:
            raise ValueError(
                f"range type must be one of {RANGE_TYPES}, got {self.range_type!r}"
            )

    def _value_at(self, x: float) -> float:
        return slider_value(
            x, self.slider_start, self.slider_width, self.min_value, self.max_value
        )

    def drag_lower(self, x: float) -> float:
        """Move the lower threshold to slider position ``x``, not past the upper."""
        self.lower = min(self._value_at(x), self.upper)
        return self.lower

    def drag_upper(self, x: float) -> float:
        """Move the upper threshold to slider position ``x``, not below the lower."""
        self.upper = max(self._value_at(x), self.lower)
        return self.upper