"""Axis calibration: pixel rows to times of day, pixel columns to weekdays."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .config import LayoutConfig, get_config
from .logging import get_logger
from .models import TimeLabel, DayHeader, Weekday
from .utils import time_to_minutes, minutes_to_time

log = get_logger(__name__)


@dataclass(frozen=True)
class TimeAxis:
    """
    Linear map from a vertical pixel position to a time of day.

    minutes_since_midnight = slope * y + intercept. A constant axis has
    slope 0 and the intercept set to the fallback time.
    """
    slope: float
    intercept: float

    def minutes_at(self, y: float) -> float:
        return self.slope * y + self.intercept

    def time_at(self, y: float) -> str:
        """Time of day ("HH:MM") at pixel row y."""
        return minutes_to_time(self.minutes_at(y))

    @classmethod
    def constant(cls, time_str: str) -> 'TimeAxis':
        return cls(slope=0.0, intercept=float(time_to_minutes(time_str)))


@dataclass(frozen=True)
class DayAxis:
    """Nearest-column map from a horizontal pixel position to a weekday."""
    headers: Tuple[DayHeader, ...]
    tolerance_factor: float = 1.5

    def day_at(self, x: float) -> Optional[Weekday]:
        """
        Weekday of the column whose header center is closest to x.

        The match is rejected when x lies further from the header than
        tolerance_factor times half the gap to its nearest neighbouring
        header, so page furniture in the margins maps to no day.

        Args:
            x: Horizontal pixel position (usually a box center)

        Returns:
            Weekday or None when x is outside every column
        """
        if not self.headers:
            return None

        # min() keeps the first of equal distances, i.e. the left-most header
        index, closest = min(enumerate(self.headers), key=lambda item: abs(x - item[1].x))
        distance = abs(x - closest.x)

        threshold = float('inf')
        if index > 0:
            threshold = min(threshold, (closest.x - self.headers[index - 1].x) / 2)
        if index < len(self.headers) - 1:
            threshold = min(threshold, (self.headers[index + 1].x - closest.x) / 2)

        if distance <= threshold * self.tolerance_factor:
            return closest.day
        return None


class AxisCalibrator:
    """Builds the two coordinate-to-category maps of a grid."""

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or get_config()

    def build_y_to_time_map(self, time_labels: List[TimeLabel]) -> TimeAxis:
        """
        Fit a global least-squares line through (y, minutes) of the labels.

        Args:
            time_labels: Detected time labels

        Returns:
            TimeAxis; constant when fewer than two labels are known or when
            all labels share one y
        """
        labels = sorted(time_labels, key=lambda label: label.y)
        if len(labels) < 2:
            fallback = labels[0].time if labels else self.config.default_time
            return TimeAxis.constant(fallback)

        ys = np.array([label.y for label in labels], dtype=float)
        ts = np.array([time_to_minutes(label.time) for label in labels], dtype=float)

        y_mean = ys.mean()
        variance = np.sum((ys - y_mean) ** 2)
        if variance == 0:
            slope = 0.0
        else:
            slope = float(np.sum((ys - y_mean) * (ts - ts.mean())) / variance)
        intercept = float(ts.mean() - slope * y_mean)

        log.debug("time_axis_fitted", slope=slope, intercept=intercept, labels=len(labels))
        return TimeAxis(slope=slope, intercept=intercept)

    def build_x_to_day_map(self, day_headers: List[DayHeader]) -> DayAxis:
        """
        Build the column map from detected headers.

        When a weekday has more than one header, the left-most one defines
        the column and the others are ignored.

        Args:
            day_headers: Detected day headers

        Returns:
            DayAxis over headers sorted by x
        """
        kept = []
        seen = set()
        for header in sorted(day_headers, key=lambda h: h.x):
            if header.day in seen:
                log.debug("duplicate_day_header_ignored", day=header.day.value, x=header.x)
                continue
            seen.add(header.day)
            kept.append(header)

        return DayAxis(headers=tuple(kept), tolerance_factor=self.config.day_tolerance_factor)
