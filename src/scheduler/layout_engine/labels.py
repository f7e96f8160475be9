"""Detection of time-axis labels and day-column headers."""

import re
from typing import List, Optional, Tuple

from .logging import get_logger
from .models import TextBox, TimeLabel, DayHeader, Weekday

log = get_logger(__name__)

# '9', '9:15', '9am', '12:30 pm'
TIME_LABEL_RE = re.compile(r'^(\d{1,2})(?::(\d{2}))?\s*(am|pm)?$', re.IGNORECASE)

# Same shape with the meridiem required: only these are unambiguous axis labels
# when deciding what to throw away ('61' inside "CS 61" must survive).
EXPLICIT_TIME_LABEL_RE = re.compile(r'^(\d{1,2})(?::(\d{2}))?\s*(am|pm)$', re.IGNORECASE)


def is_explicit_time_label(text: str) -> bool:
    """True for axis-label text that carries an am/pm marker."""
    return bool(EXPLICIT_TIME_LABEL_RE.match(text.strip()))


def is_day_header(text: str) -> bool:
    """True for text from the fixed weekday vocabulary."""
    return Weekday.from_string(text) is not None


class LabelDetector:
    """Finds the boxes that make up the two axes of a schedule grid."""

    def detect_time_labels(self, boxes: List[TextBox]) -> List[TimeLabel]:
        """
        Detect clock-time labels on the vertical axis.

        Boxes are read top to bottom so that a label without am/pm inherits
        the meridiem of the closest explicit label above it ("9am, 10, 11,
        12pm, 1, 2"). Before any explicit marker is seen, "am" is assumed.

        Args:
            boxes: OCR boxes in any order

        Returns:
            Time labels sorted by y, one per distinct time (top-most wins)
        """
        current_period: Optional[str] = None
        labels: List[TimeLabel] = []

        for box in sorted(boxes, key=lambda b: b.y):
            raw = box.text.strip().lower()
            match = TIME_LABEL_RE.match(raw)
            if not match:
                continue

            hour = int(match.group(1))
            minute = int(match.group(2) or 0)
            period = match.group(3)

            # OCR junk like "0" or "13:75"
            if hour < 1 or hour > 12:
                continue
            if minute < 0 or minute >= 60:
                continue

            if period:
                current_period = period

            time_str = self._to_24_hour(hour, minute, current_period or 'am')
            labels.append(TimeLabel(time=time_str, y=box.center_y, text=box.text.strip()))

        # Duplicate renders of the same label: keep the top-most
        seen = set()
        deduped: List[TimeLabel] = []
        for label in sorted(labels, key=lambda label: label.y):
            if label.time in seen:
                continue
            seen.add(label.time)
            deduped.append(label)

        log.debug("time_labels_detected", count=len(deduped), times=[label.time for label in deduped])
        return deduped

    def detect_day_headers(self, boxes: List[TextBox]) -> List[DayHeader]:
        """
        Detect weekday column headers.

        Args:
            boxes: OCR boxes in any order

        Returns:
            Day headers sorted left to right by horizontal center
        """
        headers = []
        for box in boxes:
            day = Weekday.from_string(box.text)
            if day:
                headers.append(DayHeader(day=day, x=box.center_x, text=box.text.strip()))

        headers.sort(key=lambda h: h.x)
        log.debug("day_headers_detected", days=[h.day.value for h in headers])
        return headers

    @staticmethod
    def _to_24_hour(hour: int, minute: int, period: str) -> str:
        hh = hour % 12
        if period == 'pm':
            hh += 12
        return f"{hh:02d}:{minute:02d}"

    @staticmethod
    def grid_edges(boxes: List[TextBox]) -> Tuple[float, float]:
        """
        Locate the content region of the grid.

        Returns:
            (left, top): right edge of the time-label gutter and bottom edge
            of the day-header row, 0 where the axis has no boxes
        """
        time_boxes = [b for b in boxes if is_explicit_time_label(b.text)]
        header_boxes = [b for b in boxes if is_day_header(b.text)]

        left = max((b.right for b in time_boxes), default=0.0)
        top = max((b.bottom for b in header_boxes), default=0.0)
        return left, top
