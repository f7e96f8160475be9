"""Conversion of a box cluster into a structured class block."""

import math
import re
import uuid
from functools import cmp_to_key
from typing import List, Optional, Tuple

from .calibrator import TimeAxis, DayAxis
from .config import LayoutConfig, get_config
from .logging import get_logger
from .models import TextBox, ClassBlock
from .utils import minutes_to_time, round_to_half_hour, time_to_minutes, tidy_title

# Last half-hour slot of the day; padded ends are capped here instead of wrapping
LATEST_END_MINUTES = 23 * 60 + 30

log = get_logger(__name__)

# "Soda 306", "Dwinelle 155"
LOCATION_RE = re.compile(r'^[A-Za-z]+\s+\d+$')
ROOM_NUMBER_RE = re.compile(r'^\d{3,}$')
BUILDING_RE = re.compile(r'^[A-Za-z]+$')
TIME_TITLE_RE = re.compile(r'^\d{1,2}:\d{2}\s*(am|pm)?$', re.IGNORECASE)


class BlockExtractor:
    """Turns clusters into ClassBlocks using the calibrated axes."""

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or get_config()

    def extract(
        self,
        cluster: List[TextBox],
        time_axis: TimeAxis,
        day_axis: DayAxis
    ) -> Optional[ClassBlock]:
        """
        Build a class block from one cluster.

        Args:
            cluster: Boxes believed to form one event
            time_axis: Calibrated y -> time map
            day_axis: Calibrated x -> weekday map

        Returns:
            ClassBlock, or None when the cluster has no usable title, no
            day column, or rounds to an empty interval
        """
        if not cluster:
            return None

        top_box = min(cluster, key=lambda b: b.y)
        day = day_axis.day_at(top_box.center_x)
        if day is None:
            return None

        start_time, end_time = self.time_bounds(cluster, time_axis)

        lines = self.reconstruct_lines(cluster)
        if not lines:
            return None

        title, location, instructors = self.split_fields(lines)
        if not title or TIME_TITLE_RE.match(title):
            log.debug("cluster_dropped", reason="no_title", lines=lines)
            return None

        if time_to_minutes(end_time) <= time_to_minutes(start_time):
            log.debug("cluster_dropped", reason="empty_interval", title=title, start=start_time, end=end_time)
            return None

        log.debug("block_extracted", title=title, day=day.value, start=start_time, end=end_time)

        return ClassBlock(
            id=f"{day.value}-{start_time}-{uuid.uuid4().hex[:9]}",
            title=title,
            location=location,
            instructors=instructors,
            day_of_week=day,
            start_time=start_time,
            end_time=end_time,
        )

    def time_bounds(self, cluster: List[TextBox], time_axis: TimeAxis) -> Tuple[str, str]:
        """
        Start and end time of a cluster, both on half-hour boundaries.

        The start is the top edge rounded to the nearest half hour. The end
        is the bottom edge of the last text line plus a fixed padding, since
        the text of a block rarely reaches the bottom of its tile. The end is
        capped at 23:30 rather than wrapping past midnight.
        """
        top = min(b.y for b in cluster)
        bottom = max(b.bottom for b in cluster)

        start_time = round_to_half_hour(time_axis.time_at(top))
        raw_end = time_to_minutes(time_axis.time_at(bottom)) + self.config.end_padding_minutes
        end_minutes = int(math.floor(raw_end / 30 + 0.5)) * 30
        end_time = minutes_to_time(min(end_minutes, LATEST_END_MINUTES))
        return start_time, end_time

    def reconstruct_lines(self, cluster: List[TextBox]) -> List[str]:
        """
        Rebuild visual text lines from scattered boxes.

        Boxes are ordered top to bottom, left to right when nearly level,
        then joined with spaces until a box sits more than a line height
        below the first box of the current line.

        Args:
            cluster: Boxes of one event

        Returns:
            Text lines, top to bottom
        """
        same_line = self.config.same_line_threshold
        line_height = self.config.line_height_threshold

        def compare(a: TextBox, b: TextBox) -> float:
            if abs(a.y - b.y) < same_line:
                return a.x - b.x
            return a.y - b.y

        ordered = sorted(sorted(cluster, key=lambda b: b.y), key=cmp_to_key(compare))

        lines: List[str] = []
        current: List[str] = []
        anchor_y: Optional[float] = None

        for box in ordered:
            text = box.text.strip()
            if not text:
                continue

            if anchor_y is None or abs(box.y - anchor_y) > line_height:
                if current:
                    lines.append(' '.join(current))
                current = [text]
                anchor_y = box.y
            else:
                current.append(text)

        if current:
            lines.append(' '.join(current))

        return lines

    def split_fields(self, lines: List[str]) -> Tuple[str, str, Optional[str]]:
        """
        Split text lines into title, location and instructors.

        The title takes the leading lines until a location-looking line or a
        bare room number shows up. The location is the next "Building 123"
        line, or a building line followed by a bare number line; failing
        both, the line right after the title. Everything after it is the
        instructor list.

        Args:
            lines: Reconstructed lines of one cluster

        Returns:
            (title, location, instructors); location may be empty and
            instructors None
        """
        title_end = 0
        for i in range(min(len(lines), self.config.max_title_lines)):
            line = lines[i]
            if LOCATION_RE.match(line):
                break
            if i > 0 and ROOM_NUMBER_RE.match(line):
                break
            title_end = i + 1

        title = tidy_title(' '.join(lines[:title_end])) if title_end else tidy_title(lines[0])

        location = ''
        instructors_start = title_end
        for i in range(title_end, len(lines)):
            if LOCATION_RE.match(lines[i]):
                location = lines[i]
                instructors_start = i + 1
                break
            if ROOM_NUMBER_RE.match(lines[i]) and i > title_end and BUILDING_RE.match(lines[i - 1]):
                location = f"{lines[i - 1]} {lines[i]}"
                instructors_start = i + 1
                break

        if not location and len(lines) > title_end:
            location = lines[title_end]
            instructors_start = title_end + 1

        instructors = ', '.join(line for line in lines[instructors_start:] if line).strip()
        return title, location, instructors or None
