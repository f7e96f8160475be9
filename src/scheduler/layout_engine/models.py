"""Data models for schedule layout extraction."""

from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum


class Weekday(Enum):
    """Enumeration for the weekdays a schedule grid can show."""
    MONDAY = "MO"
    TUESDAY = "TU"
    WEDNESDAY = "WE"
    THURSDAY = "TH"
    FRIDAY = "FR"

    @classmethod
    def from_string(cls, day_str: str) -> Optional['Weekday']:
        """
        Parse weekday from a column header text.

        Only full names and the common abbreviations are accepted; single
        letters ("M", "F") are too ambiguous on a screenshot to count as headers.

        Args:
            day_str: Header text (e.g., "Mon", "Tues", "FRIDAY")

        Returns:
            Weekday enum or None if not matched
        """
        if not day_str or not isinstance(day_str, str):
            return None

        day_str = day_str.strip().lower()

        if not day_str:
            return None

        day_mapping = {
            'monday': cls.MONDAY, 'mon': cls.MONDAY,
            'tuesday': cls.TUESDAY, 'tue': cls.TUESDAY, 'tues': cls.TUESDAY,
            'wednesday': cls.WEDNESDAY, 'wed': cls.WEDNESDAY,
            'thursday': cls.THURSDAY, 'thu': cls.THURSDAY, 'thur': cls.THURSDAY, 'thurs': cls.THURSDAY,
            'friday': cls.FRIDAY, 'fri': cls.FRIDAY,
        }

        return day_mapping.get(day_str)

    @property
    def order(self) -> int:
        """Position of the day within the week (Monday = 0)."""
        return list(Weekday).index(self)


@dataclass(frozen=True)
class TextBox:
    """A text fragment returned by OCR with its pixel bounding rectangle."""
    text: str
    x: float  # top-left
    y: float
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @classmethod
    def from_dict(cls, data: dict) -> 'TextBox':
        """Build a box from an OCR dump entry ({"text", "x", "y", "width", "height"})."""
        return cls(
            text=str(data.get('text') or ''),
            x=float(data.get('x', 0)),
            y=float(data.get('y', 0)),
            width=float(data.get('width', 0)),
            height=float(data.get('height', 0)),
        )

    def to_dict(self) -> dict:
        return {
            'text': self.text,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
        }


@dataclass(frozen=True)
class TimeLabel:
    """A box on the vertical axis recognized as a clock time."""
    time: str  # normalized 24-hour "HH:MM"
    y: float  # vertical center of the source box
    text: str = ""


@dataclass(frozen=True)
class DayHeader:
    """A box on the horizontal axis recognized as a weekday name."""
    day: Weekday
    x: float  # horizontal center of the source box
    text: str = ""


@dataclass(frozen=True)
class ClassBlock:
    """Represents one recurring weekly meeting reconstructed from the grid."""
    id: str
    title: str  # "Computer Science 186"
    location: str  # "Soda 306", may be empty
    day_of_week: Weekday
    start_time: str  # "10:00"
    end_time: str  # "11:30"
    instructors: Optional[str] = None  # "Natacha Crooks, Alvin Cheung"
    enabled: bool = True
    color_id: Optional[str] = None  # calendar palette id, "1".."11"

    def __str__(self) -> str:
        return f"{self.day_of_week.value} {self.start_time}-{self.end_time}: {self.title}"

    def to_dict(self) -> dict:
        """Render the block using the camelCase keys the calendar writer reads."""
        return {
            'id': self.id,
            'title': self.title,
            'location': self.location,
            'instructors': self.instructors,
            'dayOfWeek': self.day_of_week.value,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'enabled': self.enabled,
            'colorId': self.color_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ClassBlock':
        return cls(
            id=data['id'],
            title=data['title'],
            location=data.get('location') or '',
            day_of_week=Weekday(data['dayOfWeek']),
            start_time=data['startTime'],
            end_time=data['endTime'],
            instructors=data.get('instructors'),
            enabled=data.get('enabled', True),
            color_id=data.get('colorId'),
        )


@dataclass
class ScheduleLayout:
    """Represents the complete result of one layout build."""
    class_blocks: List[ClassBlock] = field(default_factory=list)

    # Intermediate axis labels, kept for diagnostics
    time_labels: List[TimeLabel] = field(default_factory=list)
    day_headers: List[DayHeader] = field(default_factory=list)

    def get_blocks_by_day(self, weekday: Weekday) -> List[ClassBlock]:
        """Get all blocks for a specific weekday."""
        return [block for block in self.class_blocks if block.day_of_week == weekday]

    def to_dict(self) -> dict:
        return {'classBlocks': [block.to_dict() for block in self.class_blocks]}

    def __len__(self) -> int:
        return len(self.class_blocks)


@dataclass
class CalendarSyncPayload:
    """Hand-off to the calendar writer: blocks plus the semester they recur over."""
    semester_start_date: str  # "2026-01-20"
    semester_end_date: str  # "2026-05-15"
    time_zone: str  # "America/Los_Angeles"
    events: List[ClassBlock] = field(default_factory=list)
    create_new_calendar: bool = False

    def enabled_events(self) -> List[ClassBlock]:
        """Blocks the user kept switched on during review."""
        return [event for event in self.events if event.enabled]

    def to_dict(self) -> dict:
        return {
            'semesterStartDate': self.semester_start_date,
            'semesterEndDate': self.semester_end_date,
            'timeZone': self.time_zone,
            'events': [event.to_dict() for event in self.enabled_events()],
            'createNewCalendar': self.create_new_calendar,
        }
