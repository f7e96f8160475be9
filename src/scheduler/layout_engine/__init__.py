"""Layout Engine Package for Schedule Screenshot Extraction."""

__version__ = "0.1.0"

from .main import process_schedule, save_to_json, load_boxes_from_json
from .models import (
    CalendarSyncPayload,
    ClassBlock,
    DayHeader,
    ScheduleLayout,
    TextBox,
    TimeLabel,
    Weekday,
)
from .labels import LabelDetector
from .calibrator import AxisCalibrator, TimeAxis, DayAxis
from .filters import CandidateFilter
from .clusterer import EventClusterer
from .extractor import BlockExtractor
from .colors import assign_colors
from .layout import ScheduleLayoutBuilder, build_layout
from .config import LayoutConfig, get_config
from .errors import LayoutEngineError, ValidationError, OCRError, EmptyScheduleError
from .utils import validate_blocks, is_supported_file

__all__ = [
    'process_schedule',
    'save_to_json',
    'load_boxes_from_json',
    'CalendarSyncPayload',
    'ClassBlock',
    'DayHeader',
    'ScheduleLayout',
    'TextBox',
    'TimeLabel',
    'Weekday',
    'LabelDetector',
    'AxisCalibrator',
    'TimeAxis',
    'DayAxis',
    'CandidateFilter',
    'EventClusterer',
    'BlockExtractor',
    'assign_colors',
    'ScheduleLayoutBuilder',
    'build_layout',
    'LayoutConfig',
    'get_config',
    'LayoutEngineError',
    'ValidationError',
    'OCRError',
    'EmptyScheduleError',
    'validate_blocks',
    'is_supported_file',
]
