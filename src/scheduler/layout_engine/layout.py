"""Pipeline that turns OCR boxes of a schedule grid into class blocks."""

from typing import List, Optional

from .calibrator import AxisCalibrator
from .clusterer import EventClusterer
from .colors import assign_colors
from .config import LayoutConfig, get_config
from .extractor import BlockExtractor
from .filters import CandidateFilter
from .labels import LabelDetector
from .logging import get_logger
from .models import ClassBlock, ScheduleLayout, TextBox
from .utils import normalize_title

log = get_logger(__name__)


def _block_order(block: ClassBlock):
    """Total order over blocks, independent of the order boxes arrived in."""
    return (
        block.day_of_week.order,
        block.start_time,
        block.end_time,
        normalize_title(block.title),
        block.location,
        block.instructors or '',
    )


class ScheduleLayoutBuilder:
    """Reconstructs weekly class blocks from the text boxes of one screenshot.

    The builder holds configuration only; every call to build_layout is
    independent of the previous ones.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or get_config()
        self.label_detector = LabelDetector()
        self.calibrator = AxisCalibrator(self.config)
        self.candidate_filter = CandidateFilter(self.config)
        self.clusterer = EventClusterer(self.config)
        self.extractor = BlockExtractor(self.config)

    def build_layout(self, boxes: List[TextBox]) -> ScheduleLayout:
        """
        Build the class schedule shown by a set of OCR boxes.

        Args:
            boxes: OCR text boxes, in any order

        Returns:
            ScheduleLayout whose blocks are ordered by weekday, start time,
            end time, then title; empty when either axis could not be detected
        """
        time_labels = self.label_detector.detect_time_labels(boxes)
        day_headers = self.label_detector.detect_day_headers(boxes)

        if not time_labels or not day_headers:
            log.info(
                "grid_not_calibrated",
                time_labels=len(time_labels),
                day_headers=len(day_headers),
            )
            return ScheduleLayout(time_labels=time_labels, day_headers=day_headers)

        time_axis = self.calibrator.build_y_to_time_map(time_labels)
        day_axis = self.calibrator.build_x_to_day_map(day_headers)

        candidates = self.candidate_filter.filter_candidates(boxes)
        clusters = self.clusterer.cluster(candidates, day_axis)

        blocks = []
        for cluster in clusters:
            block = self.extractor.extract(cluster, time_axis, day_axis)
            if block is not None:
                blocks.append(block)

        blocks.sort(key=_block_order)
        blocks = assign_colors(blocks)

        log.info("layout_built", boxes=len(boxes), clusters=len(clusters), blocks=len(blocks))
        return ScheduleLayout(class_blocks=blocks, time_labels=time_labels, day_headers=day_headers)


def build_layout(boxes: List[TextBox], config: Optional[LayoutConfig] = None) -> ScheduleLayout:
    """Build the schedule layout of `boxes` with a fresh builder."""
    return ScheduleLayoutBuilder(config).build_layout(boxes)
