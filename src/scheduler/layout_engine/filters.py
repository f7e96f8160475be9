"""Removal of axis labels, page chrome and noise before clustering."""

from typing import List, Optional

from .config import LayoutConfig, get_config
from .labels import LabelDetector, is_explicit_time_label, is_day_header
from .logging import get_logger
from .models import TextBox

log = get_logger(__name__)


class CandidateFilter:
    """Keeps only the boxes that can belong to an event inside the grid."""

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or get_config()

    def filter_candidates(self, boxes: List[TextBox]) -> List[TextBox]:
        """
        Select event candidates from all OCR boxes.

        A box is dropped when it is a time label, a day header, contains a
        chrome word, sits above the bottom of the header row, sits left of
        the time-label gutter, or is shorter than the minimum length.

        Args:
            boxes: All OCR boxes of the screenshot

        Returns:
            Boxes that may be part of an event, in input order
        """
        grid_left, grid_top = LabelDetector.grid_edges(boxes)
        chrome_words = [w.lower() for w in self.config.chrome_words]

        candidates = []
        for box in boxes:
            text = box.text.strip().lower()

            if is_explicit_time_label(text):
                continue
            if is_day_header(text):
                continue
            if any(word in text for word in chrome_words):
                continue
            # Header / navigation region
            if box.y < grid_top:
                continue
            # Time-axis gutter
            if box.x < grid_left:
                continue
            if len(text) < self.config.min_candidate_length:
                continue

            candidates.append(box)

        log.debug(
            "candidates_filtered",
            total=len(boxes),
            kept=len(candidates),
            grid_left=grid_left,
            grid_top=grid_top,
        )
        return candidates
