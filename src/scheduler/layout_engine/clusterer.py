"""Grouping of event candidates into one cluster per meeting block."""

from collections import OrderedDict
from typing import Dict, List, Optional

from .calibrator import DayAxis
from .config import LayoutConfig, get_config
from .logging import get_logger
from .models import TextBox, Weekday

log = get_logger(__name__)


class _Bounds:
    """Running bounding rectangle of a growing cluster."""

    def __init__(self, box: TextBox):
        self.left = box.x
        self.right = box.right
        self.top = box.y
        self.bottom = box.bottom

    def is_near(self, box: TextBox, margin_x: float, margin_y: float) -> bool:
        horizontal = not (box.x > self.right + margin_x or box.right < self.left - margin_x)
        vertical = not (box.y > self.bottom + margin_y or box.bottom < self.top - margin_y)
        return horizontal and vertical

    def expand(self, box: TextBox) -> None:
        self.left = min(self.left, box.x)
        self.right = max(self.right, box.right)
        self.top = min(self.top, box.y)
        self.bottom = max(self.bottom, box.bottom)


class EventClusterer:
    """Region-growing clustering of boxes, run independently per day column."""

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or get_config()

    def group_by_day(self, boxes: List[TextBox], day_axis: DayAxis) -> Dict[Weekday, List[TextBox]]:
        """
        Assign every box to a weekday column by its horizontal center.

        Boxes outside every column are dropped.
        """
        by_day: Dict[Weekday, List[TextBox]] = OrderedDict()
        for box in boxes:
            day = day_axis.day_at(box.center_x)
            if day is None:
                continue
            by_day.setdefault(day, []).append(box)
        return by_day

    def cluster(self, boxes: List[TextBox], day_axis: DayAxis) -> List[List[TextBox]]:
        """
        Group event candidates into per-event clusters.

        Clustering never crosses a column boundary: two events side by side
        on adjacent days stay apart even when the gap between them is
        smaller than the proximity margin.

        Args:
            boxes: Event candidates
            day_axis: Column map used to partition the boxes

        Returns:
            Clusters, each a list of boxes from a single day column
        """
        clusters: List[List[TextBox]] = []
        for day, day_boxes in self.group_by_day(boxes, day_axis).items():
            day_clusters = self.cluster_column(day_boxes)
            log.debug("column_clustered", day=day.value, boxes=len(day_boxes), clusters=len(day_clusters))
            clusters.extend(day_clusters)
        return clusters

    def cluster_column(self, boxes: List[TextBox]) -> List[List[TextBox]]:
        """
        Cluster the boxes of one day column.

        Each unused box seeds a cluster; the cluster then absorbs every
        unused box within the margins of its bounding rectangle, growing the
        rectangle, until a full pass adds nothing.

        Args:
            boxes: Boxes of a single column

        Returns:
            Clusters that pass the size filter
        """
        margin_x = self.config.cluster_margin_x
        margin_y = self.config.cluster_margin_y
        used = [False] * len(boxes)
        clusters: List[List[TextBox]] = []

        for seed_idx, seed in enumerate(boxes):
            if used[seed_idx]:
                continue

            used[seed_idx] = True
            members = [seed]
            bounds = _Bounds(seed)

            changed = True
            while changed:
                changed = False
                for idx, box in enumerate(boxes):
                    if used[idx]:
                        continue
                    if bounds.is_near(box, margin_x, margin_y):
                        used[idx] = True
                        members.append(box)
                        bounds.expand(box)
                        changed = True

            if self._is_substantial(members):
                clusters.append(members)

        return clusters

    def _is_substantial(self, members: List[TextBox]) -> bool:
        """Stray short tokens are not events; a long single line may be."""
        if len(members) >= 2:
            return True
        return len(members[0].text.strip()) > self.config.min_single_box_length
