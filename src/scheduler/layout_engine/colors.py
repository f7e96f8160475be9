"""Deterministic color assignment so repeated meetings of a course match."""

from dataclasses import replace
from typing import Dict, List

from .models import ClassBlock
from .utils import normalize_title

# Calendar event color ids, in claim order
PALETTE = ('1', '2', '3', '4', '5', '6', '7', '8', '9', '10', '11')


def assign_colors(blocks: List[ClassBlock]) -> List[ClassBlock]:
    """
    Give every block a palette color keyed on its normalized title.

    The first block with a new title claims the next palette slot, wrapping
    after len(PALETTE) distinct titles, so the result depends on the order
    of `blocks`.

    Args:
        blocks: Blocks in their final order

    Returns:
        New blocks with color_id set; the input blocks are untouched
    """
    title_to_color: Dict[str, str] = {}
    colored = []

    for block in blocks:
        key = normalize_title(block.title)
        if key not in title_to_color:
            title_to_color[key] = PALETTE[len(title_to_color) % len(PALETTE)]
        colored.append(replace(block, color_id=title_to_color[key]))

    return colored
