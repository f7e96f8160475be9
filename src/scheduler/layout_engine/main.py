"""Core execution logic for the layout engine."""

import json
from pathlib import Path
from typing import List, Optional, Union

from .config import LayoutConfig, get_config
from .errors import EmptyScheduleError, ValidationError
from .layout import ScheduleLayoutBuilder
from .logging import get_logger
from .models import ScheduleLayout, TextBox, Weekday
from .utils import validate_file_path

log = get_logger(__name__)

NO_TEXT_MESSAGE = (
    "Could not extract text from image. "
    "Please ensure the image is clear and contains a schedule."
)
NO_BLOCKS_MESSAGE = (
    "Could not parse schedule from image. "
    "Please ensure the image shows a weekly schedule with days and times."
)


def process_schedule(
    source: Union[str, Path, bytes],
    use_gpu: Optional[bool] = None,
    config: Optional[LayoutConfig] = None,
    ocr_extractor=None,
) -> ScheduleLayout:
    """
    Process a schedule screenshot and extract its class blocks.

    Args:
        source: Path to an image file, or the encoded image bytes
        use_gpu: Whether to use GPU acceleration for OCR (default: from config)
        config: Layout configuration (default: environment singleton)
        ocr_extractor: Object with an ``extract_boxes(bytes)`` method; a
            PaddleOCR-backed OCRExtractor is built when omitted

    Returns:
        ScheduleLayout with at least one class block

    Raises:
        ValidationError: If the file is missing or not a supported image
        OCRError: If the OCR engine fails
        EmptyScheduleError: If no text or no class block was found
    """
    config = config or get_config()

    if isinstance(source, bytes):
        image_bytes = source
        name = "<bytes>"
    else:
        path = validate_file_path(str(source))
        image_bytes = path.read_bytes()
        name = path.name

    print(f"▶ Processing Schedule: {name}")

    # Step 1: OCR
    print("\n[1/3] Extracting text with PaddleOCR...")
    if ocr_extractor is None:
        # Imported here so the layout engine works without the OCR stack loaded
        from .ocr_extractor import OCRExtractor
        ocr_extractor = OCRExtractor(
            use_gpu=config.use_gpu if use_gpu is None else use_gpu,
            lang=config.ocr_lang,
        )
    boxes = ocr_extractor.extract_boxes(image_bytes)
    if not boxes:
        raise EmptyScheduleError(NO_TEXT_MESSAGE)
    print(f"✓ Extracted {len(boxes)} text boxes")

    # Step 2: Layout
    print("\n[2/3] Reconstructing schedule grid...")
    layout = ScheduleLayoutBuilder(config).build_layout(boxes)
    if not layout.class_blocks:
        log.warning(
            "no_class_blocks",
            source=name,
            time_labels=len(layout.time_labels),
            day_headers=len(layout.day_headers),
        )
        raise EmptyScheduleError(NO_BLOCKS_MESSAGE)
    print(f"✓ Built {len(layout.class_blocks)} class blocks")

    # Step 3: Summary
    print("\n[3/3] Extraction Summary")
    print(f"{'─'*60}")
    _print_layout_summary(layout)

    return layout


def save_to_json(layout: ScheduleLayout, output_path: str) -> None:
    """
    Save extracted class blocks to a JSON file.

    Args:
        layout: ScheduleLayout to save
        output_path: Path to output JSON file
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(layout.to_dict(), f, indent=2, ensure_ascii=False)

    print(f"✓ Saved to: {output_path}")


def load_boxes_from_json(input_path: str) -> List[TextBox]:
    """
    Load an OCR box dump, either a bare list or {"boxes": [...]}.

    Args:
        input_path: Path to the JSON file

    Returns:
        Text boxes in file order

    Raises:
        ValidationError: If the file does not hold a list of boxes
    """
    path = Path(input_path)
    if not path.exists():
        raise ValidationError(f"File not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('boxes')
    if not isinstance(data, list):
        raise ValidationError(f"Expected a list of text boxes in {path}")

    return [TextBox.from_dict(item) for item in data if isinstance(item, dict)]


def _print_layout_summary(layout: ScheduleLayout) -> None:
    """Print a summary of the extracted layout."""

    print(f"  Time labels: {', '.join(label.time for label in layout.time_labels)}")
    print(f"  Day columns: {', '.join(h.day.value for h in layout.day_headers)}")
    print(f"\n  Total Blocks: {len(layout.class_blocks)}")

    for day in Weekday:
        blocks = layout.get_blocks_by_day(day)
        if blocks:
            print(f"    {day.value}: {len(blocks)} blocks")

    if layout.class_blocks:
        print("\n  Sample Blocks:")
        for i, block in enumerate(layout.class_blocks[:3], 1):
            title = block.title[:40] + "..." if len(block.title) > 40 else block.title
            print(f"    {i}. {block.day_of_week.value} | {block.start_time}-{block.end_time} | {title}")

        if len(layout.class_blocks) > 3:
            print(f"    ... and {len(layout.class_blocks) - 3} more blocks")
