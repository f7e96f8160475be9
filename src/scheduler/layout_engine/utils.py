"""Time arithmetic, text normalization and file validation helpers."""

import math
import re
from pathlib import Path
from typing import List

from .errors import ValidationError
from .models import ClassBlock

MINUTES_PER_DAY = 24 * 60

SUPPORTED_IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.bmp', '.tiff', '.tif', '.webp'}


def time_to_minutes(time_str: str) -> int:
    """
    Convert an "HH:MM" string into minutes since midnight.

    Args:
        time_str: 24-hour time string

    Returns:
        Minutes since midnight
    """
    hours, minutes = time_str.split(':')
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: float) -> str:
    """
    Format minutes since midnight as "HH:MM".

    Fractional minutes are floored and the value is clamped to the day,
    so extrapolating past the first or last grid label never yields
    negative hours or "24:xx".

    Args:
        minutes: Minutes since midnight (may be fractional or out of range)

    Returns:
        24-hour time string
    """
    total = int(math.floor(minutes))
    total = max(0, min(MINUTES_PER_DAY - 1, total))
    return f"{total // 60:02d}:{total % 60:02d}"


def add_minutes(time_str: str, minutes_to_add: int) -> str:
    """Shift a time forward, wrapping around midnight."""
    total = (time_to_minutes(time_str) + minutes_to_add) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def round_to_half_hour(time_str: str) -> str:
    """
    Round a time to the nearest half hour (ties round up).

    Args:
        time_str: 24-hour time string

    Returns:
        Rounded time string, wrapping 24:00 to 00:00
    """
    total = time_to_minutes(time_str)
    rounded = int(math.floor(total / 30 + 0.5)) * 30
    rounded %= MINUTES_PER_DAY
    return f"{rounded // 60:02d}:{rounded % 60:02d}"


def sanitize_text(text: str) -> str:
    """
    Sanitize OCR text by collapsing whitespace.

    Args:
        text: Text to sanitize

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    text = re.sub(r'\s+', ' ', text)
    text = text.replace('\x00', '')

    return text.strip()


def normalize_title(title: str) -> str:
    """
    Normalize a course title for grouping.

    "CS 61B" and "cs  61b " normalize to the same key.
    """
    return sanitize_text(title).lower()


def tidy_title(title: str) -> str:
    """Join hyphenated fragments OCR split apart ("CS - 61B" -> "CS-61B")."""
    title = re.sub(r'\s+-\s+|\s+-|-\s+', '-', title)
    return sanitize_text(title)


def validate_file_path(file_path: str, supported_extensions: set = SUPPORTED_IMAGE_EXTENSIONS) -> Path:
    """
    Validate file path and extension.

    Args:
        file_path: Path to validate
        supported_extensions: Set of supported file extensions

    Returns:
        Validated Path object

    Raises:
        ValidationError: If validation fails
    """
    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"File not found: {path}")

    if not path.is_file():
        raise ValidationError(f"Path is not a file: {path}")

    if path.suffix.lower() not in supported_extensions:
        raise ValidationError(
            f"Unsupported file format: {path.suffix}. "
            f"Supported formats: {', '.join(sorted(supported_extensions))}"
        )

    return path


def is_supported_file(file_path: str) -> bool:
    """
    Quick check if file is supported.

    Args:
        file_path: Path to check

    Returns:
        True if file extension is supported
    """
    return Path(file_path).suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS


def validate_blocks(blocks: List[ClassBlock]) -> List[str]:
    """
    Validate extracted class blocks and return warnings.

    Args:
        blocks: Blocks produced by a layout build

    Returns:
        List of validation warning messages
    """
    warnings = []

    if not blocks:
        warnings.append("No class blocks were extracted")
        return warnings

    missing_location = sum(1 for b in blocks if not b.location)
    if missing_location > 0:
        warnings.append(f"{missing_location} blocks missing location")

    short_titles = sum(1 for b in blocks if len(b.title.strip()) < 3)
    if short_titles > 0:
        warnings.append(f"{short_titles} blocks have very short titles")

    # Same day, overlapping interval
    overlaps = 0
    ordered = sorted(blocks, key=lambda b: (b.day_of_week.order, b.start_time))
    for prev, cur in zip(ordered, ordered[1:]):
        if prev.day_of_week == cur.day_of_week and cur.start_time < prev.end_time:
            overlaps += 1
    if overlaps > 0:
        warnings.append(f"{overlaps} blocks overlap the previous block on the same day")

    return warnings
