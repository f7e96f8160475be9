"""Layout engine configuration loaded from environment variables.

Every geometric threshold used by the pipeline lives here so that grids
rendered at unusual scales can be tuned without code changes.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class LayoutConfig(BaseSettings):
    """Layout engine configuration loaded from environment variables.

    Settings are loaded from LAYOUT_* environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Axis calibration
    default_time: str = Field(
        default="09:00",
        description="Time used when no time label could be calibrated",
    )
    day_tolerance_factor: float = Field(
        default=1.5,
        description="Multiplier on the half-gap to the neighbouring day header",
    )

    # Candidate filtering
    chrome_words: List[str] = Field(
        default=["schedule", "planner", "help", "sign", "out"],
        description="Navigation/header words that never belong to an event",
    )
    min_candidate_length: int = Field(
        default=2,
        description="Boxes with shorter trimmed text are treated as noise",
    )

    # Clustering (pixels)
    cluster_margin_x: float = Field(
        default=50,
        description="Horizontal proximity margin when growing a cluster",
    )
    cluster_margin_y: float = Field(
        default=80,
        description="Vertical proximity margin when growing a cluster",
    )
    min_single_box_length: int = Field(
        default=8,
        description="A one-box cluster is kept only if its text is longer than this",
    )

    # Block extraction
    same_line_threshold: float = Field(
        default=20,
        description="Boxes closer than this vertically are ordered left-to-right",
    )
    line_height_threshold: float = Field(
        default=25,
        description="Vertical jump that starts a new text line",
    )
    end_padding_minutes: int = Field(
        default=45,
        description="Minutes added to the last text line before rounding the end time",
    )
    max_title_lines: int = Field(
        default=3,
        description="Upper bound on lines folded into a title",
    )

    # OCR
    ocr_lang: str = Field(default="en", description="PaddleOCR language code")
    use_gpu: bool = Field(default=False, description="Use GPU acceleration for OCR")

    # Persistence
    db_path: str = Field(
        default="schedule_layout.db",
        description="SQLite database file for processed screenshots",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "LAYOUT_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: LayoutConfig | None = None


def get_config() -> LayoutConfig:
    """Get the layout configuration singleton.

    Returns:
        LayoutConfig: Layout configuration instance
    """
    global _config
    if _config is None:
        _config = LayoutConfig()
    return _config
