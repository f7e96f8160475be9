"""Command-line interface for the layout engine."""

import json
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .config import get_config
from .database import get_db_engine, create_tables, save_layout
from .errors import EmptyScheduleError, LayoutEngineError, ValidationError
from .layout import ScheduleLayoutBuilder
from .logging import setup_logging
from .main import NO_BLOCKS_MESSAGE, load_boxes_from_json, process_schedule, save_to_json
from .utils import is_supported_file, validate_blocks


def _print_usage() -> None:
    print("="*70)
    print("SCHEDULE LAYOUT - Command Line Interface")
    print("="*70)
    print("\nUsage: schedule-layout <file_path> [options]")
    print("\nArguments:")
    print("  file_path      Schedule screenshot, or OCR box dump with --boxes")
    print("\nOptions:")
    print("  --boxes        Treat file_path as a JSON list of OCR text boxes")
    print("  --gpu          Use GPU acceleration for OCR")
    print("  --output PATH  Specify output JSON file path")
    print("  --db PATH      Also store the blocks in this SQLite database")
    print("  --json-logs    Emit structured logs as JSON")
    print("  --log-level L  DEBUG, INFO, WARNING, ERROR")
    print("\nSupported formats: PNG, JPG, JPEG, BMP, TIFF, WEBP")
    print("\nExamples:")
    print("  schedule-layout schedule.png")
    print("  schedule-layout schedule.png --output blocks.json --db schedule.db")
    print("  schedule-layout boxes.json --boxes")


def _option_value(argv: List[str], name: str) -> Optional[str]:
    if name in argv:
        idx = argv.index(name)
        if idx + 1 < len(argv):
            return argv[idx + 1]
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line execution."""
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0].startswith('--'):
        _print_usage()
        return 1

    config = get_config()
    setup_logging(
        json_output='--json-logs' in argv or config.log_json,
        log_level=_option_value(argv, '--log-level') or config.log_level,
    )

    file_path = argv[0]
    use_boxes = '--boxes' in argv
    use_gpu = '--gpu' in argv or config.use_gpu
    db_path = _option_value(argv, '--db')
    output_path = _option_value(argv, '--output') or Path(file_path).stem + "_blocks.json"

    if not use_boxes and not is_supported_file(file_path):
        print("\n✗ Error: Unsupported file format")
        print("  Supported formats: PNG, JPG, JPEG, BMP, TIFF, WEBP")
        return 1

    try:
        if use_boxes:
            boxes = load_boxes_from_json(file_path)
            layout = ScheduleLayoutBuilder(config).build_layout(boxes)
            if not layout.class_blocks:
                raise EmptyScheduleError(NO_BLOCKS_MESSAGE)
        else:
            layout = process_schedule(file_path, use_gpu=use_gpu, config=config)

        warnings = validate_blocks(layout.class_blocks)
        if warnings:
            print("\n" + "="*70)
            print("VALIDATION WARNINGS")
            print("="*70)
            for warning in warnings:
                print(f"⚠ {warning}")

        print("\n" + "="*70)
        print("SAVING RESULTS")
        print("="*70)
        save_to_json(layout, output_path)

        if db_path:
            engine = get_db_engine(db_path=db_path)
            create_tables(engine)
            source_id = save_layout(engine, file_path, layout)
            # Printed as JSON so callers can parse the source id
            print(json.dumps({"schedule_source_id": source_id}))

        print("\n✓ Processing completed successfully!")
        return 0

    except ValidationError as e:
        print(f"\n✗ Validation Error: {e}")
        return 1
    except EmptyScheduleError as e:
        print(f"\n✗ {e}")
        return 1
    except LayoutEngineError as e:
        print(f"\n✗ Processing Error: {e}")
        return 1
    except Exception as e:
        print(f"\n✗ Processing Error: {type(e).__name__}: {e}")
        traceback.print_exc()
        return 1
