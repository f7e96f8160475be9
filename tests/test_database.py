"""Tests for SQLite persistence of layouts."""

import pytest

from layout_engine import build_layout
from layout_engine.database import ScheduleSource, create_tables, get_db_engine, load_blocks, save_layout
from layout_engine.models import ScheduleLayout
from sqlalchemy.orm import Session


@pytest.fixture
def engine():
    engine = get_db_engine(":memory:")
    create_tables(engine)
    return engine


def test_round_trip(engine, grid_with_one_class):
    layout = build_layout(grid_with_one_class)
    source_id = save_layout(engine, "schedule.png", layout)

    assert load_blocks(engine, source_id) == layout.class_blocks

    with Session(engine) as session:
        source = session.get(ScheduleSource, source_id)
        assert source.file_path == "schedule.png"
        assert source.processed_at is not None


def test_sources_are_kept_apart(engine, grid_with_one_class):
    first = save_layout(engine, "a.png", build_layout(grid_with_one_class))
    second = save_layout(engine, "b.png", ScheduleLayout())

    assert second != first
    assert load_blocks(engine, second) == []
    assert len(load_blocks(engine, first)) == 1
