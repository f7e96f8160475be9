"""Shared fixtures: a synthetic Mon-Fri, 9am-12pm schedule grid."""

import pytest

from layout_engine.config import LayoutConfig
from layout_engine.models import TextBox

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri"]
TIME_NAMES = ["9am", "10am", "11am", "12pm"]


def make_box(text, x, y, width=60, height=15):
    return TextBox(text=text, x=x, y=y, width=width, height=height)


def axis_boxes():
    """Headers at x=100..500 (centers 120..520) and labels at y=50..200 (centers 60..210).

    The fitted time axis is exactly minutes = 540 + 1.2 * (y - 60).
    """
    headers = [
        TextBox(text=name, x=100 + 100 * i, y=10, width=40, height=20)
        for i, name in enumerate(DAY_NAMES)
    ]
    labels = [
        TextBox(text=name, x=0, y=50 + 50 * i, width=40, height=20)
        for i, name in enumerate(TIME_NAMES)
    ]
    return headers + labels


@pytest.fixture
def config():
    return LayoutConfig()


@pytest.fixture
def grid_axes():
    return axis_boxes()


@pytest.fixture
def grid_with_one_class():
    # Tuesday column center is x=220
    return axis_boxes() + [
        make_box("CS 61B", 190, 110),
        make_box("Soda 306", 190, 140),
    ]
