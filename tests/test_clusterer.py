"""Tests for per-column event clustering."""

import pytest

from layout_engine.calibrator import DayAxis
from layout_engine.clusterer import EventClusterer
from layout_engine.models import DayHeader, Weekday

from conftest import make_box


@pytest.fixture
def day_axis():
    return DayAxis(headers=(
        DayHeader(day=Weekday.MONDAY, x=100),
        DayHeader(day=Weekday.TUESDAY, x=250),
        DayHeader(day=Weekday.WEDNESDAY, x=400),
    ))


@pytest.fixture
def clusterer(config):
    return EventClusterer(config)


def cluster_texts(clusters):
    return [sorted(b.text for b in cluster) for cluster in clusters]


def test_nearby_boxes_in_one_column_merge(clusterer, day_axis):
    boxes = [make_box("CS 61B", 70, 100), make_box("Soda 306", 70, 130)]
    assert cluster_texts(clusterer.cluster(boxes, day_axis)) == [["CS 61B", "Soda 306"]]


def test_distant_boxes_form_separate_clusters(clusterer, day_axis):
    boxes = [
        make_box("Data Structures", 70, 100),
        make_box("Linear Algebra", 70, 300),
    ]
    assert cluster_texts(clusterer.cluster(boxes, day_axis)) == [["Data Structures"], ["Linear Algebra"]]


def test_cluster_grows_through_intermediate_box(clusterer, day_axis):
    # "Prof Hug" is 85px below the title, too far on its own, but the
    # middle line pulls it in once the bounding box has grown.
    boxes = [
        make_box("CS 61B", 70, 100),
        make_box("Prof Hug", 70, 200),
        make_box("Soda 306", 70, 160),
    ]
    assert cluster_texts(clusterer.cluster(boxes, day_axis)) == [["CS 61B", "Prof Hug", "Soda 306"]]


def test_adjacent_columns_never_merge(clusterer, day_axis):
    # 30px apart horizontally, well inside the margin, but on different days
    boxes = [
        make_box("Physics 7A", 90, 100, width=70),
        make_box("Chem 1A lab", 190, 100, width=70),
    ]
    clusters = clusterer.cluster(boxes, day_axis)
    assert cluster_texts(clusters) == [["Physics 7A"], ["Chem 1A lab"]]


def test_short_single_box_is_dropped(clusterer, day_axis):
    boxes = [make_box("Lab", 70, 100)]
    assert clusterer.cluster(boxes, day_axis) == []


def test_long_single_box_is_kept(clusterer, day_axis):
    boxes = [make_box("Reading Group", 70, 100)]
    assert cluster_texts(clusterer.cluster(boxes, day_axis)) == [["Reading Group"]]


def test_exactly_eight_characters_is_not_enough(clusterer, day_axis):
    assert clusterer.cluster([make_box("Seminars", 70, 100)], day_axis) == []


def test_boxes_outside_columns_are_ignored(clusterer, day_axis):
    boxes = [make_box("Footer text here", 900, 100)]
    assert clusterer.cluster(boxes, day_axis) == []
    assert clusterer.group_by_day(boxes, day_axis) == {}


def test_clustering_is_repeatable(clusterer, day_axis):
    boxes = [
        make_box("CS 61B", 70, 100),
        make_box("Soda 306", 70, 130),
        make_box("EE 16A", 220, 100),
        make_box("Cory 101", 220, 125),
        make_box("Discussion section", 370, 400),
    ]
    first = clusterer.cluster(boxes, day_axis)
    second = clusterer.cluster(boxes, day_axis)
    assert first == second
    assert len(first) == 3


def test_margins_come_from_config(config, day_axis):
    config.cluster_margin_y = 10
    boxes = [make_box("CS 61B", 70, 100), make_box("Soda 306", 70, 130)]
    clusters = EventClusterer(config).cluster(boxes, day_axis)
    # Both halves are too short to stand alone
    assert clusters == []
