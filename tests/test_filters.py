"""Tests for event candidate filtering."""

import pytest

from layout_engine.filters import CandidateFilter

from conftest import make_box


@pytest.fixture
def candidate_filter(config):
    return CandidateFilter(config)


def texts(boxes):
    return [b.text for b in boxes]


def test_axis_labels_are_removed(candidate_filter, grid_axes):
    assert candidate_filter.filter_candidates(grid_axes) == []


def test_event_text_inside_grid_is_kept(candidate_filter, grid_with_one_class):
    kept = candidate_filter.filter_candidates(grid_with_one_class)
    assert texts(kept) == ["CS 61B", "Soda 306"]


@pytest.mark.parametrize("text", ["Schedule", "My Planner", "Help", "Sign Out", "out"])
def test_chrome_words_are_removed(candidate_filter, grid_axes, text):
    boxes = grid_axes + [make_box(text, 300, 120)]
    assert candidate_filter.filter_candidates(boxes) == []


def test_header_region_is_removed(candidate_filter, grid_axes):
    boxes = grid_axes + [make_box("Spring 2026", 300, 5)]
    assert candidate_filter.filter_candidates(boxes) == []


def test_time_gutter_is_removed(candidate_filter, grid_axes):
    boxes = grid_axes + [make_box("Lecture", 20, 120)]
    assert candidate_filter.filter_candidates(boxes) == []


def test_single_characters_are_noise(candidate_filter, grid_axes):
    boxes = grid_axes + [make_box("A", 300, 120), make_box(" B ", 300, 140), make_box("Lab", 300, 160)]
    assert texts(candidate_filter.filter_candidates(boxes)) == ["Lab"]


def test_bare_numbers_inside_events_survive(candidate_filter, grid_axes):
    boxes = grid_axes + [make_box("CS", 300, 120), make_box("61", 340, 120)]
    assert texts(candidate_filter.filter_candidates(boxes)) == ["CS", "61"]


def test_without_axes_only_content_filters_apply(candidate_filter):
    boxes = [make_box("Math 1A", 0, 0), make_box("x", 10, 10)]
    assert texts(candidate_filter.filter_candidates(boxes)) == ["Math 1A"]
