"""Unit tests for reading time estimation."""

import pytest

from inkwell.domain.service import calculate_reading_time


@pytest.mark.parametrize(
    ("word_count", "minutes"),
    [(0, 0), (1, 1), (200, 1), (201, 2), (1000, 5)],
)
def test_rounds_up_to_whole_minutes(word_count, minutes):
    content = " ".join(["word"] * word_count)
    assert calculate_reading_time(content, 200) == minutes


def test_markup_is_not_counted():
    content = '<p class="lead">Hello <strong>brave</strong> new<br/>world</p>'
    assert calculate_reading_time(content, 1) == 4


def test_entities_are_decoded_before_counting():
    assert calculate_reading_time("<p>fish&nbsp;&amp;&nbsp;chips</p>", 1) == 3


def test_whitespace_only_content_takes_no_time():
    assert calculate_reading_time(" \n\t ", 200) == 0


def test_comparison_signs_are_not_markup():
    content = "if x < y " + " ".join(["word"] * 400) + " and z > 1"
    assert calculate_reading_time(content, 200) == 3
