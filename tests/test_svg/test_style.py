"""Tests for dash style attribute parsing."""

import pytest

from dashline.engine.errors import InvalidPattern
from dashline.engine.pattern import DashPattern
from dashline.svg.style import parse_dasharray, parse_style, pattern_from_attributes


def test_parse_dasharray_separators():
    assert parse_dasharray("5, 3 2") == [5.0, 3.0, 2.0]
    assert parse_dasharray("5px,2px") == [5.0, 2.0]


@pytest.mark.parametrize("text", [None, "", "  ", "none", "NONE"])
def test_parse_dasharray_none(text):
    assert parse_dasharray(text) is None


def test_parse_dasharray_rejects_negative():
    with pytest.raises(InvalidPattern):
        parse_dasharray("4 -1")


def test_parse_dasharray_rejects_garbage():
    with pytest.raises(InvalidPattern):
        parse_dasharray("4 abc")


def test_parse_style():
    assert parse_style("stroke: red; stroke-DashArray :1,2;;junk") == {
        "stroke": "red",
        "stroke-dasharray": "1,2",
    }


def test_pattern_from_attributes():
    attrs = {"stroke-dasharray": "4 2", "stroke-dashoffset": "1.5"}
    assert pattern_from_attributes(attrs) == DashPattern(1.5, [4.0, 2.0])


def test_style_overrides_attributes():
    attrs = {"stroke-dasharray": "4 2", "style": "stroke-dasharray: 1 1"}
    assert pattern_from_attributes(attrs) == DashPattern(0.0, [1.0, 1.0])


def test_solid_strokes():
    assert pattern_from_attributes({}) is None
    assert pattern_from_attributes({"stroke-dasharray": "none"}) is None
    assert pattern_from_attributes({"stroke-dasharray": "0 0"}) is None


def test_zero_entry_is_invalid():
    with pytest.raises(InvalidPattern):
        pattern_from_attributes({"stroke-dasharray": "1,0"})


def test_bad_offset_is_invalid():
    with pytest.raises(InvalidPattern):
        pattern_from_attributes({"stroke-dasharray": "1,2", "stroke-dashoffset": "half"})
