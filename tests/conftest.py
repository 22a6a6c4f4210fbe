"""Shared test fixtures."""

from __future__ import annotations

import pytest

from dashline.engine.pattern import DashPattern
from dashline.svg.events import PathBuilder


DASHED_LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <line x1="0" y1="0" x2="10" y2="0" stroke-dasharray="1,2"/>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 50">
  <path d="M0 0 L10 0 L10 10" stroke="black" stroke-dasharray="2 1"/>
  <polyline points="0,20 30,20" stroke="red" style="stroke-width: 2; stroke-dasharray: 3, 3; stroke-dashoffset: 1"/>
  <polygon points="0,30 4,30 4,33" stroke="blue" stroke-dasharray="1"/>
  <line x1="0" y1="45" x2="50" y2="45" stroke="gray"/>
</svg>'''

CURVED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 2 C 5 10, 10 10, 20 2" stroke-dasharray="2,2"/>
  <path d="M2 20 L22 20" stroke-dasharray="2,2"/>
</svg>'''

BAD_PATTERN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <line x1="0" y1="0" x2="10" y2="0" stroke-dasharray="2,0,1"/>
  <line x1="0" y1="5" x2="10" y2="5" stroke-dasharray="2,1"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="300px" height="150px">
  <path d="M0 0 H30 V30 Z" stroke-dasharray="5 5"/>
</svg>'''


@pytest.fixture
def one_two() -> DashPattern:
    return DashPattern(0.0, [1.0, 2.0])


@pytest.fixture
def sample_path():
    """Closed outline: (0,0) → (10,0) → (10,10) → (20,10) → (20,1.5) → close."""
    return (
        PathBuilder()
        .begin((0.0, 0.0))
        .line_to((10.0, 0.0))
        .line_to((10.0, 10.0))
        .line_to((20.0, 10.0))
        .line_to((20.0, 1.5))
        .close()
        .build()
    )


@pytest.fixture
def dashed_line_svg() -> str:
    return DASHED_LINE_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG
