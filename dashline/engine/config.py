"""Dasher configuration: opt-in behaviour switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dashline.config import Settings


@dataclass
class DasherConfig:
    """Controls how patterns are prepared before dashing."""

    # Double odd-length dash arrays (SVG stroke-dasharray semantics)
    duplicate_odd_patterns: bool = False

    # Classify boundary crossings by the consumed index rather than by
    # (index + 1) % 2 after the update. Only odd-length patterns differ.
    consumed_index_parity: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> DasherConfig:
        return cls(
            duplicate_odd_patterns=settings.dashline_duplicate_odd_patterns,
            consumed_index_parity=settings.dashline_consumed_index_parity,
        )
