"""Pipeline orchestrator: dashes every patterned element of a DashContext."""

from __future__ import annotations

import logging
import time

from dashline.engine.config import DasherConfig
from dashline.engine.context import DashContext, DashedElement
from dashline.engine.dasher import dash_path
from dashline.engine.errors import DashError
from dashline.engine.pattern import DashPattern

logger = logging.getLogger(__name__)


class DashPipeline:
    """Runs the dasher over each element, isolating per-element failures."""

    def __init__(self, config: DasherConfig | None = None) -> None:
        self.config = config or DasherConfig()

    def run(self, ctx: DashContext, override: DashPattern | None = None) -> DashContext:
        """Dash all elements. ``override`` replaces every element's own pattern."""
        start = time.perf_counter()

        if override is not None:
            for el in ctx.elements:
                el.pattern = override
                # A parse-time pattern error no longer applies
                ctx.errors.pop(el.id, None)

        queued = [el for el in ctx.elements if not el.is_solid]
        logger.info(
            "Pipeline: %d elements queued (%d solid)",
            len(queued),
            ctx.num_elements - len(queued),
        )

        for el in queued:
            t0 = time.perf_counter()
            try:
                self.dash_element(el)
                ctx.completed.add(el.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s: %d dashes in %.1fms", el.id, el.dash_count, elapsed)
            except DashError as e:
                el.results = []
                ctx.errors[el.id] = str(e)
                logger.warning("  %s FAILED: %s", el.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d elements in %.0fms",
            len(ctx.completed),
            len(queued),
            total,
        )
        return ctx

    def dash_element(self, el: DashedElement) -> None:
        if el.pattern is None:
            return
        el.results = list(dash_path(el.events, el.pattern, self.config))
        el.features["dash_count"] = el.dash_count
        el.features["total_dash_length"] = el.total_dash_length
        el.features["total_gap_length"] = el.total_gap_length
        el.features["path_length"] = el.path_length


def create_pipeline(config: DasherConfig | None = None) -> DashPipeline:
    """Factory function for creating a pipeline instance."""
    return DashPipeline(config=config)
