"""POST /api/dash: turn dash patterns into explicit dash geometry."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from dashline.dependencies import get_dasher_config
from dashline.engine.config import DasherConfig
from dashline.engine.dasher import Dash, dash_path
from dashline.engine.errors import DashError
from dashline.engine.pipeline import create_pipeline
from dashline.models.requests import DashPathRequest, DashRequest
from dashline.models.responses import DashItem, DashPathResponse, DashResponse, ElementResult
from dashline.svg.parser import parse_path_events, parse_svg
from dashline.svg.serializer import serialize_dashed

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/dash", response_model=DashResponse)
async def dash(req: DashRequest, config: DasherConfig = Depends(get_dasher_config)) -> DashResponse:
    start = time.perf_counter()

    ctx = parse_svg(req.svg)
    pipeline = create_pipeline(config)
    ctx = pipeline.run(ctx, override=req.override())

    elapsed = (time.perf_counter() - start) * 1000

    return DashResponse(
        elements=[ElementResult.from_element(el) for el in ctx.elements],
        svg=serialize_dashed(ctx),
        processing_time_ms=round(elapsed, 3),
        elements_dashed=len(ctx.completed),
        elements_failed=len(ctx.errors),
        errors=ctx.errors,
    )


@router.post("/dash/path", response_model=DashPathResponse)
async def dash_single_path(
    req: DashPathRequest,
    config: DasherConfig = Depends(get_dasher_config),
) -> DashPathResponse:
    try:
        events = parse_path_events(req.d)
        results = list(dash_path(events, req.pattern(), config))
    except (DashError, ValueError) as e:
        logger.warning("Dashing path failed: %s", e)
        return DashPathResponse(error=str(e))

    return DashPathResponse(
        items=[DashItem.from_result(r) for r in results],
        dash_count=sum(1 for r in results if isinstance(r, Dash)),
        total_length=float(sum(r.distance for r in results)),
    )
