"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dashline.engine.context import DashedElement
from dashline.engine.dasher import Dash, DashOrGap


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class DashItem(BaseModel):
    kind: str
    distance: float
    start: tuple[float, float] | None = None
    end: tuple[float, float] | None = None

    @classmethod
    def from_result(cls, result: DashOrGap) -> DashItem:
        if isinstance(result, Dash):
            return cls(kind=result.kind.value, distance=result.distance, start=result.start, end=result.end)
        return cls(kind=result.kind.value, distance=result.distance)


class ElementResult(BaseModel):
    id: str
    tag: str
    solid: bool
    dasharray: list[float] = Field(default_factory=list)
    dashoffset: float = 0.0
    dash_count: int = 0
    total_dash_length: float = 0.0
    total_gap_length: float = 0.0
    path_length: float = 0.0
    items: list[DashItem] = Field(default_factory=list)

    @classmethod
    def from_element(cls, el: DashedElement) -> ElementResult:
        return cls(
            id=el.id,
            tag=el.tag,
            solid=el.is_solid,
            dasharray=list(el.pattern.array) if el.pattern else [],
            dashoffset=el.pattern.initial_offset if el.pattern else 0.0,
            dash_count=el.dash_count,
            total_dash_length=el.total_dash_length,
            total_gap_length=el.total_gap_length,
            path_length=el.path_length,
            items=[DashItem.from_result(r) for r in el.results],
        )


class DashResponse(BaseModel):
    elements: list[ElementResult] = Field(default_factory=list)
    svg: str = ""
    processing_time_ms: float = 0.0
    elements_dashed: int = 0
    elements_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class DashPathResponse(BaseModel):
    items: list[DashItem] = Field(default_factory=list)
    dash_count: int = 0
    total_length: float = 0.0
    error: str = ""
