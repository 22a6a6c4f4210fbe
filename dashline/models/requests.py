"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from dashline.engine.pattern import DashPattern


class DashRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    dasharray: list[float] | None = Field(
        default=None,
        description="Override every element's stroke-dasharray",
    )
    dashoffset: float = Field(default=0.0, description="Offset used with the dasharray override")

    @model_validator(mode="after")
    def check_pattern(self):
        # InvalidPattern is a ValueError, so FastAPI answers 422
        if self.dasharray is not None:
            DashPattern(self.dashoffset, self.dasharray)
        return self

    def override(self) -> DashPattern | None:
        if self.dasharray is None:
            return None
        return DashPattern(self.dashoffset, self.dasharray)


class DashPathRequest(BaseModel):
    d: str = Field(..., description="SVG path data")
    dasharray: list[float] = Field(..., description="Dash and gap lengths")
    dashoffset: float = Field(default=0.0, description="Starting phase")

    @model_validator(mode="after")
    def check_pattern(self):
        DashPattern(self.dashoffset, self.dasharray)
        return self

    def pattern(self) -> DashPattern:
        return DashPattern(self.dashoffset, self.dasharray)
