"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReduceRequest(BaseModel):
    d: str = Field(..., description="SVG path data")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=15,
        description="Decimal places in the serialized output (default from settings)",
    )


class MeasureRequest(BaseModel):
    d: str = Field(..., description="SVG path data")
