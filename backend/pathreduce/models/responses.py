"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    instruction_kinds: int = 0


class InstructionOut(BaseModel):
    type: str
    values: list[float] = Field(default_factory=list)


class ReduceResponse(BaseModel):
    d: str
    instructions: list[InstructionOut] = Field(default_factory=list)
    input_count: int = 0
    output_count: int = 0


class BoundingBoxOut(BaseModel):
    x_min: float = 0.0
    y_min: float = 0.0
    x_max: float = 0.0
    y_max: float = 0.0
    width: float = 0.0
    height: float = 0.0


class MeasureResponse(BaseModel):
    length: float
    bbox: BoundingBoxOut
    reduced_d: str
