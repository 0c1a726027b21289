"""POST /api/measure — length and bounding box of path data."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathreduce.config import Settings
from pathreduce.dependencies import get_settings
from pathreduce.engine.reduce import reduce_instructions
from pathreduce.models.requests import MeasureRequest
from pathreduce.models.responses import BoundingBoxOut, MeasureResponse
from pathreduce.svg.measure import get_bounding_box, get_length
from pathreduce.svg.parser import parse_path
from pathreduce.svg.serializer import serialize_instructions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/measure", response_model=MeasureResponse)
async def measure(req: MeasureRequest, settings: Settings = Depends(get_settings)) -> MeasureResponse:
    try:
        reduced = reduce_instructions(parse_path(req.d))
    except ValueError as e:
        logger.warning("Rejected measure request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    box = get_bounding_box(reduced)
    return MeasureResponse(
        length=get_length(reduced),
        bbox=BoundingBoxOut(
            x_min=box.x_min,
            y_min=box.y_min,
            x_max=box.x_max,
            y_max=box.y_max,
            width=box.width,
            height=box.height,
        ),
        reduced_d=serialize_instructions(reduced, settings.default_precision),
    )
