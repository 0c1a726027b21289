"""POST /api/reduce — parse, reduce and re-serialize path data."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathreduce.config import Settings
from pathreduce.dependencies import get_settings
from pathreduce.engine.instructions import command_letter, instruction_values
from pathreduce.engine.reduce import reduce_instructions
from pathreduce.models.requests import ReduceRequest
from pathreduce.models.responses import InstructionOut, ReduceResponse
from pathreduce.svg.parser import parse_path
from pathreduce.svg.serializer import serialize_instructions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/reduce", response_model=ReduceResponse)
async def reduce(req: ReduceRequest, settings: Settings = Depends(get_settings)) -> ReduceResponse:
    precision = req.precision if req.precision is not None else settings.default_precision
    try:
        instructions = parse_path(req.d)
        reduced = reduce_instructions(instructions)
    except ValueError as e:
        logger.warning("Rejected reduce request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return ReduceResponse(
        d=serialize_instructions(reduced, precision),
        instructions=[
            InstructionOut(type=command_letter(ins), values=instruction_values(ins)) for ins in reduced
        ],
        input_count=len(instructions),
        output_count=len(reduced),
    )
