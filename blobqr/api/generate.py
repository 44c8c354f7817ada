"""POST /api/generate — QR code rendering in classic or blob style."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from qrcode.exceptions import DataOverflowError

from blobqr.config import Settings
from blobqr.dependencies import get_settings
from blobqr.engine.pipeline import GenerationResult, run_generation
from blobqr.models.requests import COLOR_PRESETS, GenerateRequest
from blobqr.models.responses import GenerateResponse, SavedFileResponse
from blobqr.svg.writer import write_svg
from blobqr.utils.filenames import output_file_name

router = APIRouter()
logger = logging.getLogger(__name__)


def _render(req: GenerateRequest, settings: Settings) -> tuple[GenerationResult, str]:
    style = req.style or settings.default_style
    color = req.effective_color(settings.default_preset)
    try:
        result = run_generation(req.text, style, color, settings.render_config())
    except DataOverflowError as e:
        logger.warning("Text too long to encode (%d chars)", len(req.text))
        raise HTTPException(status_code=422, detail="Text is too long for a QR code.") from e
    return result, color


@router.get("/presets")
def presets() -> dict[str, str]:
    return COLOR_PRESETS


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest, settings: Settings = Depends(get_settings)) -> GenerateResponse:
    result, color = _render(req, settings)
    return GenerateResponse(
        svg=result.svg,
        style=result.style,
        color=color,
        module_count=result.module_count,
        file_name=output_file_name(req.text, result.style),
    )


@router.post("/generate/svg")
def generate_svg(req: GenerateRequest, settings: Settings = Depends(get_settings)) -> Response:
    result, _ = _render(req, settings)
    return Response(content=result.svg, media_type="image/svg+xml")


@router.post("/generate/file", response_model=SavedFileResponse)
def generate_file(req: GenerateRequest, settings: Settings = Depends(get_settings)) -> SavedFileResponse:
    result, _ = _render(req, settings)
    file_name = output_file_name(req.text, result.style)
    try:
        path = write_svg(result.svg, settings.output_dir, file_name)
    except OSError as e:
        logger.error("Failed to save QR code: %s", e)
        raise HTTPException(status_code=500, detail="Failed to create QR code.") from e
    return SavedFileResponse(path=str(path), file_name=file_name)
