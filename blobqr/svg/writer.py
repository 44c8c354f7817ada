"""Persist generated SVG documents."""

from __future__ import annotations

import logging
from pathlib import Path

from blobqr.engine import RenderConfig, generate
from blobqr.utils.filenames import output_file_name

logger = logging.getLogger(__name__)


def write_svg(svg: str, directory: str | Path, file_name: str) -> Path:
    """Write ``svg`` to ``directory/file_name`` in one UTF-8 write.

    OSError propagates; no partial-file cleanup is attempted.
    """
    folder = Path(directory).expanduser()
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / file_name
    path.write_text(svg, encoding="utf-8")
    logger.info("Saved QR code to %s", path)
    return path


def generate_qr_file(
    text: str,
    style: str,
    color: str,
    directory: str | Path,
    config: RenderConfig | None = None,
) -> Path:
    svg = generate(text, style, color, config)
    return write_svg(svg, directory, output_file_name(text, style))
