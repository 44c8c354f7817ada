"""Matrix builder — QR symbol encoding into a boolean module grid."""

from __future__ import annotations

import logging

import numpy as np
import qrcode
from numpy.typing import NDArray
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError

from blobqr.engine.config import DEFAULT_CONFIG, RenderConfig

logger = logging.getLogger(__name__)

Matrix = NDArray[np.bool_]

_ERROR_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def build_matrix(text: str, config: RenderConfig = DEFAULT_CONFIG) -> Matrix:
    """Encode ``text`` and return the N×N module grid, indexed [row, col].

    Raises ``qrcode.exceptions.DataOverflowError`` when the text does not fit
    any symbol version at the configured error-correction level, whichever
    way the installed qrcode release reports it.
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=_ERROR_LEVELS[config.error_correction],
        border=config.border,
    )
    qr.add_data(text)
    try:
        qr.make(fit=True)
    except ValueError as e:
        # qrcode 8.x reports version overflow as ValueError from its version setter
        raise DataOverflowError(str(e)) from e

    if config.border:
        modules = qr.get_matrix()
    else:
        modules = qr.modules

    matrix = np.array(modules, dtype=bool)
    matrix.setflags(write=False)
    logger.debug("Encoded %d chars into %dx%d matrix", len(text), *matrix.shape)
    return matrix


def matrix_from_rows(rows: list[str] | list[list[bool]]) -> Matrix:
    """Build a read-only matrix from rows of bools or '#'/'.' strings."""
    if rows and isinstance(rows[0], str):
        data = [[ch == "#" for ch in row] for row in rows]
    else:
        data = rows
    matrix = np.array(data, dtype=bool)
    if matrix.ndim != 2:
        raise ValueError("matrix rows must have equal length")
    matrix.setflags(write=False)
    return matrix
