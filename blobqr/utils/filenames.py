"""Output file naming from the encoded text."""

from __future__ import annotations

import re

_PROTOCOL = re.compile(r"^https?://", re.IGNORECASE)
_UNSAFE = re.compile(r'[<>:"/\\|?*\x00-\x1F]')

_MAX_LEN = 50
_HEAD = 30
_TAIL = 20

_STYLE_SUFFIX = {
    "classic": "_classic_qrcode.svg",
    "blob": "_merged_qrcode.svg",
}


def generate_file_name(text: str) -> str:
    """Filesystem-safe base name: protocol stripped, unsafe chars → '_'.

    Names longer than 50 chars keep the first 30 and last 20 characters.
    """
    sanitized = _UNSAFE.sub("_", _PROTOCOL.sub("", text, count=1))
    if len(sanitized) <= _MAX_LEN:
        return sanitized
    return sanitized[:_HEAD] + sanitized[-_TAIL:]


def output_file_name(text: str, style: str) -> str:
    try:
        suffix = _STYLE_SUFFIX[style]
    except KeyError:
        raise ValueError(f"Unknown QR style: {style!r}") from None
    return generate_file_name(text) + suffix
