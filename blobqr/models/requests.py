"""API request models."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

_HEX_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{3}){1,2}$")

COLOR_PRESETS: dict[str, str] = {
    "MidnightBlue": "#2c3e50",
    "JustBlack": "#000000",
    "DeepPurple": "#8e44ad",
    "Emerald": "#2ecc71",
    "VibrantOrange": "#e67e22",
    "Turquoise": "#1abc9c",
}

PresetName = Literal["MidnightBlue", "JustBlack", "DeepPurple", "Emerald", "VibrantOrange", "Turquoise"]
StyleName = Literal["classic", "blob"]


class GenerateRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Text or URL to encode")
    style: StyleName | None = Field(default=None, description="Render style")
    preset: PresetName | None = Field(default=None, description="Preset color name")
    color: str = Field(default="", description="Custom hex color; overrides the preset")

    @field_validator("color")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        value = value.strip()
        if value and not _HEX_COLOR.match(value):
            raise ValueError("Please enter a valid hex color (e.g. #1abc9c)")
        return value

    def effective_color(self, default_preset: str = "MidnightBlue") -> str:
        """Custom color when given, otherwise the chosen (or default) preset."""
        return self.color or COLOR_PRESETS[self.preset or default_preset]
