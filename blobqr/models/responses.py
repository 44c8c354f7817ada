"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    styles: list[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    svg: str
    style: str
    color: str
    module_count: int = 0
    file_name: str = ""


class SavedFileResponse(BaseModel):
    path: str
    file_name: str
