"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from blobqr.engine.config import RenderConfig
from blobqr.models.requests import PresetName, StyleName


class Settings(BaseSettings):
    blobqr_env: str = "development"
    blobqr_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Output
    output_dir: str = "~/Downloads"
    default_style: StyleName = "blob"
    default_preset: PresetName = "MidnightBlue"
    module_size: int = Field(default=30, gt=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def render_config(self) -> RenderConfig:
        return RenderConfig(module_size=self.module_size)


settings = Settings()
