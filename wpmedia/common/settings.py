# wpmedia/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Dict

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class ProbeConfig(BaseModel):
    """HEAD-request probe used to learn a remote file's byte length."""
    enabled: bool = True
    # The upstream header fetch had no timeout at all; bound it here.
    timeout_sec: float = Field(10.0, gt=0)
    follow_redirects: bool = True
    user_agent: str = "wpmedia-adapter"

    @field_validator("enabled", "follow_redirects", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class ImageSizeConfig(BaseModel):
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)


def _default_image_sizes() -> Dict[str, ImageSizeConfig]:
    # stock WordPress presets
    return {
        "thumbnail": ImageSizeConfig(width=150, height=150),
        "medium": ImageSizeConfig(width=300, height=300),
        "large": ImageSizeConfig(width=1024, height=1024),
    }


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "wpmedia"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    probe: ProbeConfig = ProbeConfig()

    # -------- Size registry (host environment) --------
    # e.g. IMAGE_SIZES='{"thumbnail": {"width": 150, "height": 150}}'
    image_sizes: Dict[str, ImageSizeConfig] = Field(default_factory=_default_image_sizes)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from wpmedia.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()
