"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Default masking behaviour and logging setup loaded from environment variables or .env files."""

    log_level: str = Field(default="WARNING", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    mask_char: str = Field(
        default="*",
        min_length=1,
        max_length=1,
        description="Default mask character.",
    )
    unmasked_start: int = Field(
        default=0,
        ge=0,
        description="Default number of leading digits left visible.",
    )
    unmasked_end: int = Field(
        default=4,
        ge=0,
        description="Default number of trailing digits left visible.",
    )
    show_length: bool = Field(
        default=True,
        description="Keep one mask character per hidden digit when true.",
    )
    validate_input: bool = Field(
        default=False,
        description="Reject inputs outside 13-19 digits when true.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (log_level := _env("CARDMASK_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("CARDMASK_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (mask_char := _env("CARDMASK_MASK_CHAR")):
        payload["mask_char"] = mask_char
    if (unmasked_start := _env("CARDMASK_UNMASKED_START")):
        try:
            payload["unmasked_start"] = int(unmasked_start)
        except ValueError:
            pass
    if (unmasked_end := _env("CARDMASK_UNMASKED_END")):
        try:
            payload["unmasked_end"] = int(unmasked_end)
        except ValueError:
            pass
    if (show_length := _env("CARDMASK_SHOW_LENGTH")):
        payload["show_length"] = _coerce_bool(show_length)
    if (validate_input := _env("CARDMASK_VALIDATE_INPUT")):
        payload["validate_input"] = _coerce_bool(validate_input)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
