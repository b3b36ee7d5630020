"""Process settings read from the environment (and a local .env file, if present)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from infra.paths import LOG_DIR


class Settings(BaseModel):
    """
    Runtime settings for logging.

    Attributes:
        log_level: Root log level name (ARENA_LOG_LEVEL)
        log_json: Emit JSON log lines (ARENA_LOG_JSON)
        log_file: Log file path, None disables file output (ARENA_LOG_FILE, "" to disable)
    """
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    log_file: Path | None = Field(default=LOG_DIR / "arena.log")

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        values: dict = {}
        if "ARENA_LOG_LEVEL" in os.environ:
            values["log_level"] = os.environ["ARENA_LOG_LEVEL"].upper()
        if "ARENA_LOG_JSON" in os.environ:
            values["log_json"] = os.environ["ARENA_LOG_JSON"]
        if "ARENA_LOG_FILE" in os.environ:
            values["log_file"] = os.environ["ARENA_LOG_FILE"] or None
        return cls.model_validate(values)
