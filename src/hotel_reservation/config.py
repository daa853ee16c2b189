from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, field_validator

DEFAULT_DATA_FILE = "reservations.json"
DEFAULT_REPORT_FILE = "bookings_report.txt"
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

ENV_KEYS: dict[str, str] = {
    "data_file": "HOTEL_DATA_FILE",
    "report_file": "HOTEL_REPORT_FILE",
    "log_level": "HOTEL_LOG_LEVEL",
}


class Settings(BaseModel):
    """Runtime settings of the reservation desk"""

    data_file: Path = Path(DEFAULT_DATA_FILE)
    report_file: Path = Path(DEFAULT_REPORT_FILE)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Read settings from HOTEL_* environment variables"""
        env = os.environ if env is None else env
        values = {field: env[key] for field, key in ENV_KEYS.items() if env.get(key)}
        return cls.model_validate(values)

    def with_overrides(self, **overrides: Any) -> Settings:
        """Copy with the given non-None values replaced and re-validated"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return type(self).model_validate({**self.model_dump(), **changes})

