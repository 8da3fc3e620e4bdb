"""Application settings."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


def _parse_cors_origins(value: str | None) -> List[str]:
    if not value:
        return ["*"]

    raw = value.strip()
    if raw == "*":
        return ["*"]

    if raw.startswith("["):
        try:
            parsed = json.loads(raw)
            if isinstance(parsed, list):
                return [str(item).strip() for item in parsed if str(item).strip()]
        except json.JSONDecodeError:
            pass

    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_optional_path(value: str | None) -> Optional[Path]:
    if not value or not value.strip():
        return None
    return Path(value.strip()).expanduser().resolve()


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    cors_origins: List[str]
    log_level: str
    environment: str
    max_samples: int
    standards_file: Optional[Path]

    @classmethod
    def from_env(cls) -> "Settings":
        host = os.getenv("HOST", os.getenv("API_HOST", "127.0.0.1"))
        port = int(os.getenv("PORT", os.getenv("API_PORT", "5050")))
        cors_origins = _parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        environment = os.getenv("ENVIRONMENT", "development").lower()
        max_samples = int(os.getenv("MAX_SAMPLES", "100000"))
        standards_file = _parse_optional_path(os.getenv("STANDARDS_FILE"))

        return cls(
            host=host,
            port=port,
            cors_origins=cors_origins,
            log_level=log_level,
            environment=environment,
            max_samples=max_samples,
            standards_file=standards_file,
        )


settings = Settings.from_env()
