"""
Runtime settings for the screening engine.

Values come from the environment (a local .env file is honoured). The
resulting ScreeningConfig is frozen and handed to each component when it is
constructed.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

DEFAULT_MAX_TEXT_LENGTH = 5000
DEFAULT_OUTPUT_DIR = "output"


class ScreeningConfig(BaseModel):
    max_text_length: int = Field(DEFAULT_MAX_TEXT_LENGTH, gt=0, description="Longest ad copy accepted, in characters.")
    product_id: Optional[str] = Field(None, description="Default product when the caller passes none.")
    rules_path: Optional[str] = Field(None, description="JSON rule catalog replacing the built-in one.")
    output_dir: str = Field(DEFAULT_OUTPUT_DIR, description="Where the CLI writes its JSON results.")
    log_level: str = Field("INFO", description="Threshold for structlog output.")
    environment: str = Field("production", description="'development' switches logs to the console renderer.")
    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_str(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def load_config() -> ScreeningConfig:
    """Build a ScreeningConfig from the current environment."""
    return ScreeningConfig(
        max_text_length=_env_int("ADCHECK_MAX_TEXT_LENGTH", DEFAULT_MAX_TEXT_LENGTH),
        product_id=_env_str("ADCHECK_PRODUCT_ID"),
        rules_path=_env_str("ADCHECK_RULES_PATH"),
        output_dir=_env_str("ADCHECK_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
        log_level=(_env_str("LOG_LEVEL") or "INFO").upper(),
        environment=_env_str("ADCHECK_ENV") or "production",
    )
