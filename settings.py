import os
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 60.0

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(RuntimeError):
    """Raised when the environment does not hold a usable configuration."""


class Settings(BaseModel):
    """Typed runtime configuration, passed explicitly to whatever needs it."""

    gemini_api_key: str
    model_name: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    request_timeout: float = DEFAULT_TIMEOUT
    legacy_score_bands: bool = False
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # keep the credential out of logs and tracebacks
        return (
            f"Settings(model_name={self.model_name!r}, api_base={self.api_base!r}, "
            f"request_timeout={self.request_timeout}, legacy_score_bands={self.legacy_score_bands})"
        )

    __str__ = __repr__


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the process environment (and a .env file if present).

    Raises ConfigError when GEMINI_API_KEY is missing or REQUEST_TIMEOUT is not
    a positive number, so bad configuration fails at startup instead of on the
    first analysis request.
    """
    load_dotenv(env_file)

    api_key = (os.getenv("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY is not set. Add it to your environment or .env file.")

    raw_timeout = os.getenv("REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"REQUEST_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigError("REQUEST_TIMEOUT must be greater than zero")

    return Settings(
        gemini_api_key=api_key,
        model_name=os.getenv("MODEL_NAME", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
        api_base=os.getenv("GEMINI_API_BASE", DEFAULT_API_BASE).rstrip("/"),
        request_timeout=timeout,
        legacy_score_bands=os.getenv("LEGACY_SCORE_BANDS", "").strip().lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
