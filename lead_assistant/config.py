"""
Centralized configuration with environment variable overrides.

Brand wording, the inquiry API location, and chat limits are
configurable here. Nothing is hardcoded in the conversation logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from lead_assistant.logging_context import SessionIdFilter

load_dotenv()

logger = logging.getLogger(__name__)

MIN_INPUT_LENGTH_LIMIT = 20


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BrandConfig:
    """Customer-facing wording used in assistant responses."""

    name: str = os.getenv("BRAND_NAME", "Luxury Estates")
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "$")


@dataclass(frozen=True)
class InquiryApiConfig:
    """Location of the inquiry-creation endpoint."""

    base_url: str = os.getenv("INQUIRY_API_BASE_URL", "http://localhost:5000/api")
    timeout_sec: float = _safe_float("INQUIRY_API_TIMEOUT", "10.0")


@dataclass(frozen=True)
class ChatConfig:
    """Limits applied to incoming chat turns."""

    max_input_length: int = _safe_int("MAX_INPUT_LENGTH", "500")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    brand: BrandConfig = field(default_factory=BrandConfig)
    inquiry_api: InquiryApiConfig = field(default_factory=InquiryApiConfig)
    chat: ChatConfig = field(default_factory=ChatConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    assistant_name: str = os.getenv("ASSISTANT_NAME", "lead-assistant")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.inquiry_api.timeout_sec <= 0:
        raise ValueError(
            f"INQUIRY_API_TIMEOUT must be > 0, got {config.inquiry_api.timeout_sec}"
        )
    if not config.inquiry_api.base_url.startswith(("http://", "https://")):
        raise ValueError(
            "INQUIRY_API_BASE_URL must start with http:// or https://, "
            f"got {config.inquiry_api.base_url!r}"
        )
    if config.chat.max_input_length < MIN_INPUT_LENGTH_LIMIT:
        raise ValueError(
            f"MAX_INPUT_LENGTH must be >= {MIN_INPUT_LENGTH_LIMIT}, "
            f"got {config.chat.max_input_length}"
        )
    if not config.brand.name.strip():
        raise ValueError("BRAND_NAME must not be empty")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Records from loggers without the filter still need session_id to format.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, SessionIdFilter) for f in handler.filters):
            handler.addFilter(SessionIdFilter())
    logger.info("Configuration loaded for '%s'", config.brand.name)
    return config


# Singleton instance
settings = load_config()
