"""Configuration and logging setup for the Pterodactyl client."""

import logging
import os
import pathlib
from collections.abc import Mapping

import pydantic
import structlog

from . import applicationapi

CONFIG_ENV_VAR = "PTERODACTYL_CLIENT_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "pterodactyl.json"

ENV_PREFIX = "PTERODACTYL_"


class ClientConfig(pydantic.BaseModel):
    """Configuration for connecting to a Pterodactyl panel."""

    model_config = pydantic.ConfigDict(frozen=True)

    url: str = pydantic.Field(description="Base URL of the panel", min_length=1)
    api_key: str = pydantic.Field(
        description="Application API key sent as bearer token",
        min_length=1,
    )
    user_agent: str | None = pydantic.Field(
        None,
        description="User-Agent header value",
    )
    timeout: float = pydantic.Field(
        applicationapi.DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | pathlib.Path) -> ClientConfig:
    """Load panel connection settings from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If url or api_key is missing or invalid.
    """
    path = pathlib.Path(config_path)
    if not path.is_file():
        msg = (
            f"Panel client configuration not found: {config_path} "
            f"(pass a path or set {CONFIG_ENV_VAR})"
        )
        raise FileNotFoundError(msg)

    return ClientConfig.model_validate_json(path.read_text())


def config_from_env(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Build configuration from ``PTERODACTYL_*`` environment variables.

    Recognized variables are PTERODACTYL_URL, PTERODACTYL_API_KEY,
    PTERODACTYL_USER_AGENT, PTERODACTYL_TIMEOUT and PTERODACTYL_LOG_LEVEL.
    Unset variables fall back to the model defaults.
    """
    environ = os.environ if environ is None else environ
    data = {}
    for field in ClientConfig.model_fields:
        value = environ.get(f"{ENV_PREFIX}{field.upper()}")
        if value:
            data[field] = value
    return ClientConfig(**data)
