import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from lingo_engine.api.exceptions import ConfigValidationError
from lingo_engine.logger import get_logger

logger = get_logger(__name__)

# Engine configuration constants
DEFAULT_API_URL = "https://engine.lingo.dev"
DEFAULT_BATCH_SIZE = 25  # Maximum keys per chunk
DEFAULT_IDEAL_BATCH_ITEM_SIZE = 250  # Word budget per chunk
DEFAULT_TIMEOUT = 120

WORKFLOW_ID_LENGTH = 12

# Environment variables read by load_config_from_env()
ENV_VARS = {
    "api_key": "LINGODOTDEV_API_KEY",
    "api_url": "LINGODOTDEV_API_URL",
    "batch_size": "LINGODOTDEV_BATCH_SIZE",
    "ideal_batch_item_size": "LINGODOTDEV_IDEAL_BATCH_ITEM_SIZE",
    "timeout": "LINGODOTDEV_TIMEOUT",
}

TimeoutConfig = Union[int, float, Dict[str, float]]


@dataclass(frozen=True)
class EngineConfig:
    """Immutable engine settings, owned by one LocalizationEngine."""
    api_key: str
    api_url: str = DEFAULT_API_URL
    batch_size: int = DEFAULT_BATCH_SIZE
    ideal_batch_item_size: int = DEFAULT_IDEAL_BATCH_ITEM_SIZE
    timeout: TimeoutConfig = DEFAULT_TIMEOUT


def _positive_int(name: str, value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigValidationError(
            f"{name} must be an integer",
            details={"field": name, "value": value},
        )
    if number < 1:
        raise ConfigValidationError(
            f"{name} must be at least 1",
            details={"field": name, "value": value},
        )
    return number


def validate_engine_config(
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    batch_size: Optional[int] = None,
    ideal_batch_item_size: Optional[int] = None,
    timeout: Optional[TimeoutConfig] = None,
) -> EngineConfig:
    """
    Apply defaults and validate engine settings.

    Raises:
        ConfigValidationError: If api_key is missing or a size is not a positive integer.
    """
    if not api_key:
        raise ConfigValidationError(
            "apiKey is required",
            details={"missing_field": "api_key"},
        )

    return EngineConfig(
        api_key=api_key,
        api_url=(api_url or DEFAULT_API_URL).rstrip("/"),
        batch_size=_positive_int("batch_size", batch_size, DEFAULT_BATCH_SIZE),
        ideal_batch_item_size=_positive_int(
            "ideal_batch_item_size", ideal_batch_item_size, DEFAULT_IDEAL_BATCH_ITEM_SIZE
        ),
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
    )


def load_config_from_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Read engine settings from LINGODOTDEV_* environment variables."""
    environ = os.environ if environ is None else environ
    config: Dict[str, Any] = {}
    for field_name, var in ENV_VARS.items():
        value = environ.get(var)
        if value is None or value == "":
            continue
        if field_name == "timeout":
            try:
                config[field_name] = float(value)
            except ValueError:
                raise ConfigValidationError(
                    f"{var} must be a number",
                    details={"field": field_name, "value": value},
                )
        else:
            config[field_name] = value
    logger.debug(f"Loaded engine settings from environment: {sorted(k for k in config if k != 'api_key')}")
    return config
