"""Client library for the Lingo.dev localization API."""

from lingo_engine.api.exceptions import (
    LocalizationError,
    ConfigValidationError,
    ServerError,
    InvalidRequestError,
    RemoteRejectedError,
    UnknownHttpError,
    RecognitionError,
    TransportError,
    LocalizationCancelled,
)
from lingo_engine.config import EngineConfig, validate_engine_config, load_config_from_env
from lingo_engine.html import HtmlCodec
from lingo_engine.translation import (
    LocalizationEngine,
    LocalizationParams,
    LingoEngine,
    ReplexicaEngine,
    count_words,
    extract_payload_chunks,
)

__version__ = "0.1.0"

__all__ = [
    "LocalizationEngine",
    "LocalizationParams",
    "EngineConfig",
    "HtmlCodec",
    "validate_engine_config",
    "load_config_from_env",
    "count_words",
    "extract_payload_chunks",
    "LingoEngine",
    "ReplexicaEngine",
    "LocalizationError",
    "ConfigValidationError",
    "ServerError",
    "InvalidRequestError",
    "RemoteRejectedError",
    "UnknownHttpError",
    "RecognitionError",
    "TransportError",
    "LocalizationCancelled",
]
