"""
Deprecated engine names kept for backwards compatibility.

Each alias builds a regular LocalizationEngine and warns once per process.
"""

import warnings
from typing import Any, Set

from lingo_engine.logger import get_logger
from lingo_engine.translation.engine import LocalizationEngine

logger = get_logger(__name__)

_warned_aliases: Set[str] = set()


def _warn_once(alias: str) -> None:
    if alias in _warned_aliases:
        return
    _warned_aliases.add(alias)
    message = (
        f"{alias} is deprecated and will be removed in a future release. "
        "Please use LocalizationEngine instead."
    )
    logger.warning(message)
    warnings.warn(message, DeprecationWarning, stacklevel=3)


def ReplexicaEngine(**kwargs: Any) -> LocalizationEngine:
    """Deprecated: use LocalizationEngine."""
    engine = LocalizationEngine(**kwargs)
    _warn_once("ReplexicaEngine")
    return engine


def LingoEngine(**kwargs: Any) -> LocalizationEngine:
    """Deprecated: use LocalizationEngine."""
    engine = LocalizationEngine(**kwargs)
    _warn_once("LingoEngine")
    return engine
