"""
Localization Parameters

Contains the LocalizationParams dataclass passed to every localization call.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from lingo_engine.api.exceptions import ConfigValidationError


@dataclass(frozen=True)
class LocalizationParams:
    """Locale pair and options for one localization call."""
    target_locale: str
    source_locale: Optional[str] = None  # None requests auto-detection
    fast: bool = False
    reference: Optional[Dict[str, Dict[str, Any]]] = None
    hints: Optional[Dict[str, List[str]]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocalizationParams":
        """Build params from a mapping using snake_case or camelCase keys."""
        def pick(snake: str, camel: str, default: Any = None) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            target_locale=pick("target_locale", "targetLocale"),
            source_locale=pick("source_locale", "sourceLocale"),
            fast=bool(pick("fast", "fast", False)),
            reference=pick("reference", "reference"),
            hints=pick("hints", "hints"),
        )


ParamsLike = Union[LocalizationParams, Mapping[str, Any]]


def validate_localization_params(params: ParamsLike) -> LocalizationParams:
    """
    Coerce and validate localization params.

    Raises:
        ConfigValidationError: If target_locale is missing or empty.
    """
    if not isinstance(params, LocalizationParams):
        params = LocalizationParams.from_dict(params or {})

    if not params.target_locale:
        raise ConfigValidationError(
            "targetLocale is required",
            details={"missing_field": "target_locale"},
        )

    return params
