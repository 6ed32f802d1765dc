"""
Payload Converters

Every typed input is projected into a flat key -> string payload before
chunking and projected back out of the localized payload afterwards.
Each converter is a pair of pure functions keyed by input kind.
"""

from typing import Any, Dict, List, Protocol

from lingo_engine.logger import get_logger
from lingo_engine.translation.params import LocalizationParams

logger = get_logger(__name__)

TEXT_KEY = "text"
ITEM_KEY_PREFIX = "item_"
CHAT_KEY_PREFIX = "chat_"


class PayloadConverter(Protocol):
    kind: str

    def to_payload(self, content: Any) -> Dict[str, Any]:
        ...

    def from_payload(self, content: Any, localized: Dict[str, str], params: LocalizationParams) -> Any:
        ...


def item_key(index: int) -> str:
    return f"{ITEM_KEY_PREFIX}{index}"


def chat_key(index: int) -> str:
    return f"{CHAT_KEY_PREFIX}{index}"


class TextConverter:
    kind = "text"

    def to_payload(self, content: str) -> Dict[str, Any]:
        return {TEXT_KEY: content}

    def from_payload(self, content: str, localized: Dict[str, str], params: LocalizationParams) -> str:
        return localized.get(TEXT_KEY) or ""


class ObjectConverter:
    """Top-level string values only; nested values pass through untouched."""

    kind = "object"

    def to_payload(self, content: Dict[str, Any]) -> Dict[str, Any]:
        return dict(content)

    def from_payload(
        self, content: Dict[str, Any], localized: Dict[str, str], params: LocalizationParams
    ) -> Dict[str, Any]:
        result = dict(content)
        result.update(localized)
        return result


class StringArrayConverter:
    kind = "array"

    def to_payload(self, content: List[str]) -> Dict[str, Any]:
        return {item_key(i): value for i, value in enumerate(content)}

    def from_payload(self, content: List[str], localized: Dict[str, str], params: LocalizationParams) -> List[str]:
        # Follows the order of the response mapping, not the item_<n> suffix
        return [str(value) for value in localized.values()]


class ChatConverter:
    kind = "chat"

    def to_payload(self, content: List[Dict[str, str]]) -> Dict[str, Any]:
        return {chat_key(i): message["text"] for i, message in enumerate(content)}

    def from_payload(
        self, content: List[Dict[str, str]], localized: Dict[str, str], params: LocalizationParams
    ) -> List[Dict[str, str]]:
        result = []
        for i, message in enumerate(content):
            key = chat_key(i)
            if key not in localized:
                logger.warning(f"No localized text returned for {key}, keeping source text")
            result.append({"name": message["name"], "text": localized.get(key, message["text"])})
        return result


CONVERTERS: Dict[str, PayloadConverter] = {
    converter.kind: converter
    for converter in (TextConverter(), ObjectConverter(), StringArrayConverter(), ChatConverter())
}


def get_converter(kind: str) -> PayloadConverter:
    try:
        return CONVERTERS[kind]
    except KeyError:
        raise ValueError(f"Unknown content kind: {kind}")
