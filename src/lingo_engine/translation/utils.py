"""
Translation utility functions for word counting, chunking and workflow ids.
Provides capabilities for splitting a flat payload into size-bounded chunks.
"""

import random
import string
from typing import Any, Dict, List

from lingo_engine.config import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_IDEAL_BATCH_ITEM_SIZE,
    WORKFLOW_ID_LENGTH,
)

_WORKFLOW_ID_ALPHABET = string.ascii_letters + string.digits


def create_workflow_id(length: int = WORKFLOW_ID_LENGTH) -> str:
    """Return a random alphanumeric token used to correlate the chunks of one call."""
    return "".join(random.choices(_WORKFLOW_ID_ALPHABET, k=length))


def count_words(payload: Any) -> int:
    """
    Count words in a string or in a nested structure of lists and dicts.

    Strings count their whitespace-separated tokens, lists and dicts the sum
    of their items/values, anything else counts zero.

    Example:
        >>> count_words({"a": "Hello world", "b": ["one", 2]})
        3
    """
    if isinstance(payload, str):
        return len(payload.split())
    if isinstance(payload, (list, tuple)):
        return sum(count_words(item) for item in payload)
    if isinstance(payload, dict):
        return sum(count_words(value) for value in payload.values())
    return 0


def extract_payload_chunks(
    payload: Dict[str, Any],
    max_items: int = DEFAULT_BATCH_SIZE,
    ideal_word_budget: int = DEFAULT_IDEAL_BATCH_ITEM_SIZE,
) -> List[Dict[str, str]]:
    """
    Split a flat payload into chunks bounded by item count and word count.

    Entries are taken in insertion order. A chunk is closed right after the
    entry that pushes its word count over ideal_word_budget or its size to
    max_items. Non-string values are skipped.

    Args:
        payload: Flat key -> value mapping
        max_items: Maximum entries per chunk
        ideal_word_budget: Word count above which a chunk is closed

    Returns:
        List of chunks, together holding every string entry exactly once
    """
    chunks: List[Dict[str, str]] = []
    current_chunk: Dict[str, str] = {}

    for key, value in payload.items():
        if not isinstance(value, str):
            continue

        current_chunk[key] = value
        if count_words(current_chunk) > ideal_word_budget or len(current_chunk) >= max_items:
            chunks.append(current_chunk)
            current_chunk = {}

    # Add the last chunk if it has items
    if current_chunk:
        chunks.append(current_chunk)

    return chunks
