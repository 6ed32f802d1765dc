"""
Translation Processing Module

Contains the sequential chunk loop shared by every localization call:
one request per chunk, each awaited before the next, with a progress
callback after every completed chunk.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

from lingo_engine.logger import get_logger
from lingo_engine.api.client import LocalizationApiClient

logger = get_logger(__name__)

ProgressCallback = Callable[[int, Dict[str, str], Dict[str, str]], Any]


def progress_percent(done: int, total: int) -> int:
    """Completion percentage after `done` of `total` chunks."""
    # Halves round up
    return int(100 * done / total + 0.5)


async def localize_chunks_sequential(
    chunks: List[Dict[str, str]],
    client: LocalizationApiClient,
    source_locale: Optional[str],
    target_locale: str,
    workflow_id: str,
    fast: bool = False,
    reference: Optional[Dict[str, Dict[str, Any]]] = None,
    hints: Optional[Dict[str, List[str]]] = None,
    progress_callback: Optional[ProgressCallback] = None,
    signal: Optional[asyncio.Event] = None,
) -> List[Dict[str, str]]:
    """
    Localize chunks one after another with progress updates.

    Returns list of localized chunks (same order as input chunks).
    The first failing chunk raises and the remaining chunks are not sent.

    Args:
        chunks: Flat chunks produced by extract_payload_chunks
        client: LocalizationApiClient used for every request
        source_locale: Source locale code (None for auto-detection)
        target_locale: Target locale code
        workflow_id: Correlation id shared by all chunks
        fast: Pass-through fast mode flag
        reference: Optional reference translations, sent with every chunk
        hints: Optional hints, sent with every chunk
        progress_callback: Called as (percent, source_chunk, processed_chunk)
        signal: Optional cancellation signal

    Returns:
        List of localized chunks, one per input chunk
    """
    results = []
    total = len(chunks)

    for chunk_idx, chunk in enumerate(chunks):
        logger.debug(f"Chunk {chunk_idx + 1}/{total}: Starting localization of {len(chunk)} keys")
        processed = await client.localize_chunk(
            source_locale,
            target_locale,
            chunk,
            workflow_id,
            fast=fast,
            reference=reference,
            hints=hints,
            signal=signal,
        )
        logger.debug(f"Chunk {chunk_idx + 1}/{total}: Localization completed")

        if progress_callback:
            progress_callback(progress_percent(chunk_idx + 1, total), chunk, processed)

        results.append(processed)

    return results
