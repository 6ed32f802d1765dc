"""
Localization Engine Module

Main LocalizationEngine class that coordinates a localization call:
- Project the typed input into a flat payload
- Split the payload into chunks
- Localize chunks sequentially against the remote API
- Merge the chunk results and project them back into the input's shape
"""

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from lingo_engine.api.client import LocalizationApiClient
from lingo_engine.config import EngineConfig, load_config_from_env, validate_engine_config
from lingo_engine.html.codec import DEFAULT_PARSER
from lingo_engine.html.converter import HtmlConverter
from lingo_engine.logger import get_logger

from lingo_engine.translation.params import (
    LocalizationParams,
    ParamsLike,
    validate_localization_params,
)
from lingo_engine.translation.payloads import PayloadConverter, get_converter
from lingo_engine.translation.processor import ProgressCallback, localize_chunks_sequential
from lingo_engine.translation.utils import create_workflow_id, extract_payload_chunks

logger = get_logger(__name__)


class LocalizationEngine:
    """
    Client for the remote localization API.

    Supports plain text, flat objects, string arrays, chat transcripts and
    HTML documents. Large payloads are split into chunks that are sent one
    after another; the results are reassembled into the input's shape.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        batch_size: Optional[int] = None,
        ideal_batch_item_size: Optional[int] = None,
        timeout: Optional[Any] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        html_parser: str = DEFAULT_PARSER,
    ):
        """
        Initialize the engine.

        Args:
            api_key: API key sent as a bearer token (required)
            api_url: Base URL of the localization API
            batch_size: Maximum keys per chunk
            ideal_batch_item_size: Word budget per chunk
            timeout: Request timeout in seconds, or a dict of httpx timeouts
            transport: Optional httpx transport (used by tests)
            html_parser: bs4 tree builder used for HTML documents
        """
        self.config: EngineConfig = validate_engine_config(
            api_key=api_key,
            api_url=api_url,
            batch_size=batch_size,
            ideal_batch_item_size=ideal_batch_item_size,
            timeout=timeout,
        )
        self.client = LocalizationApiClient(self.config, transport=transport)
        self.html_parser = html_parser
        logger.info(
            f"Initialized localization engine for {self.config.api_url} "
            f"(batch_size={self.config.batch_size}, ideal_batch_item_size={self.config.ideal_batch_item_size})"
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "LocalizationEngine":
        """Build an engine from LINGODOTDEV_* environment variables, then overrides."""
        settings = load_config_from_env()
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**settings)

    async def _localize_raw(
        self,
        payload: Dict[str, Any],
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> Dict[str, str]:
        """
        Localize a flat payload.

        Args:
            payload: Flat key -> value mapping; non-string values are skipped
            params: Localization parameters
            progress_callback: Called as (percent, source_chunk, processed_chunk)
            signal: Optional cancellation signal

        Returns:
            Merged localized payload
        """
        final_params = validate_localization_params(params)
        chunks = extract_payload_chunks(
            payload,
            max_items=self.config.batch_size,
            ideal_word_budget=self.config.ideal_batch_item_size,
        )
        workflow_id = create_workflow_id()

        logger.debug(
            f"Workflow {workflow_id}: {len(chunks)} chunk(s) "
            f"{final_params.source_locale or 'auto'} -> {final_params.target_locale}"
        )

        processed_chunks = await localize_chunks_sequential(
            chunks,
            self.client,
            final_params.source_locale,
            final_params.target_locale,
            workflow_id,
            fast=final_params.fast,
            reference=final_params.reference,
            hints=final_params.hints,
            progress_callback=progress_callback,
            signal=signal,
        )

        result: Dict[str, str] = {}
        for processed in processed_chunks:
            result.update(processed)

        logger.info(f"Workflow {workflow_id}: localized {len(result)} keys in {len(chunks)} chunk(s)")
        return result

    async def _localize_with(
        self,
        converter: PayloadConverter,
        content: Any,
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> Any:
        final_params = validate_localization_params(params)
        payload = converter.to_payload(content)
        localized = await self._localize_raw(payload, final_params, progress_callback, signal)
        return converter.from_payload(content, localized, final_params)

    def _converter(self, kind: str, structural: bool = True) -> PayloadConverter:
        if kind == HtmlConverter.kind:
            return HtmlConverter(self.html_parser, structural=structural)
        return get_converter(kind)

    async def localize(
        self,
        kind: str,
        content: Any,
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> Any:
        """Localize content of the given kind: text, object, array, chat or html."""
        return await self._localize_with(self._converter(kind), content, params, progress_callback, signal)

    async def localize_object(
        self,
        obj: Dict[str, Any],
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> Dict[str, Any]:
        """
        Localize the top-level string values of a mapping.

        Returns a new mapping with the same keys; nested and non-string values
        are returned unchanged.
        """
        return await self._localize_with(self._converter("object"), obj, params, progress_callback, signal)

    async def localize_text(
        self,
        text: str,
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> str:
        """Localize a single string. Returns "" if the API returned nothing."""
        return await self._localize_with(self._converter("text"), text, params, progress_callback, signal)

    async def batch_localize_text(
        self,
        text: str,
        params: Mapping[str, Any],
        signal: Optional[asyncio.Event] = None,
    ) -> List[str]:
        """
        Localize one string into several locales concurrently.

        Args:
            text: String to localize
            params: source_locale, fast and target_locales, snake_case or camelCase
            signal: Optional cancellation signal

        Results follow the order of target_locales. The first failure is
        raised; calls already in flight for other locales are not cancelled.
        """
        target_locales: Sequence[str] = params.get("target_locales", params.get("targetLocales")) or []
        shared = {k: v for k, v in params.items() if k not in ("target_locales", "targetLocales")}
        return list(await asyncio.gather(*(
            self.localize_text(
                text,
                LocalizationParams.from_dict({**shared, "target_locale": target_locale}),
                signal=signal,
            )
            for target_locale in target_locales
        )))

    async def localize_string_array(
        self,
        strings: List[str],
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> List[str]:
        """Localize a list of strings. An empty list makes no request."""
        return await self._localize_with(self._converter("array"), strings, params, progress_callback, signal)

    async def localize_chat(
        self,
        chat: List[Dict[str, str]],
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> List[Dict[str, str]]:
        """Localize the text of each {name, text} message, keeping speaker names."""
        return await self._localize_with(self._converter("chat"), chat, params, progress_callback, signal)

    async def localize_html(
        self,
        html: str,
        params: ParamsLike,
        progress_callback: Optional[ProgressCallback] = None,
        signal: Optional[asyncio.Event] = None,
        structural: bool = True,
    ) -> str:
        """
        Localize an HTML document, preserving its markup.

        Text nodes and the alt/title/placeholder/meta content attributes are
        localized; script and style contents are left alone. The root element
        gets the target locale as its lang attribute.
        """
        converter = self._converter("html", structural=structural)
        return await self._localize_with(converter, html, params, progress_callback, signal)

    async def recognize_locale(self, text: str, signal: Optional[asyncio.Event] = None) -> str:
        """Detect the locale of a text, e.g. "es"."""
        return await self.client.recognize_locale(text, signal=signal)

    async def whoami(self, signal: Optional[asyncio.Event] = None) -> Optional[Dict[str, str]]:
        """Return {"email", "id"} for the API key, or None if not authenticated."""
        return await self.client.whoami(signal=signal)
