"""
Localization API Client

This module contains the calls made against the remote localization API:
- /i18n: localize one chunk of a flat payload
- /recognize: detect the locale of a text
- /whoami: resolve the identity behind the API key

Each call opens a short-lived httpx client, honours an optional
cancellation signal (an asyncio.Event) and maps HTTP failures onto the
exceptions in api/exceptions.py. Nothing here retries.
"""

import asyncio
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import httpx

from lingo_engine.logger import get_logger
from lingo_engine.api.exceptions import (
    InvalidRequestError,
    LocalizationCancelled,
    LocalizationError,
    RecognitionError,
    RemoteRejectedError,
    ServerError,
    TransportError,
    UnknownHttpError,
)

if TYPE_CHECKING:
    from lingo_engine.config import EngineConfig

logger = get_logger(__name__)


def get_httpx_timeout(timeout_config: Any) -> httpx.Timeout:
    """
    Convert timeout configuration to httpx.Timeout object.

    Args:
        timeout_config: Either a number (read timeout) or a dict with
            connect, write, read, pool keys

    Returns:
        httpx.Timeout object
    """
    if isinstance(timeout_config, dict):
        return httpx.Timeout(
            connect=timeout_config.get('connect', 10.0),
            write=timeout_config.get('write', 60.0),
            read=timeout_config.get('read', 120.0),
            pool=timeout_config.get('pool', 10.0),
        )
    else:
        timeout_value = float(timeout_config) if timeout_config else 120.0
        return httpx.Timeout(
            connect=10.0,
            write=60.0,
            read=timeout_value,
            pool=10.0,
        )


def _raise_if_cancelled(signal: Optional[asyncio.Event]) -> None:
    if signal is not None and signal.is_set():
        raise LocalizationCancelled()


async def _await_unless_cancelled(request, signal: asyncio.Event) -> httpx.Response:
    """Await a request, aborting it as soon as the signal is set."""
    request_task = asyncio.ensure_future(request)
    cancel_task = asyncio.ensure_future(signal.wait())
    try:
        await asyncio.wait({request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        cancel_task.cancel()
        if not request_task.done():
            request_task.cancel()
            await asyncio.gather(request_task, return_exceptions=True)

    if request_task.cancelled():
        raise LocalizationCancelled()
    return request_task.result()


class LocalizationApiClient:
    """HTTP client for the remote localization API."""

    def __init__(self, config: "EngineConfig", transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": f"Bearer {self.config.api_key}",
        }

    async def _post(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """POST to the API, translating transport failures and cancellation."""
        _raise_if_cancelled(signal)

        url = f"{self.config.api_url}{path}"
        httpx_timeout = get_httpx_timeout(self.config.timeout)
        try:
            async with httpx.AsyncClient(timeout=httpx_timeout, transport=self.transport) as client:
                request = client.post(url, headers=self._headers(), json=body)
                if signal is None:
                    return await request
                return await _await_unless_cancelled(request, signal)
        except httpx.TimeoutException:
            logger.error(f"Request to {path} timed out")
            raise TransportError(f"Localization API request timeout ({path})", details={"path": path})
        except httpx.TransportError as e:
            logger.error(f"Request to {path} failed: {e}")
            raise TransportError(f"Localization API request failed: {e}", details={"path": path})

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            raise LocalizationError(
                f"Localization API returned a non-JSON response ({response.status_code})",
                code="invalid_response",
                details={"status_code": response.status_code, "body": response.text[:500]},
            )

    async def localize_chunk(
        self,
        source_locale: Optional[str],
        target_locale: str,
        data: Dict[str, str],
        workflow_id: str,
        fast: bool = False,
        reference: Optional[Dict[str, Dict[str, Any]]] = None,
        hints: Optional[Dict[str, List[str]]] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> Dict[str, str]:
        """
        Localize one chunk of a flat payload.

        Args:
            source_locale: Source locale code, or None for auto-detection
            target_locale: Target locale code
            data: The chunk to localize
            workflow_id: Correlation id shared by all chunks of one call
            fast: Pass-through fast mode flag
            reference: Optional locale -> mapping of reference translations
            hints: Optional per-key hints
            signal: Optional cancellation signal

        Returns:
            The localized chunk (may be empty)
        """
        body: Dict[str, Any] = {
            "params": {"workflowId": workflow_id, "fast": fast},
            "locale": {"source": source_locale, "target": target_locale},
            "data": data,
        }
        if reference is not None:
            body["reference"] = reference
        if hints is not None:
            body["hints"] = hints

        response = await self._post("/i18n", body, signal)

        if not response.is_success:
            status = response.status_code
            if 500 <= status < 600:
                logger.error(f"Localization API server error: {status} - {response.text}")
                raise ServerError(status, response.reason_phrase, response.text)
            elif status == 400:
                logger.error(f"Localization API rejected the request: {response.reason_phrase}")
                raise InvalidRequestError(response.reason_phrase)
            else:
                logger.error(f"Localization API HTTP error: {status} - {response.text}")
                raise UnknownHttpError(status, response.text)

        payload = self._json(response)
        if not isinstance(payload, dict):
            payload = {}

        # Errors can be reported inside a successful envelope
        if not payload.get("data") and payload.get("error"):
            raise RemoteRejectedError(str(payload["error"]))

        return payload.get("data") or {}

    async def recognize_locale(self, text: str, signal: Optional[asyncio.Event] = None) -> str:
        """Detect the locale of a text."""
        response = await self._post("/recognize", {"text": text}, signal)

        if not response.is_success:
            status = response.status_code
            if 500 <= status < 600:
                logger.error(f"Locale recognition server error: {status}")
                raise ServerError(status, response.reason_phrase)
            raise RecognitionError(
                f"Error recognizing locale: {response.reason_phrase}",
                details={"status_code": status},
            )

        payload = self._json(response)
        return payload.get("locale") if isinstance(payload, dict) else None

    async def whoami(self, signal: Optional[asyncio.Event] = None) -> Optional[Dict[str, str]]:
        """
        Resolve the identity behind the API key.

        Returns None when unauthenticated or on any non-5xx failure.
        Server errors and cancellation still propagate.
        """
        try:
            response = await self._post("/whoami", signal=signal)
        except TransportError as e:
            logger.warning(f"whoami request failed: {e}")
            return None

        if response.is_success:
            try:
                payload = response.json()
            except ValueError:
                return None
            if not isinstance(payload, dict) or not payload.get("email"):
                return None
            return {"email": payload["email"], "id": payload.get("id")}

        if 500 <= response.status_code < 600:
            raise ServerError(response.status_code, response.reason_phrase)

        logger.debug(f"whoami returned {response.status_code}, treating as unauthenticated")
        return None
