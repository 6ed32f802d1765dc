"""Localization proxy API routes."""

from __future__ import annotations

import asyncio
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from lingo_engine.api.exceptions import LocalizationCancelled, LocalizationError
from lingo_engine.logger import get_logger
from lingo_engine.translation import LocalizationEngine, LocalizationParams

localize_bp = Blueprint("localize", __name__)
logger = get_logger(__name__)

DEFAULT_REQUEST_TIMEOUT = 30.0

# Request field holding the content for each localization type
CONTENT_FIELDS = {
    "text": "text",
    "object": "object",
    "array": "array",
    "chat": "chat",
    "html": "html",
}


def _validate_string(kind: str, content: Any) -> None:
    if not isinstance(content, str):
        raise ValueError(f"{kind.capitalize()} must be a string")


def _validate_object(content: Any) -> None:
    if not isinstance(content, dict):
        raise ValueError("Object must be a JSON object")


def _validate_array(content: Any) -> None:
    if not isinstance(content, list) or not all(isinstance(item, str) for item in content):
        raise ValueError("Array must be a list of strings")


def _validate_chat(chat: Any) -> None:
    if not isinstance(chat, list):
        raise ValueError("Chat must be a list of messages")
    for message in chat:
        if not isinstance(message, dict) or not isinstance(message.get("name"), str) \
                or not isinstance(message.get("text"), str):
            raise ValueError("Each chat message needs string 'name' and 'text' fields")


async def dispatch_request(engine: LocalizationEngine, data: Dict[str, Any], timeout: float) -> Any:
    """Run one proxy request against the engine, cancelling it after `timeout` seconds."""
    kind = data.get("type")
    signal = asyncio.Event()
    timer = asyncio.get_running_loop().call_later(timeout, signal.set)
    try:
        if kind == "detect":
            if not data.get("text"):
                raise ValueError("Text is required for language detection")
            _validate_string("text", data["text"])
            return await engine.recognize_locale(data["text"], signal=signal)

        field = CONTENT_FIELDS.get(kind)
        if field is None:
            raise ValueError(f"Unknown translation type: {kind}")

        content = data.get(field)
        if content is None or content == "":
            raise ValueError(f"{field.capitalize()} is required for {kind} translation")
        if kind in ("text", "html"):
            _validate_string(kind, content)
        elif kind == "object":
            _validate_object(content)
        elif kind == "array":
            _validate_array(content)
        elif kind == "chat":
            _validate_chat(content)

        params = LocalizationParams.from_dict(data)
        return await engine.localize(kind, content, params, signal=signal)
    finally:
        timer.cancel()


@localize_bp.post("")
def localize():
    """Localize the content of one request and return it as JSON."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    engine: LocalizationEngine = current_app.extensions["lingo_engine"]
    timeout = current_app.config.get("LOCALIZE_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)

    try:
        result = asyncio.run(dispatch_request(engine, data, timeout))
    except LocalizationCancelled:
        logger.warning("Localization request timed out after %ss", timeout)
        return jsonify({"success": False, "error": "Request timed out"}), LocalizationCancelled.http_status
    except LocalizationError as e:
        logger.error("Localization request failed: %s", e)
        return jsonify({"success": False, "error": str(e), "code": e.code}), e.http_status
    except ValueError as e:
        logger.warning("Invalid localization request: %s", e)
        return jsonify({"success": False, "error": str(e)}), 400

    return jsonify({"success": True, "data": result})


@localize_bp.after_request
def add_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
    return response
