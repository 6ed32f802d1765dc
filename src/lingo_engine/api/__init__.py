"""
API Module

This module provides the client for the remote localization API and its
error taxonomy.
"""

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
from lingo_engine.api.client import LocalizationApiClient, get_httpx_timeout

__all__ = [
    'LocalizationError',
    'ConfigValidationError',
    'ServerError',
    'InvalidRequestError',
    'RemoteRejectedError',
    'UnknownHttpError',
    'RecognitionError',
    'TransportError',
    'LocalizationCancelled',
    'LocalizationApiClient',
    'get_httpx_timeout',
]
