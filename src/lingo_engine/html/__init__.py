"""
HTML module - structural extraction and re-injection of localizable strings

This module provides:
- HtmlCodec: path-addressed extraction/injection over a parsed document
- HtmlConverter: payload converter used by the engine for HTML input
- Regex fallback helpers for environments without a structural parser
"""

from lingo_engine.html.codec import (
    HtmlCodec,
    LOCALIZABLE_ATTRIBUTES,
    UNLOCALIZABLE_TAGS,
    walk,
    significant_children,
    split_path,
)
from lingo_engine.html.converter import HtmlConverter
from lingo_engine.html.fallback import extract_simple, inject_simple
