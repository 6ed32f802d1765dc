"""
Regex-based HTML localization, used when no structural parser is available.

Lossy: reinjection substitutes every literal occurrence of an original
string, so a value repeated across the markup is replaced everywhere.
"""

import re
from typing import Dict

_SCRIPT_PATTERN = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_PATTERN = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
_TEXT_PATTERN = re.compile(r">([^<]+)<")
_HTML_TAG_PATTERN = re.compile(r"<html([^>]*)>", re.IGNORECASE)
_LANG_ATTRIBUTE_PATTERN = re.compile(r"""\s+lang=("[^"]*"|'[^']*'|[^\s>]+)""", re.IGNORECASE)

ATTRIBUTE_PATTERNS = [
    re.compile(r'title="([^"]+)"', re.IGNORECASE),
    re.compile(r'alt="([^"]+)"', re.IGNORECASE),
    re.compile(r'placeholder="([^"]+)"', re.IGNORECASE),
    re.compile(r'content="([^"]+)"', re.IGNORECASE),
]


def extract_simple(html: str) -> Dict[str, str]:
    """Extract inter-tag text as text_<n> and common attributes as attr_<pattern>_<n>."""
    content: Dict[str, str] = {}
    counter = 0

    visible = _SCRIPT_PATTERN.sub("", html)
    visible = _STYLE_PATTERN.sub("", visible)

    for match in _TEXT_PATTERN.finditer(visible):
        text = match.group(1).strip()
        if text:
            content[f"text_{counter}"] = text
            counter += 1

    for pattern_index, pattern in enumerate(ATTRIBUTE_PATTERNS):
        for match in pattern.finditer(html):
            if match.group(1).strip():
                content[f"attr_{pattern_index}_{counter}"] = match.group(1)
                counter += 1

    return content


def set_lang_simple(html: str, locale: str) -> str:
    def _with_lang(match: re.Match) -> str:
        attributes = _LANG_ATTRIBUTE_PATTERN.sub("", match.group(1))
        return f'<html{attributes} lang="{locale}">'

    return _HTML_TAG_PATTERN.sub(_with_lang, html, count=1)


def inject_simple(html: str, extracted: Dict[str, str], localized: Dict[str, str], locale: str) -> str:
    """Set the lang attribute and substitute original strings with their translations."""
    result = set_lang_simple(html, locale)
    for key, value in localized.items():
        original = extracted.get(key)
        if original:
            result = result.replace(original, value)
    return result
