"""
HTML structural codec.

Localizable strings are addressed by a positional path:

    <section>/<i1>/<i2>/.../<in>[#<attribute>]

where <section> is ``head`` or ``body`` and every index counts only
significant siblings (elements, and text nodes with non-whitespace
content). Extraction and injection both go through ``walk()`` so the
two phases always agree on paths.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import builder_registry
from bs4.element import PreformattedString

from lingo_engine.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PARSER = "html5lib"

LOCALIZABLE_ATTRIBUTES: Dict[str, List[str]] = {
    "meta": ["content"],
    "img": ["alt"],
    "input": ["placeholder"],
    "a": ["title"],
}
UNLOCALIZABLE_TAGS = frozenset({"script", "style"})
ROOT_SECTIONS = ("head", "body")

Node = Union[Tag, NavigableString]
Visitor = Callable[[Node, str], None]


def is_text_node(node) -> bool:
    # Comments, doctypes and CDATA are NavigableString subclasses too
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_significant(node) -> bool:
    if isinstance(node, Tag):
        return True
    return is_text_node(node) and bool(node.strip())


def significant_children(node: Tag) -> List[Node]:
    return [child for child in node.contents if is_significant(child)]


def split_path(path: str) -> Tuple[str, Optional[str]]:
    """Split ``body/0/1#title`` into (``body/0/1``, ``title``)."""
    node_path, _, attribute = path.partition("#")
    return node_path, attribute or None


def _walk_children(parent: Tag, parent_path: str, visit: Visitor) -> None:
    # Children are listed before visiting so writes cannot shift later indices
    for index, child in enumerate(significant_children(parent)):
        path = f"{parent_path}/{index}"
        visit(child, path)
        if isinstance(child, Tag) and child.name not in UNLOCALIZABLE_TAGS:
            _walk_children(child, path, visit)


def walk(document: BeautifulSoup, visit: Visitor) -> None:
    """Call visit(node, path) for every significant node of head and body, in document order."""
    for section_name in ROOT_SECTIONS:
        section = document.find(section_name)
        if section is not None:
            _walk_children(section, section_name, visit)


def _replace_text(node: NavigableString, value: str) -> None:
    """Swap a text node's content, keeping its surrounding whitespace."""
    original = str(node)
    leading = original[: len(original) - len(original.lstrip())]
    trailing = original[len(original.rstrip()):]
    node.replace_with(f"{leading}{value}{trailing}")


class HtmlCodec:
    """Extracts localizable strings from a document and writes translations back."""

    def __init__(self, parser: str = DEFAULT_PARSER):
        self.parser = parser

    @property
    def available(self) -> bool:
        """Whether bs4 has a tree builder installed for the configured parser."""
        return builder_registry.lookup(self.parser) is not None

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.parser)

    def extract(self, document: BeautifulSoup) -> Dict[str, str]:
        """Return a flat path -> string mapping of everything localizable."""
        content: Dict[str, str] = {}

        def read(node: Node, path: str) -> None:
            if isinstance(node, Tag):
                for attribute in LOCALIZABLE_ATTRIBUTES.get(node.name, []):
                    value = node.get(attribute)
                    if isinstance(value, str) and value:
                        content[f"{path}#{attribute}"] = value
            else:
                content[path] = node.strip()

        walk(document, read)
        logger.debug(f"Extracted {len(content)} localizable strings from HTML")
        return content

    def inject(self, document: BeautifulSoup, localized: Dict[str, str], locale: str) -> None:
        """Write localized values back at their paths and set the root lang attribute."""
        if document.html is not None:
            document.html["lang"] = locale

        texts: Dict[str, str] = {}
        attributes: Dict[str, Dict[str, str]] = {}
        for path, value in localized.items():
            node_path, attribute = split_path(path)
            if attribute:
                attributes.setdefault(node_path, {})[attribute] = value
            else:
                texts[node_path] = value

        def write(node: Node, path: str) -> None:
            if isinstance(node, Tag):
                for attribute, value in attributes.get(path, {}).items():
                    node[attribute] = value
                if path in texts:
                    node.string = texts[path]
            elif path in texts:
                _replace_text(node, texts[path])

        walk(document, write)

    def serialize(self, document: BeautifulSoup) -> str:
        return str(document)
