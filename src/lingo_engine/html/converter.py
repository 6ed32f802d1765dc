"""HTML payload converter: structural codec first, regex fallback otherwise."""

from typing import TYPE_CHECKING, Any, Dict

from lingo_engine.logger import get_logger
from lingo_engine.html.codec import DEFAULT_PARSER, HtmlCodec
from lingo_engine.html.fallback import extract_simple, inject_simple

if TYPE_CHECKING:
    from lingo_engine.translation.params import LocalizationParams

logger = get_logger(__name__)


class HtmlConverter:
    kind = "html"

    def __init__(self, parser: str = DEFAULT_PARSER, structural: bool = True):
        self.codec = HtmlCodec(parser)
        self.use_structural = structural and self._builder_available()

    def _builder_available(self) -> bool:
        if self.codec.available:
            return True
        logger.warning(
            f"No tree builder installed for parser '{self.codec.parser}', "
            "falling back to regex-based HTML localization"
        )
        return False

    def to_payload(self, content: str) -> Dict[str, Any]:
        if self.use_structural:
            return self.codec.extract(self.codec.parse(content))
        return extract_simple(content)

    def from_payload(self, content: str, localized: Dict[str, str], params: "LocalizationParams") -> str:
        if self.use_structural:
            # Re-parsing the same markup yields the same tree, hence the same paths
            document = self.codec.parse(content)
            self.codec.inject(document, localized, params.target_locale)
            return self.codec.serialize(document)
        return inject_simple(content, extract_simple(content), localized, params.target_locale)
