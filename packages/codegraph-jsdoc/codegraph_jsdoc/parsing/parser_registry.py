"""
Parser Registry for Tree-sitter

Manages the JavaScript parser used by the AST bridge.
"""

from tree_sitter import Parser
from tree_sitter_language_pack import get_language

from codegraph_jsdoc.observability import get_logger

logger = get_logger(__name__)


class ParserRegistry:
    """
    Registry for language parsers.

    Supports:
    - JavaScript (js, jsx, mjs, cjs)
    """

    def __init__(self):
        self._languages: dict[str, object] = {}
        self._setup_languages()

    def _register_language(self, name: str, aliases: list[str] | None = None) -> None:
        """
        Register a language and its aliases.

        Args:
            name: Language name (e.g., "javascript")
            aliases: Optional list of aliases (e.g., ["js"])
        """
        lang = get_language(name)
        self._languages[name] = lang

        if aliases:
            for alias in aliases:
                self._languages[alias] = lang

        logger.debug("parser_loaded", language=name, aliases=aliases)

    def _setup_languages(self):
        """Setup Tree-sitter languages"""
        self._register_language("javascript", ["js", "jsx", "mjs", "cjs"])

    def get_parser(self, language: str) -> Parser | None:
        """
        Create a parser for the specified language.

        Languages are shared; parsers are not. Each caller gets its own
        Parser since tree-sitter parsers must not be used from two threads.

        Args:
            language: Language name or alias

        Returns:
            Parser instance or None if language not supported
        """
        lang = self._languages.get(language.lower())
        if not lang:
            return None
        return Parser(lang)

    def supports_language(self, language: str) -> bool:
        """Check if language is supported"""
        return language.lower() in self._languages


# Global registry instance
_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
