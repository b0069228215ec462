"""
Parsing Layer

Tree-sitter based parsing infrastructure.

Components:
- parser_registry: Language parser management
- source_text: Source text with byte/character offset conversion
"""

from codegraph_jsdoc.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_jsdoc.parsing.source_text import SourceText

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceText",
]
