"""
AST Bridge

tree-sitter syntax tree -> standardized (ESTree) AST with documentation
comments attached.

Components:
- walker: Parsing, navigation, comment collection
- node_mapper: Per-kind converters
- comments: Comment conversion and attachment
- builder: AstBuilder facade
"""

from codegraph_jsdoc.ast_bridge.builder import AstBuilder
from codegraph_jsdoc.ast_bridge.comments import CommentAttacher
from codegraph_jsdoc.ast_bridge.node_mapper import NodeMapper
from codegraph_jsdoc.ast_bridge.walker import SourceTreeWalker

__all__ = [
    "AstBuilder",
    "CommentAttacher",
    "NodeMapper",
    "SourceTreeWalker",
]
