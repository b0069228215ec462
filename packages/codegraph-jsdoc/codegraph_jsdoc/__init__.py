"""
codegraph-jsdoc

JavaScript front end for documentation pipelines:

- AST bridge: tree-sitter syntax tree -> standardized (ESTree) AST with
  documentation comments attached
- Module resolver: CommonJS/Node.js require() resolution
"""

from codegraph_jsdoc.ast_bridge import AstBuilder
from codegraph_jsdoc.config import JsDocSettings, get_settings, load_settings
from codegraph_jsdoc.errors import BridgeError, JsDocError, ResolutionError
from codegraph_jsdoc.models import AstNode, FrozenNodeFactory, NodeFactory, PlainNodeFactory, to_plain
from codegraph_jsdoc.node_types import NodeType
from codegraph_jsdoc.resolver import ModuleResolver, ResolvedModule

__version__ = "0.1.0"

__all__ = [
    "AstBuilder",
    "AstNode",
    "NodeFactory",
    "FrozenNodeFactory",
    "PlainNodeFactory",
    "to_plain",
    "NodeType",
    "ModuleResolver",
    "ResolvedModule",
    "JsDocSettings",
    "get_settings",
    "load_settings",
    "JsDocError",
    "BridgeError",
    "ResolutionError",
]
