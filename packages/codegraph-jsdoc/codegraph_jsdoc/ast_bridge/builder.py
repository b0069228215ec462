"""
AST Builder

Facade of the AST bridge: source text in, standardized Program out.

Example:
    builder = AstBuilder()
    program = builder.build("/** Adds. */\nfunction add(a, b) { return a + b; }", "add.js")
    program.body[0].leadingComments[0].value  # "* Adds. "
"""

import time
from collections.abc import Mapping
from typing import Any

from codegraph_jsdoc.ast_bridge.comments import CommentAttacher
from codegraph_jsdoc.ast_bridge.node_mapper import NodeMapper
from codegraph_jsdoc.ast_bridge.walker import SourceTreeWalker
from codegraph_jsdoc.config import JsDocSettings, get_settings
from codegraph_jsdoc.models import FrozenNodeFactory, NodeFactory
from codegraph_jsdoc.observability import get_logger
from codegraph_jsdoc.parsing import SourceText

logger = get_logger(__name__)


class AstBuilder:
    """
    Converts JavaScript source into a standardized AST.

    Each instance owns its parser, node factory and per-build state.
    Not thread-safe: use one builder per thread.
    """

    def __init__(self, settings: JsDocSettings | None = None, factory: NodeFactory | None = None):
        self.settings = settings or get_settings()
        self.factory = factory or FrozenNodeFactory()

        config = self.settings.bridge
        self._walker = SourceTreeWalker(fragment_limit=config.fragment_limit)
        self._comments = CommentAttacher(self.factory)
        self._mapper = NodeMapper(self._walker, self._comments, self.factory, config)
        self._ast: Mapping[str, Any] | None = None

    @property
    def ast(self) -> Mapping[str, Any] | None:
        """Program produced by the last successful build()"""
        return self._ast

    def build(self, source_text: str, source_name: str = "<anonymous>") -> Mapping[str, Any]:
        """
        Parse and convert one source text.

        Args:
            source_text: JavaScript source (script goal)
            source_name: Label used in diagnostics only

        Returns:
            Program node

        Raises:
            SourceParseError: Source has syntax errors
            UnsupportedNodeError: Parser produced a kind with no converter
            UnsupportedSyntaxError: Construct above the configured ecma_version
        """
        start = time.perf_counter()

        self._ast = None
        self._comments.reset()

        source = SourceText(source_text, name=source_name)
        self._mapper.reset(source)

        tree = self._walker.parse(source)
        root = tree.root_node

        comments = self._walker.collect_comments(root)
        for comment in comments:
            self._comments.register(comment, source, self._mapper.located)
        self._comments.set_targets(self._walker.doc_comment_targets(comments, source))

        body = self._mapper.map_body(root)

        leading, trailing = self._comments.remaining(self._walker.syntax_start(root))
        extra: dict[str, Any] = {"comments": self._comments.all_comments()}
        if leading:
            extra["leadingComments"] = leading
        if trailing:
            extra["trailingComments"] = trailing

        program = self._mapper.program(root, body, **extra)
        self._ast = program

        logger.debug(
            "ast_built",
            source_name=source_name,
            statements=len(body),
            comments=len(comments),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return program
