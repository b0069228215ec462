"""
Comment Attacher

Converts comments exactly once, attaches documentation comments to the
node they precede, and splits the unattached ones into root-level
leading/trailing lists.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from tree_sitter import Node as TSNode

from codegraph_jsdoc.ast_bridge.literals import comment_value, is_doc_comment
from codegraph_jsdoc.models import NodeFactory
from codegraph_jsdoc.node_types import NodeType
from codegraph_jsdoc.parsing import SourceText

# (native node, type, fields) -> standardized node with range/loc
LocatedNodeFn = Callable[[TSNode, str, dict[str, Any]], Mapping[str, Any]]


class CommentAttacher:
    """
    Per-build comment bookkeeping.

    State (cache, seen set, targets) lives only for one build and is
    cleared by reset().
    """

    def __init__(self, factory: NodeFactory):
        self._factory = factory
        self._cache: dict[int, Mapping[str, Any]] = {}  # comment node.id -> standardized comment
        self._order: list[TSNode] = []
        self._doc_comments: list[TSNode] = []
        self._seen: set[int] = set()
        self._targets: dict[int, TSNode] = {}  # syntax node.id -> doc comment node

    def reset(self) -> None:
        self._cache = {}
        self._order = []
        self._doc_comments = []
        self._seen = set()
        self._targets = {}

    def set_targets(self, targets: dict[int, TSNode]) -> None:
        """Install the preceding-doc-comment relation computed by the walker."""
        self._targets = targets

    def register(self, comment: TSNode, source: SourceText, located: LocatedNodeFn) -> Mapping[str, Any]:
        """
        Convert a comment node, or return the value built earlier.

        Args:
            comment: tree-sitter comment node
            source: Source being converted
            located: Builds a node with range/loc from (native, type, fields)

        Returns:
            Standardized comment node (type "Block")
        """
        cached = self._cache.get(comment.id)
        if cached is not None:
            return cached

        raw = source.text(comment.start_byte, comment.end_byte)
        node = located(
            comment,
            NodeType.BLOCK.value,
            {"value": comment_value(raw), "raw": raw},
        )

        self._cache[comment.id] = node
        self._order.append(comment)
        if is_doc_comment(raw):
            self._doc_comments.append(comment)
        return node

    def all_comments(self) -> Sequence[Mapping[str, Any]]:
        """Every registered comment, in registration (source) order"""
        return self._factory.new_array(self._cache[c.id] for c in self._order)

    def leading_comments_for(self, node: TSNode) -> Sequence[Mapping[str, Any]] | None:
        """
        Single-element leadingComments for node, marking the comment seen.

        Returns:
            Sequence with the one preceding doc comment, or None
        """
        comment = self._targets.get(node.id)
        if comment is None:
            return None

        standardized = self._cache.get(comment.id)
        if standardized is None:
            return None

        self._seen.add(comment.id)
        return self._factory.new_array([standardized])

    def remaining(
        self, syntax_start: int | None
    ) -> tuple[Sequence[Mapping[str, Any]], Sequence[Mapping[str, Any]]]:
        """
        Partition unattached doc comments around the first syntax node.

        Args:
            syntax_start: Start byte of the first top-level syntax node
                (None when there is none: everything is trailing)

        Returns:
            (leading, trailing)
        """
        leading = []
        trailing = []

        for comment in self._doc_comments:
            if comment.id in self._seen:
                continue
            if syntax_start is not None and comment.start_byte < syntax_start:
                leading.append(self._cache[comment.id])
            else:
                trailing.append(self._cache[comment.id])

        return self._factory.new_array(leading), self._factory.new_array(trailing)
