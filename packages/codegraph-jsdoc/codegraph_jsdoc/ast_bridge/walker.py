"""
Source Tree Walker

Parses JavaScript with tree-sitter and provides the navigation the node
mapper needs: syntax children without comments, field access, the comment
list, and the "preceding documentation comment" relation.
"""

from collections.abc import Iterator

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from codegraph_jsdoc.ast_bridge.literals import is_doc_comment
from codegraph_jsdoc.errors import SourceParseError
from codegraph_jsdoc.node_types import NativeKind
from codegraph_jsdoc.parsing import SourceText, get_registry

COMMENT = NativeKind.COMMENT.value

# Constructs a documentation comment can attach to
DOCUMENTABLE_KINDS = frozenset(
    {
        NativeKind.FUNCTION_DECLARATION.value,
        NativeKind.GENERATOR_FUNCTION_DECLARATION.value,
        NativeKind.FUNCTION_EXPRESSION.value,
        NativeKind.FUNCTION.value,
        NativeKind.GENERATOR_FUNCTION.value,
        NativeKind.ARROW_FUNCTION.value,
        NativeKind.CLASS_DECLARATION.value,
        NativeKind.CLASS.value,
        NativeKind.METHOD_DEFINITION.value,
        NativeKind.VARIABLE_DECLARATION.value,
        NativeKind.LEXICAL_DECLARATION.value,
        NativeKind.ASSIGNMENT_EXPRESSION.value,
        NativeKind.PAIR.value,
    }
)

# Hidden-from-body top-level kinds
NON_SYNTAX_KINDS = frozenset({COMMENT, "hash_bang_line"})


class SourceTreeWalker:
    """
    Tree-sitter front end of the AST bridge.

    Holds its own parser; not safe to share between threads.
    """

    def __init__(self, language: str = "javascript", fragment_limit: int = 80):
        parser = get_registry().get_parser(language)
        if parser is None:
            raise ValueError(f"Language not supported: {language}")
        self._parser = parser
        self.fragment_limit = fragment_limit

    # ============================================================
    # Parsing
    # ============================================================

    def parse(self, source: SourceText) -> TSTree:
        """
        Parse source text.

        Raises:
            SourceParseError: If the parser reports ERROR/MISSING nodes
        """
        tree = self._parser.parse(source.encoded)
        root = tree.root_node

        if root.has_error:
            bad = self._first_error(root)
            line = bad.start_point[0] + 1 if bad else None
            what = "Missing token" if bad is not None and bad.is_missing else "Syntax error"
            fragment = source.fragment(bad.start_byte, bad.end_byte, self.fragment_limit) if bad else ""
            raise SourceParseError(
                f"{what} in {source.name} at line {line}: {fragment}",
                source_name=source.name,
                line=line,
                fragment=fragment,
            )

        return tree

    def _first_error(self, node: TSNode) -> TSNode | None:
        """Find the first ERROR or MISSING node in document order."""
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type == "ERROR" or current.is_missing:
                return current
            if current.has_error:
                stack.extend(reversed(current.children))
        return None

    # ============================================================
    # Navigation
    # ============================================================

    @staticmethod
    def syntax_children(node: TSNode) -> list[TSNode]:
        """Named children, comments excluded"""
        return [child for child in node.named_children if child.type != COMMENT]

    @staticmethod
    def first_syntax_child(node: TSNode) -> TSNode | None:
        for child in node.named_children:
            if child.type != COMMENT:
                return child
        return None

    @staticmethod
    def field(node: TSNode, name: str) -> TSNode | None:
        return node.child_by_field_name(name)

    @staticmethod
    def tokens(node: TSNode) -> list[str]:
        """Anonymous (keyword/punctuation) child token types"""
        return [child.type for child in node.children if not child.is_named]

    def syntax_start(self, root: TSNode) -> int | None:
        """
        Start byte of the first top-level syntax node.

        Returns:
            Byte offset, or None for empty / comment-only sources
        """
        for child in root.named_children:
            if child.type not in NON_SYNTAX_KINDS:
                return child.start_byte
        return None

    # ============================================================
    # Comments
    # ============================================================

    def collect_comments(self, root: TSNode) -> list[TSNode]:
        """All comment nodes in source order."""
        comments: list[TSNode] = []
        for node in self._iter_preorder(root):
            if node.type == COMMENT:
                comments.append(node)
        return comments

    def doc_comment_targets(self, comments: list[TSNode], source: SourceText) -> dict[int, TSNode]:
        """
        Map documentable nodes to the documentation comment preceding them.

        A doc comment attaches to the outermost documentable node starting
        where its next sibling starts. Another comment in between breaks
        the link, so only the last of consecutive doc comments attaches.

        Returns:
            node.id -> comment node
        """
        targets: dict[int, TSNode] = {}

        for comment in comments:
            if not is_doc_comment(source.text(comment.start_byte, comment.end_byte)):
                continue

            sibling = comment.next_sibling
            if sibling is None or sibling.type == COMMENT:
                continue

            target = self._documentable_at(sibling)
            if target is not None and target.id not in targets:
                targets[target.id] = comment

        return targets

    def _documentable_at(self, node: TSNode) -> TSNode | None:
        """Outermost documentable node on the leftmost descent of node."""
        start = node.start_byte
        current: TSNode | None = node
        while current is not None and current.start_byte == start:
            if current.type in DOCUMENTABLE_KINDS:
                return current
            current = current.children[0] if current.child_count else None
        return None

    def _iter_preorder(self, root: TSNode) -> Iterator[TSNode]:
        cursor = root.walk()
        visited_children = False
        while True:
            if not visited_children:
                yield cursor.node
                if cursor.goto_first_child():
                    continue
            if cursor.goto_next_sibling():
                visited_children = False
            elif cursor.goto_parent():
                visited_children = True
            else:
                return
