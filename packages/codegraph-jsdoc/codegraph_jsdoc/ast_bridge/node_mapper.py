"""
Node Mapper

Converts tree-sitter-javascript nodes into standardized (ESTree /
Mozilla Parser API) nodes.

Dispatch is a closed table {NativeKind -> converter}. The table is checked
against NativeKind at import time, so a kind without a converter (or a
converter for an unknown kind) fails on import instead of mid-build.
Kinds outside the table (import/export, optional chaining, class fields,
private names, JSX, ...) raise UnsupportedNodeError.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from tree_sitter import Node as TSNode

from codegraph_jsdoc.ast_bridge.comments import CommentAttacher
from codegraph_jsdoc.ast_bridge.literals import number_value, string_value, template_cooked
from codegraph_jsdoc.ast_bridge.walker import COMMENT, NON_SYNTAX_KINDS, SourceTreeWalker
from codegraph_jsdoc.config import BridgeConfig
from codegraph_jsdoc.errors import UnrecognizedKeywordError, UnsupportedNodeError, UnsupportedSyntaxError
from codegraph_jsdoc.models import NodeFactory
from codegraph_jsdoc.node_types import (
    KIND_MIN_VERSION,
    LOGICAL_OPERATORS,
    OPERATOR_MIN_VERSION,
    NativeKind,
    NodeType,
)
from codegraph_jsdoc.parsing import SourceText

Node = Mapping[str, Any]

_MIN_VERSION = {kind.value: version for kind, version in KIND_MIN_VERSION.items()}

_FUNCTION_KINDS = frozenset(
    {
        NativeKind.FUNCTION_DECLARATION.value,
        NativeKind.GENERATOR_FUNCTION_DECLARATION.value,
    }
)


class NodeMapper:
    """
    Per-kind converters for one builder.

    reset() must be called with the source before each build; it drops the
    identity table from the previous build.
    """

    def __init__(
        self,
        walker: SourceTreeWalker,
        comments: CommentAttacher,
        factory: NodeFactory,
        config: BridgeConfig,
    ):
        self._walker = walker
        self._comments = comments
        self._factory = factory
        self._config = config
        self._source: SourceText | None = None

        # node.id -> native node, for range/loc lookup at construction time
        self._native_nodes: dict[int, TSNode] = {}

        self._dispatch = {kind.value: getattr(self, name) for kind, name in _CONVERTERS.items()}

    def reset(self, source: SourceText) -> None:
        self._source = source
        self._native_nodes = {}

    # ============================================================
    # Entry points
    # ============================================================

    def map(self, node: TSNode) -> Node:
        """
        Convert one native node (and its subtree).

        Raises:
            UnsupportedNodeError: Kind has no converter
            UnsupportedSyntaxError: Kind is above the configured ecma_version
        """
        converter = self._dispatch.get(node.type)
        if converter is None:
            raise self._unsupported(node)

        required = _MIN_VERSION.get(node.type)
        if required is not None:
            self._require(node, node.type, required)

        self._native_nodes[node.id] = node
        return converter(node)

    def map_body(self, root: TSNode) -> Sequence[Node]:
        """Top-level statements of a program node"""
        return self._factory.new_array(
            self.map(child) for child in root.named_children if child.type not in NON_SYNTAX_KINDS
        )

    def program(self, root: TSNode, body: Sequence[Node], **extra: Any) -> Node:
        """
        Build the Program node.

        Range always covers the whole source, including leading/trailing
        whitespace and comments.
        """
        self._native_nodes[root.id] = root
        fields = {"body": body}
        fields.update(extra)
        return self._emit(root.id, NodeType.PROGRAM, fields, span=(0, len(self._source.encoded)))

    def located(self, native: TSNode, node_type: str, fields: dict[str, Any]) -> Node:
        """Build a node for native with range/loc (used for comments)"""
        self._native_nodes[native.id] = native
        return self._emit(native.id, node_type, fields)

    # ============================================================
    # Construction
    # ============================================================

    def _emit(
        self,
        native_id: int,
        node_type: NodeType | str,
        fields: dict[str, Any],
        span: tuple[int, int] | None = None,
    ) -> Node:
        """
        Create an output node for a visited native node.

        Args:
            native_id: Identity key of the originating native node
            node_type: Output type string
            fields: Kind-specific fields
            span: Explicit (start_byte, end_byte) for synthesized nodes;
                synthesized nodes never receive leadingComments

        Returns:
            Immutable node (per the factory)
        """
        native = self._native_nodes[native_id]
        start, end = span if span is not None else (native.start_byte, native.end_byte)

        values: dict[str, Any] = {"type": node_type.value if isinstance(node_type, NodeType) else node_type}
        values.update(fields)
        values["range"] = self._factory.new_array([self._source.char_offset(start), self._source.char_offset(end)])
        values["loc"] = self._loc(start, end)

        if span is None:
            leading = self._comments.leading_comments_for(native)
            if leading:
                values["leadingComments"] = leading

        return self._factory.new_node(values)

    def _loc(self, start: int, end: int) -> Node:
        start_line, start_column = self._source.location(start)
        end_line, end_column = self._source.location(end)
        return self._factory.new_node(
            {
                "start": self._factory.new_node({"line": start_line, "column": start_column}),
                "end": self._factory.new_node({"line": end_line, "column": end_column}),
            }
        )

    def _array(self, nodes: list[TSNode]) -> Sequence[Node]:
        return self._factory.new_array(self.map(node) for node in nodes)

    def _optional(self, node: TSNode | None) -> Node | None:
        return self.map(node) if node is not None else None

    def _text(self, node: TSNode) -> str:
        return self._source.text(node.start_byte, node.end_byte)

    # ============================================================
    # Errors / language level
    # ============================================================

    def _fragment(self, node: TSNode) -> str:
        return self._source.fragment(node.start_byte, node.end_byte, self._config.fragment_limit)

    def _unsupported(self, node: TSNode, kind: str | None = None) -> UnsupportedNodeError:
        return UnsupportedNodeError(
            kind or node.type,
            self._fragment(node),
            source_name=self._source.name,
            line=node.start_point[0] + 1,
        )

    def _require(self, node: TSNode, feature: str, version: int) -> None:
        if version > self._config.ecma_version:
            raise UnsupportedSyntaxError(
                feature,
                version,
                self._config.ecma_version,
                source_name=self._source.name,
                line=node.start_point[0] + 1,
                fragment=self._fragment(node),
            )

    def _require_operator(self, node: TSNode, operator: str) -> None:
        version = OPERATOR_MIN_VERSION.get(operator)
        if version is not None:
            self._require(node, f"operator {operator}", version)

    def _reject_child(self, node: TSNode, kind: str) -> None:
        for child in node.named_children:
            if child.type == kind:
                raise self._unsupported(child)

    # ============================================================
    # Program / statements
    # ============================================================

    def _convert_program(self, node: TSNode) -> Node:
        return self.program(node, self.map_body(node))

    def _convert_expression_statement(self, node: TSNode) -> Node:
        expression = self._walker.first_syntax_child(node)
        return self._emit(node.id, NodeType.EXPRESSION_STATEMENT, {"expression": self.map(expression)})

    def _convert_variable_declaration(self, node: TSNode) -> Node:
        if node.type == NativeKind.LEXICAL_DECLARATION.value:
            kind = self._walker.field(node, "kind").type
        else:
            kind = "var"

        declarations = [
            child for child in self._walker.syntax_children(node) if child.type == NativeKind.VARIABLE_DECLARATOR.value
        ]
        return self._emit(
            node.id,
            NodeType.VARIABLE_DECLARATION,
            {"declarations": self._array(declarations), "kind": kind},
        )

    def _convert_variable_declarator(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.VARIABLE_DECLARATOR,
            {
                "id": self.map(self._walker.field(node, "name")),
                "init": self._optional(self._walker.field(node, "value")),
            },
        )

    def _convert_statement_block(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.BLOCK_STATEMENT,
            {"body": self._array(self._walker.syntax_children(node))},
        )

    def _convert_empty_statement(self, node: TSNode) -> Node:
        return self._emit(node.id, NodeType.EMPTY_STATEMENT, {})

    def _convert_if_statement(self, node: TSNode) -> Node:
        alternative = self._walker.field(node, "alternative")
        if alternative is not None and alternative.type == "else_clause":
            alternative = self._walker.first_syntax_child(alternative)

        return self._emit(
            node.id,
            NodeType.IF_STATEMENT,
            {
                "test": self.map(self._walker.field(node, "condition")),
                "consequent": self.map(self._walker.field(node, "consequence")),
                "alternate": self._optional(alternative),
            },
        )

    def _convert_switch_statement(self, node: TSNode) -> Node:
        body = self._walker.field(node, "body")
        return self._emit(
            node.id,
            NodeType.SWITCH_STATEMENT,
            {
                "discriminant": self.map(self._walker.field(node, "value")),
                "cases": self._array(self._walker.syntax_children(body)),
            },
        )

    def _convert_switch_case(self, node: TSNode) -> Node:
        test = self._walker.field(node, "value")
        consequent = [
            child for child in self._walker.syntax_children(node) if test is None or child.id != test.id
        ]
        return self._emit(
            node.id,
            NodeType.SWITCH_CASE,
            {"test": self._optional(test), "consequent": self._array(consequent)},
        )

    def _for_clause(self, clause: TSNode | None) -> Node | None:
        """for(;;) head part: empty_statement means absent"""
        if clause is None or clause.type == NativeKind.EMPTY_STATEMENT.value:
            return None
        if clause.type == NativeKind.EXPRESSION_STATEMENT.value:
            return self.map(self._walker.first_syntax_child(clause))
        return self.map(clause)

    def _convert_for_statement(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.FOR_STATEMENT,
            {
                "init": self._for_clause(self._walker.field(node, "initializer")),
                "test": self._for_clause(self._walker.field(node, "condition")),
                "update": self._for_clause(self._walker.field(node, "increment")),
                "body": self.map(self._walker.field(node, "body")),
            },
        )

    def _convert_for_in_statement(self, node: TSNode) -> Node:
        if "await" in self._walker.tokens(node):
            self._require(node, "for_await_statement", 2018)

        left_node = self._walker.field(node, "left")
        kind = self._walker.field(node, "kind")

        if kind is not None:
            if kind.type != "var":
                self._require(node, NativeKind.LEXICAL_DECLARATION.value, 2015)
            declarator = self._emit(
                node.id,
                NodeType.VARIABLE_DECLARATOR,
                {"id": self.map(left_node), "init": self._optional(self._walker.field(node, "value"))},
                span=(left_node.start_byte, left_node.end_byte),
            )
            left = self._emit(
                node.id,
                NodeType.VARIABLE_DECLARATION,
                {"declarations": self._factory.new_array([declarator]), "kind": kind.type},
                span=(kind.start_byte, left_node.end_byte),
            )
        else:
            left = self.map(left_node)

        fields = {
            "left": left,
            "right": self.map(self._walker.field(node, "right")),
            "body": self.map(self._walker.field(node, "body")),
        }

        if self._walker.field(node, "operator").type == "of":
            self._require(node, "for_of_statement", 2015)
            return self._emit(node.id, NodeType.FOR_OF_STATEMENT, fields)

        # no `for each` in this grammar
        fields["each"] = False
        return self._emit(node.id, NodeType.FOR_IN_STATEMENT, fields)

    def _convert_while_statement(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.WHILE_STATEMENT,
            {
                "test": self.map(self._walker.field(node, "condition")),
                "body": self.map(self._walker.field(node, "body")),
            },
        )

    def _convert_do_statement(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.DO_WHILE_STATEMENT,
            {
                "body": self.map(self._walker.field(node, "body")),
                "test": self.map(self._walker.field(node, "condition")),
            },
        )

    def _convert_try_statement(self, node: TSNode) -> Node:
        handler = self._optional(self._walker.field(node, "handler"))
        finalizer = self._walker.field(node, "finalizer")

        fields: dict[str, Any] = {"block": self.map(self._walker.field(node, "body"))}
        if self._config.catch_handler_field == "handlers":
            fields["handlers"] = self._factory.new_array([handler] if handler is not None else [])
        else:
            fields["handler"] = handler
        # conditional catch clauses do not exist in this grammar
        fields["guardedHandlers"] = self._factory.new_array([])
        fields["finalizer"] = self.map(self._walker.field(finalizer, "body")) if finalizer is not None else None

        return self._emit(node.id, NodeType.TRY_STATEMENT, fields)

    def _convert_catch_clause(self, node: TSNode) -> Node:
        parameter = self._walker.field(node, "parameter")
        if parameter is None:
            self._require(node, "optional_catch_binding", 2019)
        return self._emit(
            node.id,
            NodeType.CATCH_CLAUSE,
            {
                "param": self._optional(parameter),
                "guard": None,
                "body": self.map(self._walker.field(node, "body")),
            },
        )

    def _convert_with_statement(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.WITH_STATEMENT,
            {
                "object": self.map(self._walker.field(node, "object")),
                "body": self.map(self._walker.field(node, "body")),
            },
        )

    def _convert_break_statement(self, node: TSNode) -> Node:
        label = self._optional(self._walker.field(node, "label"))
        return self._emit(node.id, NodeType.BREAK_STATEMENT, {"label": label})

    def _convert_continue_statement(self, node: TSNode) -> Node:
        label = self._optional(self._walker.field(node, "label"))
        return self._emit(node.id, NodeType.CONTINUE_STATEMENT, {"label": label})

    def _convert_return_statement(self, node: TSNode) -> Node:
        argument = self._optional(self._walker.first_syntax_child(node))
        return self._emit(node.id, NodeType.RETURN_STATEMENT, {"argument": argument})

    def _convert_throw_statement(self, node: TSNode) -> Node:
        argument = self.map(self._walker.first_syntax_child(node))
        return self._emit(node.id, NodeType.THROW_STATEMENT, {"argument": argument})

    def _convert_labeled_statement(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.LABELED_STATEMENT,
            {
                "label": self.map(self._walker.field(node, "label")),
                "body": self.map(self._walker.field(node, "body")),
            },
        )

    # ============================================================
    # Functions / classes
    # ============================================================

    def _function_fields(
        self,
        node: TSNode,
        name: TSNode | None,
        params: list[TSNode],
        body: TSNode,
        generator: bool,
        is_async: bool,
    ) -> dict[str, Any]:
        if is_async:
            self._require(node, "async_function", 2017)

        return {
            "id": self._optional(name),
            "params": self._array(params),
            "defaults": self._factory.new_array([]),
            "body": self.map(body),
            "rest": None,
            "generator": generator,
            "expression": body.type != NativeKind.STATEMENT_BLOCK.value,
            "async": is_async,
        }

    def _convert_function(self, node: TSNode) -> Node:
        tokens = self._walker.tokens(node)
        fields = self._function_fields(
            node,
            self._walker.field(node, "name"),
            self._walker.syntax_children(self._walker.field(node, "parameters")),
            self._walker.field(node, "body"),
            generator="*" in tokens,
            is_async="async" in tokens,
        )
        node_type = NodeType.FUNCTION_DECLARATION if node.type in _FUNCTION_KINDS else NodeType.FUNCTION_EXPRESSION
        return self._emit(node.id, node_type, fields)

    def _convert_arrow_function(self, node: TSNode) -> Node:
        single = self._walker.field(node, "parameter")
        if single is not None:
            params = [single]
        else:
            params = self._walker.syntax_children(self._walker.field(node, "parameters"))

        fields = self._function_fields(
            node,
            None,
            params,
            self._walker.field(node, "body"),
            generator=False,
            is_async="async" in self._walker.tokens(node),
        )
        return self._emit(node.id, NodeType.ARROW_FUNCTION_EXPRESSION, fields)

    def _convert_class(self, node: TSNode) -> Node:
        self._reject_child(node, "decorator")

        heritage = next((c for c in node.named_children if c.type == "class_heritage"), None)
        super_class = self.map(self._walker.first_syntax_child(heritage)) if heritage is not None else None

        node_type = (
            NodeType.CLASS_DECLARATION if node.type == NativeKind.CLASS_DECLARATION.value else NodeType.CLASS_EXPRESSION
        )
        return self._emit(
            node.id,
            node_type,
            {
                "id": self._optional(self._walker.field(node, "name")),
                "superClass": super_class,
                "body": self.map(self._walker.field(node, "body")),
            },
        )

    def _convert_class_body(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.CLASS_BODY,
            {"body": self._array(self._walker.syntax_children(node))},
        )

    def _property_key(self, key: TSNode) -> tuple[Node, bool]:
        """(key node, computed)"""
        if key.type == "computed_property_name":
            self._require(key, "computed_property_name", 2015)
            return self.map(self._walker.first_syntax_child(key)), True
        return self.map(key), False

    def _method_parts(self, node: TSNode) -> tuple[Node, bool, str, Node, list[str]]:
        """
        Shared method_definition conversion.

        Returns:
            (key, computed, accessor kind, FunctionExpression value, tokens)
        """
        self._reject_child(node, "decorator")

        tokens = self._walker.tokens(node)
        name = self._walker.field(node, "name")
        parameters = self._walker.field(node, "parameters")
        body = self._walker.field(node, "body")

        key, computed = self._property_key(name)
        if "get" in tokens:
            accessor = "get"
        elif "set" in tokens:
            accessor = "set"
        else:
            accessor = "init"

        fields = self._function_fields(
            node,
            None,
            self._walker.syntax_children(parameters),
            body,
            generator="*" in tokens,
            is_async="async" in tokens,
        )
        value = self._emit(
            node.id,
            NodeType.FUNCTION_EXPRESSION,
            fields,
            span=(parameters.start_byte, body.end_byte),
        )
        return key, computed, accessor, value, tokens

    def _convert_method_definition(self, node: TSNode) -> Node:
        key, computed, accessor, value, tokens = self._method_parts(node)
        is_static = "static" in tokens

        if accessor != "init":
            kind = accessor
        elif not computed and not is_static and key.get("name", key.get("value")) == "constructor":
            kind = "constructor"
        else:
            kind = "method"

        return self._emit(
            node.id,
            NodeType.METHOD_DEFINITION,
            {"key": key, "value": value, "kind": kind, "static": is_static, "computed": computed},
        )

    def _object_method(self, node: TSNode) -> Node:
        """method_definition inside an object literal -> Property"""
        self._native_nodes[node.id] = node
        key, computed, accessor, value, _tokens = self._method_parts(node)
        if accessor == "init":
            self._require(node, "method_definition", 2015)
        return self._emit(
            node.id,
            NodeType.PROPERTY,
            {
                "key": key,
                "value": value,
                "kind": accessor,
                "method": accessor == "init",
                "shorthand": False,
                "computed": computed,
            },
        )

    # ============================================================
    # Expressions
    # ============================================================

    def _convert_parenthesized_expression(self, node: TSNode) -> Node:
        # Wrapper has no output node of its own
        return self.map(self._walker.first_syntax_child(node))

    def _sequence_items(self, node: TSNode) -> list[TSNode]:
        items = []
        for child in self._walker.syntax_children(node):
            if child.type == NativeKind.SEQUENCE_EXPRESSION.value:
                # right-nested in older grammars
                self._native_nodes[child.id] = child
                items.extend(self._sequence_items(child))
            else:
                items.append(child)
        return items

    def _convert_sequence_expression(self, node: TSNode) -> Node:
        expressions = self._array(self._sequence_items(node))
        return self._emit(node.id, NodeType.SEQUENCE_EXPRESSION, {"expressions": expressions})

    def _convert_assignment_expression(self, node: TSNode) -> Node:
        operator = self._walker.field(node, "operator")
        if operator is not None:
            self._require_operator(node, operator.type)
        return self._emit(
            node.id,
            NodeType.ASSIGNMENT_EXPRESSION,
            {
                "operator": operator.type if operator is not None else "=",
                "left": self.map(self._walker.field(node, "left")),
                "right": self.map(self._walker.field(node, "right")),
            },
        )

    def _convert_binary_expression(self, node: TSNode) -> Node:
        operator = self._walker.field(node, "operator").type
        self._require_operator(node, operator)
        node_type = NodeType.LOGICAL_EXPRESSION if operator in LOGICAL_OPERATORS else NodeType.BINARY_EXPRESSION
        return self._emit(
            node.id,
            node_type,
            {
                "operator": operator,
                "left": self.map(self._walker.field(node, "left")),
                "right": self.map(self._walker.field(node, "right")),
            },
        )

    def _convert_unary_expression(self, node: TSNode) -> Node:
        # keyword operators (typeof, void, delete) are their own token type
        return self._emit(
            node.id,
            NodeType.UNARY_EXPRESSION,
            {
                "operator": self._walker.field(node, "operator").type,
                "prefix": True,
                "argument": self.map(self._walker.field(node, "argument")),
            },
        )

    def _convert_update_expression(self, node: TSNode) -> Node:
        operator = self._walker.field(node, "operator")
        argument = self._walker.field(node, "argument")
        return self._emit(
            node.id,
            NodeType.UPDATE_EXPRESSION,
            {
                "operator": operator.type,
                "prefix": operator.start_byte < argument.start_byte,
                "argument": self.map(argument),
            },
        )

    def _convert_ternary_expression(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.CONDITIONAL_EXPRESSION,
            {
                "test": self.map(self._walker.field(node, "condition")),
                "consequent": self.map(self._walker.field(node, "consequence")),
                "alternate": self.map(self._walker.field(node, "alternative")),
            },
        )

    def _check_optional_chain(self, node: TSNode) -> None:
        chain = self._walker.field(node, "optional_chain")
        if chain is not None:
            raise self._unsupported(node, kind=chain.type)

    def _arguments(self, node: TSNode | None) -> Sequence[Node]:
        if node is None:
            return self._factory.new_array([])
        return self._array(self._walker.syntax_children(node))

    def _convert_call_expression(self, node: TSNode) -> Node:
        self._check_optional_chain(node)

        callee = self._walker.field(node, "function")
        arguments = self._walker.field(node, "arguments")

        if arguments is not None and arguments.type == NativeKind.TEMPLATE_STRING.value:
            return self._emit(
                node.id,
                NodeType.TAGGED_TEMPLATE_EXPRESSION,
                {"tag": self.map(callee), "quasi": self.map(arguments)},
            )

        return self._emit(
            node.id,
            NodeType.CALL_EXPRESSION,
            {"callee": self.map(callee), "arguments": self._arguments(arguments)},
        )

    def _convert_new_expression(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.NEW_EXPRESSION,
            {
                "callee": self.map(self._walker.field(node, "constructor")),
                "arguments": self._arguments(self._walker.field(node, "arguments")),
            },
        )

    def _convert_member_expression(self, node: TSNode) -> Node:
        self._check_optional_chain(node)
        return self._emit(
            node.id,
            NodeType.MEMBER_EXPRESSION,
            {
                "object": self.map(self._walker.field(node, "object")),
                "property": self.map(self._walker.field(node, "property")),
                "computed": False,
            },
        )

    def _convert_subscript_expression(self, node: TSNode) -> Node:
        self._check_optional_chain(node)
        return self._emit(
            node.id,
            NodeType.MEMBER_EXPRESSION,
            {
                "object": self.map(self._walker.field(node, "object")),
                "property": self.map(self._walker.field(node, "index")),
                "computed": True,
            },
        )

    def _convert_yield_expression(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.YIELD_EXPRESSION,
            {
                "argument": self._optional(self._walker.first_syntax_child(node)),
                "delegate": "*" in self._walker.tokens(node),
            },
        )

    def _convert_await_expression(self, node: TSNode) -> Node:
        argument = self.map(self._walker.first_syntax_child(node))
        return self._emit(node.id, NodeType.AWAIT_EXPRESSION, {"argument": argument})

    def _convert_spread_element(self, node: TSNode) -> Node:
        argument = self.map(self._walker.first_syntax_child(node))
        return self._emit(node.id, NodeType.SPREAD_ELEMENT, {"argument": argument})

    def _convert_meta_property(self, node: TSNode) -> Node:
        words = [child for child in node.children if not child.is_named and child.type != "."]
        if [word.type for word in words] != ["new", "target"]:
            raise self._unsupported(node)

        meta, prop = words
        return self._emit(
            node.id,
            NodeType.META_PROPERTY,
            {
                "meta": self._emit(node.id, NodeType.IDENTIFIER, {"name": "new"}, span=(meta.start_byte, meta.end_byte)),
                "property": self._emit(
                    node.id, NodeType.IDENTIFIER, {"name": "target"}, span=(prop.start_byte, prop.end_byte)
                ),
            },
        )

    def _elements_with_holes(self, node: TSNode) -> Sequence[Node | None]:
        """Array elements; an elided slot ([a, , b]) becomes None"""
        elements: list[Node | None] = []
        expect_element = True
        for child in node.children:
            if child.type == COMMENT:
                continue
            if child.type == ",":
                if expect_element:
                    elements.append(None)
                expect_element = True
            elif child.is_named:
                elements.append(self.map(child))
                expect_element = False
        return self._factory.new_array(elements)

    def _convert_array(self, node: TSNode) -> Node:
        return self._emit(node.id, NodeType.ARRAY_EXPRESSION, {"elements": self._elements_with_holes(node)})

    def _shorthand_property(self, node: TSNode, value: Node | None = None) -> Node:
        self._native_nodes[node.id] = node
        left = self._walker.field(node, "left")
        key = self.map(left if left is not None else node)
        return self._emit(
            node.id,
            NodeType.PROPERTY,
            {
                "key": key,
                "value": value if value is not None else key,
                "kind": "init",
                "method": False,
                "shorthand": True,
                "computed": False,
            },
        )

    def _convert_object(self, node: TSNode) -> Node:
        properties = []
        for child in self._walker.syntax_children(node):
            if child.type == NativeKind.SHORTHAND_PROPERTY_IDENTIFIER.value:
                properties.append(self._shorthand_property(child))
            elif child.type == NativeKind.METHOD_DEFINITION.value:
                properties.append(self._object_method(child))
            elif child.type == NativeKind.SPREAD_ELEMENT.value:
                self._require(child, "object_spread", 2018)
                properties.append(self.map(child))
            else:
                properties.append(self.map(child))

        return self._emit(node.id, NodeType.OBJECT_EXPRESSION, {"properties": self._factory.new_array(properties)})

    def _convert_pair(self, node: TSNode) -> Node:
        key, computed = self._property_key(self._walker.field(node, "key"))
        return self._emit(
            node.id,
            NodeType.PROPERTY,
            {
                "key": key,
                "value": self.map(self._walker.field(node, "value")),
                "kind": "init",
                "method": False,
                "shorthand": False,
                "computed": computed,
            },
        )

    # ============================================================
    # Patterns
    # ============================================================

    def _convert_array_pattern(self, node: TSNode) -> Node:
        return self._emit(node.id, NodeType.ARRAY_PATTERN, {"elements": self._elements_with_holes(node)})

    def _convert_object_pattern(self, node: TSNode) -> Node:
        properties = []
        for child in self._walker.syntax_children(node):
            if child.type == NativeKind.SHORTHAND_PROPERTY_IDENTIFIER_PATTERN.value:
                properties.append(self._shorthand_property(child))
            elif child.type == NativeKind.OBJECT_ASSIGNMENT_PATTERN.value:
                properties.append(self._shorthand_property(child, value=self.map(child)))
            elif child.type == NativeKind.REST_PATTERN.value:
                self._require(child, "object_rest", 2018)
                properties.append(self.map(child))
            else:
                properties.append(self.map(child))

        return self._emit(node.id, NodeType.OBJECT_PATTERN, {"properties": self._factory.new_array(properties)})

    def _convert_pair_pattern(self, node: TSNode) -> Node:
        key, computed = self._property_key(self._walker.field(node, "key"))
        return self._emit(
            node.id,
            NodeType.PROPERTY,
            {
                "key": key,
                "value": self.map(self._walker.field(node, "value")),
                "kind": "init",
                "method": False,
                "shorthand": False,
                "computed": computed,
            },
        )

    def _convert_assignment_pattern(self, node: TSNode) -> Node:
        return self._emit(
            node.id,
            NodeType.ASSIGNMENT_PATTERN,
            {
                "left": self.map(self._walker.field(node, "left")),
                "right": self.map(self._walker.field(node, "right")),
            },
        )

    def _convert_rest_pattern(self, node: TSNode) -> Node:
        argument = self.map(self._walker.first_syntax_child(node))
        return self._emit(node.id, NodeType.REST_ELEMENT, {"argument": argument})

    # ============================================================
    # Names / literals
    # ============================================================

    def _convert_identifier(self, node: TSNode) -> Node:
        return self._emit(node.id, NodeType.IDENTIFIER, {"name": self._text(node)})

    def _convert_super(self, node: TSNode) -> Node:
        return self._emit(node.id, NodeType.SUPER, {})

    def _convert_number(self, node: TSNode) -> Node:
        raw = self._text(node)
        return self._emit(node.id, NodeType.LITERAL, {"value": number_value(raw), "raw": raw})

    def _convert_string(self, node: TSNode) -> Node:
        raw = self._text(node)
        return self._emit(node.id, NodeType.LITERAL, {"value": string_value(raw), "raw": raw})

    def _convert_regex(self, node: TSNode) -> Node:
        raw = self._text(node)
        pattern = self._walker.field(node, "pattern")
        flags = self._walker.field(node, "flags")
        regex = self._factory.new_node(
            {
                "pattern": self._text(pattern) if pattern is not None else "",
                "flags": self._text(flags) if flags is not None else "",
            }
        )
        return self._emit(node.id, NodeType.LITERAL, {"value": raw, "raw": raw, "regex": regex})

    def _convert_template_string(self, node: TSNode) -> Node:
        substitutions = [child for child in node.named_children if child.type == "template_substitution"]

        quasis = []
        expressions = []
        cursor = node.start_byte + 1  # after `
        for index, chunk_end in enumerate([s.start_byte for s in substitutions] + [node.end_byte - 1]):
            raw = self._source.text(cursor, chunk_end)
            quasis.append(
                self._emit(
                    node.id,
                    NodeType.TEMPLATE_ELEMENT,
                    {
                        "value": self._factory.new_node({"raw": raw, "cooked": template_cooked(raw)}),
                        "tail": index == len(substitutions),
                    },
                    span=(cursor, chunk_end),
                )
            )
            if index < len(substitutions):
                substitution = substitutions[index]
                expressions.append(self.map(self._walker.first_syntax_child(substitution)))
                cursor = substitution.end_byte

        return self._emit(
            node.id,
            NodeType.TEMPLATE_LITERAL,
            {"quasis": self._factory.new_array(quasis), "expressions": self._factory.new_array(expressions)},
        )

    def _convert_keyword_literal(self, node: TSNode) -> Node:
        token = node.type
        if token == NativeKind.TRUE.value:
            return self._emit(node.id, NodeType.LITERAL, {"value": True, "raw": "true"})
        if token == NativeKind.FALSE.value:
            return self._emit(node.id, NodeType.LITERAL, {"value": False, "raw": "false"})
        if token == NativeKind.NULL.value:
            return self._emit(node.id, NodeType.LITERAL, {"value": None, "raw": "null"})
        if token == NativeKind.THIS.value:
            return self._emit(node.id, NodeType.THIS_EXPRESSION, {})
        if token == NativeKind.DEBUGGER_STATEMENT.value:
            return self._emit(node.id, NodeType.DEBUGGER_STATEMENT, {})
        raise UnrecognizedKeywordError(
            token,
            self._fragment(node),
            source_name=self._source.name,
            line=node.start_point[0] + 1,
        )

    def _convert_undefined(self, node: TSNode) -> Node:
        return self._emit(node.id, NodeType.IDENTIFIER, {"name": "undefined"})

    def _convert_comment(self, node: TSNode) -> Node:
        return self._comments.register(node, self._source, self.located)


# NativeKind -> converter method name
_CONVERTERS: dict[NativeKind, str] = {
    NativeKind.PROGRAM: "_convert_program",
    NativeKind.EXPRESSION_STATEMENT: "_convert_expression_statement",
    NativeKind.VARIABLE_DECLARATION: "_convert_variable_declaration",
    NativeKind.LEXICAL_DECLARATION: "_convert_variable_declaration",
    NativeKind.VARIABLE_DECLARATOR: "_convert_variable_declarator",
    NativeKind.STATEMENT_BLOCK: "_convert_statement_block",
    NativeKind.EMPTY_STATEMENT: "_convert_empty_statement",
    NativeKind.IF_STATEMENT: "_convert_if_statement",
    NativeKind.SWITCH_STATEMENT: "_convert_switch_statement",
    NativeKind.SWITCH_CASE: "_convert_switch_case",
    NativeKind.SWITCH_DEFAULT: "_convert_switch_case",
    NativeKind.FOR_STATEMENT: "_convert_for_statement",
    NativeKind.FOR_IN_STATEMENT: "_convert_for_in_statement",
    NativeKind.WHILE_STATEMENT: "_convert_while_statement",
    NativeKind.DO_STATEMENT: "_convert_do_statement",
    NativeKind.TRY_STATEMENT: "_convert_try_statement",
    NativeKind.CATCH_CLAUSE: "_convert_catch_clause",
    NativeKind.WITH_STATEMENT: "_convert_with_statement",
    NativeKind.BREAK_STATEMENT: "_convert_break_statement",
    NativeKind.CONTINUE_STATEMENT: "_convert_continue_statement",
    NativeKind.RETURN_STATEMENT: "_convert_return_statement",
    NativeKind.THROW_STATEMENT: "_convert_throw_statement",
    NativeKind.DEBUGGER_STATEMENT: "_convert_keyword_literal",
    NativeKind.LABELED_STATEMENT: "_convert_labeled_statement",
    NativeKind.FUNCTION_DECLARATION: "_convert_function",
    NativeKind.GENERATOR_FUNCTION_DECLARATION: "_convert_function",
    NativeKind.FUNCTION_EXPRESSION: "_convert_function",
    NativeKind.FUNCTION: "_convert_function",
    NativeKind.GENERATOR_FUNCTION: "_convert_function",
    NativeKind.ARROW_FUNCTION: "_convert_arrow_function",
    NativeKind.CLASS_DECLARATION: "_convert_class",
    NativeKind.CLASS: "_convert_class",
    NativeKind.CLASS_BODY: "_convert_class_body",
    NativeKind.METHOD_DEFINITION: "_convert_method_definition",
    NativeKind.PARENTHESIZED_EXPRESSION: "_convert_parenthesized_expression",
    NativeKind.SEQUENCE_EXPRESSION: "_convert_sequence_expression",
    NativeKind.ASSIGNMENT_EXPRESSION: "_convert_assignment_expression",
    NativeKind.AUGMENTED_ASSIGNMENT_EXPRESSION: "_convert_assignment_expression",
    NativeKind.BINARY_EXPRESSION: "_convert_binary_expression",
    NativeKind.UNARY_EXPRESSION: "_convert_unary_expression",
    NativeKind.UPDATE_EXPRESSION: "_convert_update_expression",
    NativeKind.TERNARY_EXPRESSION: "_convert_ternary_expression",
    NativeKind.CALL_EXPRESSION: "_convert_call_expression",
    NativeKind.NEW_EXPRESSION: "_convert_new_expression",
    NativeKind.MEMBER_EXPRESSION: "_convert_member_expression",
    NativeKind.SUBSCRIPT_EXPRESSION: "_convert_subscript_expression",
    NativeKind.YIELD_EXPRESSION: "_convert_yield_expression",
    NativeKind.AWAIT_EXPRESSION: "_convert_await_expression",
    NativeKind.SPREAD_ELEMENT: "_convert_spread_element",
    NativeKind.META_PROPERTY: "_convert_meta_property",
    NativeKind.ARRAY: "_convert_array",
    NativeKind.OBJECT: "_convert_object",
    NativeKind.PAIR: "_convert_pair",
    NativeKind.ARRAY_PATTERN: "_convert_array_pattern",
    NativeKind.OBJECT_PATTERN: "_convert_object_pattern",
    NativeKind.PAIR_PATTERN: "_convert_pair_pattern",
    NativeKind.ASSIGNMENT_PATTERN: "_convert_assignment_pattern",
    NativeKind.OBJECT_ASSIGNMENT_PATTERN: "_convert_assignment_pattern",
    NativeKind.REST_PATTERN: "_convert_rest_pattern",
    NativeKind.IDENTIFIER: "_convert_identifier",
    NativeKind.PROPERTY_IDENTIFIER: "_convert_identifier",
    NativeKind.SHORTHAND_PROPERTY_IDENTIFIER: "_convert_identifier",
    NativeKind.SHORTHAND_PROPERTY_IDENTIFIER_PATTERN: "_convert_identifier",
    NativeKind.STATEMENT_IDENTIFIER: "_convert_identifier",
    NativeKind.UNDEFINED: "_convert_undefined",
    NativeKind.SUPER: "_convert_super",
    NativeKind.NUMBER: "_convert_number",
    NativeKind.STRING: "_convert_string",
    NativeKind.TEMPLATE_STRING: "_convert_template_string",
    NativeKind.REGEX: "_convert_regex",
    NativeKind.TRUE: "_convert_keyword_literal",
    NativeKind.FALSE: "_convert_keyword_literal",
    NativeKind.NULL: "_convert_keyword_literal",
    NativeKind.THIS: "_convert_keyword_literal",
    NativeKind.COMMENT: "_convert_comment",
}


def _check_converters() -> None:
    """Every NativeKind has a converter, and every converter exists."""
    missing = [kind.value for kind in NativeKind if kind not in _CONVERTERS]
    unknown = [kind for kind in _CONVERTERS if not isinstance(kind, NativeKind)]
    undefined = sorted({name for name in _CONVERTERS.values() if not callable(getattr(NodeMapper, name, None))})
    if missing or unknown or undefined:
        raise RuntimeError(
            f"Node mapping table out of sync: missing={missing} unknown={unknown} undefined={undefined}"
        )


_check_converters()
