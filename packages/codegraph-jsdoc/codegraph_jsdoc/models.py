"""
Standardized AST values.

Output nodes are built through a NodeFactory, the construction context
handed to each AstBuilder. The default factory produces immutable AstNode
mappings and tuples; PlainNodeFactory produces dicts and lists for callers
that serialize straight to JSON.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any


class AstNode(Mapping):
    """
    Immutable standardized AST node.

    Behaves as a read-only mapping (ESTree field names as keys) and also
    exposes fields as attributes: ``node.type``, ``node.body``.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]):
        object.__setattr__(self, "_fields", dict(fields))

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getattr__(self, name: str) -> Any:
        if name == "_fields":
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        node_type = self._fields.get("type", "?")
        node_range = self._fields.get("range")
        return f"AstNode(type={node_type!r}, range={list(node_range) if node_range else None})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dicts/lists (JSON-ready)"""
        return {key: _plain(value) for key, value in self._fields.items()}


def _plain(value: Any) -> Any:
    if isinstance(value, AstNode):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


class NodeFactory:
    """
    Construction context for output values.

    Subclasses decide the container types; the builder never creates
    containers directly.
    """

    def new_node(self, fields: Mapping[str, Any]) -> Mapping[str, Any]:
        raise NotImplementedError

    def new_array(self, items: Iterable[Any]) -> Sequence[Any]:
        raise NotImplementedError


class FrozenNodeFactory(NodeFactory):
    """Immutable AstNode + tuple (default)"""

    def new_node(self, fields: Mapping[str, Any]) -> AstNode:
        return AstNode(fields)

    def new_array(self, items: Iterable[Any]) -> tuple[Any, ...]:
        return tuple(items)


class PlainNodeFactory(NodeFactory):
    """dict + list"""

    def new_node(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return dict(fields)

    def new_array(self, items: Iterable[Any]) -> list[Any]:
        return list(items)


def to_plain(node: Any) -> Any:
    """Convert any standardized value (frozen or plain) to dicts/lists"""
    return _plain(node)
