"""
Standardized Error Handling for codegraph-jsdoc

Hierarchical exception classes with error codes and context.

Two families:
- BridgeError: fatal, aborts the current AstBuilder.build() call
- ResolutionError: soft, swallowed per candidate inside the module resolver
"""

from typing import Any


class JsDocError(Exception):
    """Base exception for all codegraph-jsdoc errors.

    Includes error code for programmatic handling and context for debugging.

    Example:
        raise JsDocError(
            code="UNSUPPORTED_NODE",
            message="Unrecognized node type import_statement",
            source_name="lib/foo.js",
            line=3,
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def __repr__(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, {ctx_str})"


# ==============================================================================
# AST Bridge Errors (fatal)
# ==============================================================================


class BridgeError(JsDocError):
    """Error while converting a native syntax tree."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="BRIDGE_ERROR", message=message, **context)


class UnsupportedNodeError(BridgeError):
    """The parser produced a node kind the mapping table does not cover."""

    def __init__(self, kind: str, fragment: str, **context: Any) -> None:
        super().__init__(
            f"Unrecognized node type {kind} with source: {fragment}",
            kind=kind,
            fragment=fragment,
            **context,
        )
        self.code = "UNSUPPORTED_NODE"
        self.kind = kind
        self.fragment = fragment


class UnsupportedSyntaxError(BridgeError):
    """The node kind is known but above the configured language level."""

    def __init__(self, kind: str, required: int, configured: int, **context: Any) -> None:
        super().__init__(
            f"Node type {kind} requires ecma_version >= {required} (configured: {configured})",
            kind=kind,
            required=required,
            configured=configured,
            **context,
        )
        self.code = "UNSUPPORTED_SYNTAX"
        self.kind = kind


class UnrecognizedKeywordError(BridgeError):
    """A keyword literal token with no standardized counterpart."""

    def __init__(self, token: str, fragment: str, **context: Any) -> None:
        super().__init__(
            f"Unrecognized keyword literal: {fragment} (token type: {token})",
            token=token,
            fragment=fragment,
            **context,
        )
        self.code = "UNRECOGNIZED_KEYWORD"
        self.token = token


class SourceParseError(BridgeError):
    """The external parser reported a syntax error."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "SOURCE_PARSE_ERROR"


# ==============================================================================
# Module Resolution Errors (soft)
# ==============================================================================


class ResolutionError(JsDocError):
    """Error while trying a single resolution candidate."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="RESOLUTION_ERROR", message=message, **context)


class PackageDescriptorError(ResolutionError):
    """package.json could not be read or is not a JSON object."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "PACKAGE_DESCRIPTOR_ERROR"


class InvalidModuleReferenceError(ResolutionError):
    """Module ID cannot be combined with a base as a relative URI reference."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "INVALID_MODULE_REFERENCE"


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(JsDocError):
    """Error in configuration."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **context)


__all__ = [
    "JsDocError",
    "BridgeError",
    "UnsupportedNodeError",
    "UnsupportedSyntaxError",
    "UnrecognizedKeywordError",
    "SourceParseError",
    "ResolutionError",
    "PackageDescriptorError",
    "InvalidModuleReferenceError",
    "ConfigurationError",
]
