"""
Settings for codegraph-jsdoc.

Environment variables use the CODEGRAPH_JSDOC_ prefix.
Example: CODEGRAPH_JSDOC_ECMA_VERSION=2015, CODEGRAPH_JSDOC_PRIVILEGED_PATHS='["lib"]'

Grouped access:
    settings.bridge     # BridgeConfig
    settings.resolver   # ResolverConfig
    settings.logging    # LoggingConfig
"""

from functools import cached_property
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from codegraph_jsdoc.errors import ConfigurationError

CatchHandlerField = Literal["handler", "handlers"]


class BridgeConfig(BaseModel):
    """AST bridge settings."""

    ecma_version: int = Field(default=2017, ge=5, le=2017, description="Highest accepted language level")
    catch_handler_field: CatchHandlerField = Field(
        default="handler",
        description="TryStatement catch layout: single 'handler' node or 'handlers' list",
    )
    fragment_limit: int = Field(default=80, ge=10, description="Max source chars quoted in errors")


class ResolverConfig(BaseModel):
    """Module resolver settings."""

    privileged_paths: list[str] = Field(default_factory=list, description="Search roots tried first")
    fallback_paths: list[str] = Field(default_factory=list, description="Search roots tried last")
    context_dir: str | None = Field(default=None, description="node_modules search start (default: cwd)")
    node_modules_dir: str = Field(default="node_modules", description="Submodule directory name")
    package_file: str = Field(default="package.json", description="Package descriptor file name")
    index_file: str = Field(default="index.js", description="Directory index module")


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING", description="Log level")
    format: Literal["console", "json"] = Field(default="console", description="Renderer")


class JsDocSettings(BaseSettings):
    """
    codegraph-jsdoc settings.

    Flat fields map 1:1 to environment variables; the grouped accessors
    are what the rest of the package consumes.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CODEGRAPH_JSDOC_",
        extra="ignore",
    )

    # Bridge
    ecma_version: int = Field(default=2017, ge=5, le=2017)
    catch_handler_field: CatchHandlerField = "handler"
    fragment_limit: int = Field(default=80, ge=10)

    # Resolver
    privileged_paths: list[str] = Field(default_factory=list)
    fallback_paths: list[str] = Field(default_factory=list)
    context_dir: str | None = None
    node_modules_dir: str = "node_modules"
    package_file: str = "package.json"
    index_file: str = "index.js"

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    @cached_property
    def bridge(self) -> BridgeConfig:
        """AST bridge settings group."""
        return BridgeConfig(
            ecma_version=self.ecma_version,
            catch_handler_field=self.catch_handler_field,
            fragment_limit=self.fragment_limit,
        )

    @cached_property
    def resolver(self) -> ResolverConfig:
        """Module resolver settings group."""
        return ResolverConfig(
            privileged_paths=self.privileged_paths,
            fallback_paths=self.fallback_paths,
            context_dir=self.context_dir,
            node_modules_dir=self.node_modules_dir,
            package_file=self.package_file,
            index_file=self.index_file,
        )

    @cached_property
    def logging(self) -> LoggingConfig:
        """Logging settings group."""
        return LoggingConfig(level=self.log_level, format=self.log_format)


def load_settings(**overrides: Any) -> JsDocSettings:
    """
    Build settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return JsDocSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e), fields=[err["loc"] for err in e.errors()]) from e


_settings: JsDocSettings | None = None


def get_settings() -> JsDocSettings:
    """Get process-wide settings instance"""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
