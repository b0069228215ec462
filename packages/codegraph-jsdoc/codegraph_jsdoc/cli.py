"""
codegraph-jsdoc CLI

Parse JavaScript into the standardized AST, or resolve require() specifiers.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from codegraph_jsdoc.ast_bridge import AstBuilder
from codegraph_jsdoc.config import load_settings
from codegraph_jsdoc.errors import BridgeError, ConfigurationError
from codegraph_jsdoc.models import PlainNodeFactory
from codegraph_jsdoc.observability import setup_logging
from codegraph_jsdoc.resolver import ModuleResolver

app = typer.Typer(
    name="codegraph-jsdoc",
    help="JavaScript AST bridge and CommonJS module resolver",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR); default from CODEGRAPH_JSDOC_LOG_LEVEL"
    ),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log format: console or json; default from CODEGRAPH_JSDOC_LOG_FORMAT"
    ),
):
    """codegraph-jsdoc command line."""
    try:
        logging_config = load_settings().logging
    except ConfigurationError as e:
        err_console.print(f"[red]Invalid settings:[/red] {escape(e.message)}")
        raise typer.Exit(code=2) from e

    setup_logging(level=log_level or logging_config.level, format=log_format or logging_config.format)


@app.command()
def parse(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JavaScript file to parse"),
    ecma_version: int = typer.Option(2017, "--ecma-version", help="Highest accepted language level (5..2017)"),
    handlers: bool = typer.Option(False, "--handlers", help="Emit TryStatement.handlers list instead of handler"),
    pretty: bool = typer.Option(False, "--pretty", help="Indent JSON output"),
    encoding: str = typer.Option("utf-8", "--encoding", help="Source file encoding"),
):
    """
    Print the standardized AST of FILE as JSON.
    """
    try:
        settings = load_settings(
            ecma_version=ecma_version,
            catch_handler_field="handlers" if handlers else "handler",
        )
    except ConfigurationError as e:
        err_console.print(f"[red]Invalid options:[/red] {escape(e.message)}")
        raise typer.Exit(code=2) from e

    try:
        source = file.read_text(encoding=encoding)
    except (LookupError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Cannot decode {escape(str(file))}:[/red] {escape(str(e))}")
        raise typer.Exit(code=2) from e

    builder = AstBuilder(settings=settings, factory=PlainNodeFactory())
    try:
        program = builder.build(source, str(file))
    except BridgeError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(program, indent=2 if pretty else None, ensure_ascii=False))


@app.command()
def resolve(
    module_id: str = typer.Argument(..., help="Module specifier, as passed to require()"),
    path: list[Path] = typer.Option([], "--path", "-p", help="Privileged search root (repeatable)"),
    fallback: list[Path] = typer.Option([], "--fallback", "-f", help="Fallback search root (repeatable)"),
    context: Path | None = typer.Option(None, "--context", help="node_modules search start (default: cwd)"),
):
    """
    Print the file MODULE_ID resolves to.
    """
    privileged = path or [Path.cwd()]
    resolver = ModuleResolver(privileged_paths=privileged, fallback_paths=fallback, context_dir=context)

    module = resolver.resolve(module_id)
    if module is None:
        err_console.print(f"[red]Module not found:[/red] {escape(module_id)}")
        raise typer.Exit(code=1)

    console.print(str(module.path), markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
