"""
Shared fixtures for codegraph-jsdoc tests
"""

import json

import pytest

from codegraph_jsdoc.ast_bridge import AstBuilder
from codegraph_jsdoc.config import load_settings
from codegraph_jsdoc.models import PlainNodeFactory
from codegraph_jsdoc.resolver import ModuleResolver


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from CODEGRAPH_JSDOC_* in the environment"""
    monkeypatch.delenv("CODEGRAPH_JSDOC_ECMA_VERSION", raising=False)
    monkeypatch.delenv("CODEGRAPH_JSDOC_CATCH_HANDLER_FIELD", raising=False)
    return load_settings(_env_file=None)


@pytest.fixture
def builder(settings):
    return AstBuilder(settings=settings)


@pytest.fixture
def plain_builder(settings):
    return AstBuilder(settings=settings, factory=PlainNodeFactory())


@pytest.fixture
def module_tree(tmp_path):
    """
    lib/
      foo.js
      bar/package.json   {"main": "./bar.js"}
      bar/bar.js
      baz/index.js
    """
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "foo.js").write_text("module.exports = 'foo';\n")

    bar = lib / "bar"
    bar.mkdir()
    (bar / "package.json").write_text(json.dumps({"main": "./bar.js"}))
    (bar / "bar.js").write_text("module.exports = 'bar';\n")

    baz = lib / "baz"
    baz.mkdir()
    (baz / "index.js").write_text("module.exports = 'baz';\n")

    return lib


@pytest.fixture
def resolver(module_tree, tmp_path, settings):
    context = tmp_path / "context"
    context.mkdir()
    return ModuleResolver(privileged_paths=[module_tree], context_dir=context, settings=settings)


def walk(node):
    """Yield every node (mapping with "type") in a standardized tree"""
    if isinstance(node, dict) or hasattr(node, "keys"):
        if "type" in node:
            yield node
        for key, value in node.items():
            if key in ("loc", "leadingComments", "trailingComments", "comments"):
                continue
            yield from walk(value)
    elif isinstance(node, (list, tuple)):
        for item in node:
            yield from walk(item)


@pytest.fixture
def iter_nodes():
    return walk
