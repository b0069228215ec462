"""
Module Resolver

Node.js/CommonJS package resolution: exact file, package.json "main",
index.js, node_modules search.
"""

from codegraph_jsdoc.resolver.extensions import ensure_js_extension
from codegraph_jsdoc.resolver.locator import ModuleLocator, find_in_node_modules
from codegraph_jsdoc.resolver.module_resolver import ModuleResolver
from codegraph_jsdoc.resolver.package_descriptor import PackageDescriptorReader
from codegraph_jsdoc.resolver.path_list import PathListResolver, ResolvedModule

__all__ = [
    "ModuleResolver",
    "PathListResolver",
    "ResolvedModule",
    "ModuleLocator",
    "PackageDescriptorReader",
    "find_in_node_modules",
    "ensure_js_extension",
]
