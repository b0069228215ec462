"""
Module Locator

Four-step lookup for one candidate location:

1. <location>(.js)                 exact file
2. <location>/package.json "main"  package entry
3. <location>/index.js             directory index
4. node_modules search             upward from the context directory
"""

import os
from pathlib import Path

from codegraph_jsdoc.resolver.extensions import ensure_js_extension
from codegraph_jsdoc.resolver.package_descriptor import PackageDescriptorReader


class ModuleLocator:
    """
    Applies the lookup steps to a candidate location.

    Attributes:
        context_dir: node_modules search start; None means the working
            directory at lookup time
    """

    def __init__(
        self,
        descriptor_reader: PackageDescriptorReader | None = None,
        context_dir: str | Path | None = None,
        node_modules_dir: str = "node_modules",
        package_file: str = "package.json",
        index_file: str = "index.js",
    ):
        self.descriptor_reader = descriptor_reader or PackageDescriptorReader()
        self.context_dir = Path(context_dir) if context_dir is not None else None
        self.node_modules_dir = node_modules_dir
        self.package_file = package_file
        self.index_file = index_file

    def locate(
        self,
        location: Path,
        base: Path,
        module_path: str | None = None,
        allow_submodule_search: bool = True,
        directory_only: bool = False,
    ) -> Path | None:
        """
        Find the module file for a candidate location.

        Args:
            location: Specifier combined with the base
            base: Search root the location came from
            module_path: Path searched under node_modules (default: location
                relative to base; no search when location is outside base)
            allow_submodule_search: Run step 4
            directory_only: Location names a directory (trailing slash); skip step 1

        Returns:
            Module path, or None

        Raises:
            PackageDescriptorError: package.json exists but is malformed
            OSError: Filesystem errors
        """
        found = self.locate_direct(location, directory_only)
        if found is not None:
            return found

        if module_path is None:
            module_path = relative_module_path(location, base)

        if allow_submodule_search and module_path:
            start_dir = self.context_dir if self.context_dir is not None else Path(os.getcwd())
            return find_in_node_modules(
                start_dir,
                module_path,
                locator=self,
                node_modules_dir=self.node_modules_dir,
                directory_only=directory_only,
            )
        return None

    def locate_direct(self, location: Path, directory_only: bool = False) -> Path | None:
        """Steps 1-3 only"""
        if not directory_only:
            js_file = location.with_name(ensure_js_extension(location.name)) if location.name else location
            if js_file.is_file():
                return js_file

        package_file = location / self.package_file
        if package_file.is_file():
            main = self.descriptor_reader.main_entry(package_file)
            if main is not None:
                return main

        index = location / self.index_file
        if index.is_file():
            return index

        return None


def relative_module_path(location: Path, base: Path) -> str | None:
    """location relative to base as a POSIX path, or None when outside base"""
    try:
        relative = Path(os.path.normpath(location)).relative_to(Path(os.path.normpath(Path(base).absolute())))
    except ValueError:
        return None
    text = relative.as_posix()
    return text if text != "." else None


def find_in_node_modules(
    start_dir: str | Path,
    module_path: str,
    stop_at: str | Path | None = None,
    *,
    locator: ModuleLocator | None = None,
    node_modules_dir: str = "node_modules",
    directory_only: bool = False,
) -> Path | None:
    """
    Search <dir>/node_modules/<module_path> from start_dir upward.

    Args:
        start_dir: First directory searched
        module_path: Module path below node_modules
        stop_at: Last directory searched (default: filesystem root)
        locator: Supplies the direct lookup (steps 1-3)
        node_modules_dir: Submodule directory name
        directory_only: Skip the exact-file step

    Returns:
        First match, or None once the ancestors are exhausted
    """
    locator = locator or ModuleLocator(node_modules_dir=node_modules_dir)
    current = Path(start_dir).resolve()
    stop = Path(stop_at).resolve() if stop_at is not None else None

    while True:
        found = locator.locate_direct(current / node_modules_dir / module_path, directory_only)
        if found is not None:
            return found

        if current == stop or current.parent == current:
            return None
        current = current.parent
