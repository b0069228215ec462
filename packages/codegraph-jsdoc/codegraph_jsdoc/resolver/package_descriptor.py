"""
Package descriptor (package.json) reading.

Only the "main" field is consulted; everything else is ignored.
"""

import json
from pathlib import Path
from typing import Any

from codegraph_jsdoc.errors import PackageDescriptorError
from codegraph_jsdoc.resolver.extensions import ensure_js_extension


class PackageDescriptorReader:
    """Reads package.json files"""

    def read(self, path: Path) -> dict[str, Any]:
        """
        Parse a package descriptor.

        Args:
            path: package.json path

        Returns:
            Top-level JSON object

        Raises:
            PackageDescriptorError: Unreadable, not JSON, nested too deeply, or not an object
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise PackageDescriptorError(f"Cannot read package descriptor: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            raise PackageDescriptorError(
                f"Package descriptor is not a JSON object (got {type(data).__name__})",
                path=str(path),
            )
        return data

    def main_entry(self, path: Path) -> Path | None:
        """
        Resolve the "main" entry of a package descriptor.

        The entry gets a .js suffix unless it already ends in .js/.json, and
        is resolved against the descriptor's directory.

        Returns:
            Entry path (not checked for existence), or None without "main"
        """
        main = self.read(path).get("main")
        if not isinstance(main, str) or not main:
            return None
        return Path(path).parent / ensure_js_extension(main)
