"""
Path List Resolver

Tries each candidate base in order and returns the first module found.
Failures for a single base are logged and skipped, never raised.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urljoin, urlsplit

from codegraph_jsdoc.errors import InvalidModuleReferenceError, ResolutionError
from codegraph_jsdoc.observability import get_logger
from codegraph_jsdoc.resolver.extensions import JS_EXTENSION
from codegraph_jsdoc.resolver.locator import ModuleLocator

logger = get_logger(__name__)

# Characters that cannot appear in a URI reference, and % not starting an escape
_ILLEGAL_URI_CHARS = re.compile(r'[\s\\"<>^`{|}]|%(?![0-9A-Fa-f]{2})')
_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def names_directory(module_id: str) -> bool:
    """Trailing slash, or a final "." or ".." segment"""
    return module_id.endswith("/") or module_id.rsplit("/", 1)[-1] in (".", "..")


@dataclass(frozen=True)
class ResolvedModule:
    """
    A located module source.

    Attributes:
        path: Absolute file path
        uri: file:// URI of path
        base: Candidate base the module was found from
    """

    path: Path
    uri: str
    base: Path

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.path.read_text(encoding=encoding)


class PathListResolver:
    """Resolves a module ID against an ordered list of bases"""

    def __init__(self, locator: ModuleLocator | None = None):
        self.locator = locator or ModuleLocator()

    def resolve(self, module_id: str, candidate_bases: list[Path]) -> ResolvedModule | None:
        """
        Resolve module_id against each base in order.

        Args:
            module_id: Specifier as written by the importer
            candidate_bases: Search roots, highest priority first

        Returns:
            First module found, or None when every base fails
        """
        directory_only = names_directory(module_id)
        for base in candidate_bases:
            base = Path(base)
            try:
                try:
                    location = self.combine_uri(base, module_id)
                except InvalidModuleReferenceError:
                    location = self.combine_path(base, module_id)

                module = self._load_from(location, base, directory_only)
            except (OSError, ValueError, ResolutionError) as e:
                logger.debug("candidate_failed", module_id=module_id, base=str(base), error=str(e))
                continue

            if module is not None:
                return module

        return None

    def combine_uri(self, base: Path, module_id: str) -> Path:
        """
        Combine base and module_id as a relative URI reference.

        Raises:
            InvalidModuleReferenceError: module_id is not a usable URI reference
                (illegal characters, or a scheme other than file:)
        """
        if _ILLEGAL_URI_CHARS.search(module_id):
            raise InvalidModuleReferenceError("Module ID is not a valid URI reference", module_id=module_id)

        scheme = _SCHEME.match(module_id)
        if scheme and scheme.group(1).lower() != "file":
            raise InvalidModuleReferenceError(
                f"Unsupported URI scheme: {scheme.group(1)}",
                module_id=module_id,
            )

        base_uri = Path(base).absolute().as_uri().rstrip("/") + "/"
        parts = urlsplit(urljoin(base_uri, module_id))
        if parts.netloc not in ("", "localhost"):
            raise InvalidModuleReferenceError("Remote file URI", module_id=module_id)
        return Path(unquote(parts.path))

    def combine_path(self, base: Path, module_id: str) -> Path:
        """
        Treat module_id as a filesystem path.

        A directory foo/ next to a file foo.js resolves to the file.
        """
        module_path = Path(module_id)
        module_path_js = module_path if module_id.endswith(JS_EXTENSION) else Path(module_id + JS_EXTENSION)
        if module_path.is_dir() and module_path_js.is_file() and not names_directory(module_id):
            module_path = module_path_js

        if module_path.is_absolute():
            return module_path
        return Path(os.path.normpath(Path(base).absolute() / module_id))

    def _load_from(self, location: Path, base: Path, directory_only: bool = False) -> ResolvedModule | None:
        found = self.locator.locate(location, base, directory_only=directory_only)
        module = self._load(found, base) if found is not None else None
        if module is not None or directory_only:
            return module

        # Exact file names that the lookup steps did not produce
        return self._load(location, base)

    def _load(self, path: Path, base: Path) -> ResolvedModule | None:
        if not path.is_file():
            return None
        resolved = path.resolve()
        return ResolvedModule(path=resolved, uri=resolved.as_uri(), base=base)
