"""
Module Resolver

CommonJS-style resolution of require() specifiers over privileged and
fallback search roots.

Example:
    resolver = ModuleResolver(privileged_paths=["lib"], fallback_paths=["vendor"])
    module = resolver.resolve("underscore")
    if module:
        source = module.read_text()
"""

from collections.abc import Iterable
from pathlib import Path

from codegraph_jsdoc.config import JsDocSettings, get_settings
from codegraph_jsdoc.observability import get_logger
from codegraph_jsdoc.resolver.locator import ModuleLocator
from codegraph_jsdoc.resolver.package_descriptor import PackageDescriptorReader
from codegraph_jsdoc.resolver.path_list import PathListResolver, ResolvedModule

logger = get_logger(__name__)

_RELATIVE_PREFIXES = ("./", "../")


class ModuleResolver:
    """
    Resolves module specifiers to files.

    Holds no per-call state; results are not cached, so repeated calls
    see filesystem changes.
    """

    def __init__(
        self,
        privileged_paths: Iterable[str | Path] = (),
        fallback_paths: Iterable[str | Path] = (),
        context_dir: str | Path | None = None,
        settings: JsDocSettings | None = None,
    ):
        self.settings = settings or get_settings()
        config = self.settings.resolver

        self.privileged_paths = tuple(Path(p) for p in privileged_paths)
        self.fallback_paths = tuple(Path(p) for p in fallback_paths)

        locator = ModuleLocator(
            descriptor_reader=PackageDescriptorReader(),
            context_dir=context_dir,
            node_modules_dir=config.node_modules_dir,
            package_file=config.package_file,
            index_file=config.index_file,
        )
        self._path_list = PathListResolver(locator)

    @classmethod
    def from_settings(cls, settings: JsDocSettings | None = None) -> "ModuleResolver":
        """Build a resolver from the resolver settings group"""
        settings = settings or get_settings()
        config = settings.resolver
        return cls(
            privileged_paths=config.privileged_paths,
            fallback_paths=config.fallback_paths,
            context_dir=config.context_dir,
            settings=settings,
        )

    def candidate_bases(self, extra_paths: Iterable[str | Path] = ()) -> list[Path]:
        """Privileged paths, then extra paths (require.paths), then fallback paths"""
        return [*self.privileged_paths, *(Path(p) for p in extra_paths), *self.fallback_paths]

    def resolve(self, module_id: str, extra_paths: Iterable[str | Path] = ()) -> ResolvedModule | None:
        """
        Resolve a module specifier.

        Args:
            module_id: Specifier as passed to require()
            extra_paths: Additional search roots between privileged and fallback

        Returns:
            ResolvedModule, or None when no candidate base has the module
        """
        bases = self.candidate_bases(extra_paths)
        module = self._path_list.resolve(module_id, bases)

        if module is None:
            logger.debug("module_not_found", module_id=module_id, bases=[str(b) for b in bases])
        else:
            logger.debug("module_resolved", module_id=module_id, path=str(module.path), base=str(module.base))
        return module

    def resolve_from(self, module_id: str, parent: ResolvedModule) -> ResolvedModule | None:
        """
        Resolve a specifier required from another module.

        ./ and ../ specifiers are tried against the parent's directory first.
        """
        if module_id.startswith(_RELATIVE_PREFIXES):
            module = self._path_list.resolve(module_id, [parent.path.parent])
            if module is not None:
                logger.debug("module_resolved", module_id=module_id, path=str(module.path), parent=str(parent.path))
                return module

        return self.resolve(module_id)
