"""Importer entry point.

create_importer() captures configuration (root, extension) once and returns an
Importer bound to it. Each call computes its own include paths and runs a
fresh resolution stack:

1. Explicit include paths from ImportOptions (in order)
2. Directory of the previously resolved file
3. The configured root

Three calling conventions are offered over the same pipeline:
- await importer.resolve(...) -> Resolved | NoResult
- await importer(specifier, prev, done) -> done({"file": ...}) or done()
- importer.for_libsass() -> synchronous libsass importer function
"""

import asyncio
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from .errors import ImportResolutionError
from .extension import DEFAULT_EXTENSION
from .extension import normalize_extension
from .module_resolution import LocalResolver
from .module_resolution import NodeModuleResolver
from .module_resolution import NoResult
from .module_resolution import PackageResolver
from .module_resolution import ResolutionStack
from .module_resolution import Resolved
from .module_resolution.node import DEFAULT_EXTENSIONS
from .module_resolution.resolvers import ModuleResolverFunction
from .module_resolution.resolvers import StatFunction

logger = logging.getLogger(__name__)

ResolutionResult = Resolved | NoResult
CompletionCallback = Callable[..., Any]


class ImporterConfig(BaseModel):
    """Immutable importer configuration."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(..., description="Last-resort base directory")
    extension: str = Field(default=DEFAULT_EXTENSION, description="Stylesheet extension, leading dot")

    @field_validator("extension")
    @classmethod
    def _leading_dot(cls, value: str) -> str:
        return normalize_extension(value)


class ImportOptions(BaseModel):
    """Per-call options supplied by the host compiler."""

    include_paths: list[str] = Field(default_factory=list, description="Extra base directories, in order")


class Importer:
    """Resolves import specifiers to stylesheet paths on disk."""

    def __init__(
        self,
        config: ImporterConfig,
        stat: StatFunction | None = None,
        module_resolver: ModuleResolverFunction | None = None,
    ):
        self.config = config
        if module_resolver is None:
            module_resolver = NodeModuleResolver(extensions=(*DEFAULT_EXTENSIONS, config.extension))
        self.stack = ResolutionStack(LocalResolver(stat), PackageResolver(module_resolver))

    def include_paths_for(self, previous_file: str, options: ImportOptions | None = None) -> list[str]:
        """Compute the ordered base directories for one call.

        The previous file may not be a real path (libsass passes "stdin" when
        compiling a string); its empty dirname is dropped and root remains.
        """
        options = options or ImportOptions()
        candidates = [*options.include_paths, os.path.dirname(previous_file or ""), str(self.config.root)]
        return [path for path in candidates if path]

    async def resolve(
        self, specifier: str, previous_file: str, options: ImportOptions | None = None
    ) -> ResolutionResult:
        """Resolve a specifier.

        Args:
            specifier: Import specifier as written in the stylesheet
            previous_file: File containing the @import (or a host placeholder)
            options: Per-call options from the host

        Returns:
            Resolved(file) on success, NoResult() when nothing matched

        Raises:
            ImportResolutionError: Nothing matched and a lookup failed with an error
        """
        include_paths = self.include_paths_for(previous_file, options)
        logger.debug(f"[import:resolve] {specifier} from {previous_file} via {include_paths}")

        result = await self.stack.run(specifier, self.config.extension, include_paths)

        if result.file is not None:
            logger.debug(f"[import:resolve] {specifier} -> {result.file}")
            return Resolved(result.file)

        if result.error is not None:
            logger.debug(f"[import:resolve] {specifier} failed after {result.attempts_run} attempts")
            raise ImportResolutionError(specifier, previous_file) from result.error

        logger.debug(f"[import:resolve] {specifier} -> no result, deferring to host")
        return NoResult()

    async def __call__(
        self,
        specifier: str,
        previous_file: str,
        done: CompletionCallback,
        options: ImportOptions | None = None,
    ) -> None:
        """Callback form of resolve().

        Calls done({"file": path}) on success or done() for no result, exactly
        once. A fatal failure raises from this awaitable and done is not called.
        """
        result = await self.resolve(specifier, previous_file, options)
        if isinstance(result, Resolved):
            done(result.to_dict())
        else:
            done()

    def for_libsass(self, options: ImportOptions | None = None) -> Callable[[str, str], list[tuple[str]] | None]:
        """Build a synchronous importer for libsass-python.

        Usage:
            sass.compile(filename=..., importers=[(0, importer.for_libsass())])

        The returned function runs the pipeline with asyncio.run, so it must
        not be invoked from inside a running event loop.
        """

        def libsass_importer(path: str, prev: str) -> list[tuple[str]] | None:
            result = asyncio.run(self.resolve(path, prev, options))
            if isinstance(result, Resolved):
                return [(result.file,)]
            return None

        return libsass_importer

    def __repr__(self) -> str:
        return f"Importer(root={self.config.root}, extension={self.config.extension})"


def create_importer(
    root: str | Path | None = None,
    extension: str = DEFAULT_EXTENSION,
    *,
    stat: StatFunction | None = None,
    module_resolver: ModuleResolverFunction | None = None,
) -> Importer:
    """Create an importer bound to a root directory and extension.

    Args:
        root: Last-resort base directory (default: current working directory,
              read once here)
        extension: Stylesheet extension; a leading dot is added if missing
        stat: Existence check collaborator (default: os.stat in a thread)
        module_resolver: Module resolution collaborator (default: NodeModuleResolver)

    Returns:
        Importer instance
    """
    config = ImporterConfig(root=Path(root) if root is not None else Path.cwd(), extension=extension)
    return Importer(config, stat=stat, module_resolver=module_resolver)
