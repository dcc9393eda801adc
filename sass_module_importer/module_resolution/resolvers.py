"""Resolver strategies applied to a single base directory.

- LocalResolver: join base + specifier and check the file exists
- PackageResolver: node-style module resolution, extended then bare specifier
"""

import asyncio
import logging
import os
from collections.abc import Awaitable
from collections.abc import Callable

from ..extension import with_extension
from .models import AttemptOutcome

logger = logging.getLogger(__name__)

StatFunction = Callable[[str], Awaitable[os.stat_result | None]]
ModuleResolverFunction = Callable[[str, str], Awaitable[str | None]]


async def stat_file(path: str) -> os.stat_result:
    """Default existence check: os.stat in a worker thread."""
    return await asyncio.to_thread(os.stat, path)


class LocalResolver:
    """Resolve a specifier relative to a base directory on the filesystem.

    A failed stat is treated as absence, never as an error: missing local
    files are the common case while walking include paths.
    """

    def __init__(self, stat: StatFunction | None = None):
        self.stat = stat or stat_file

    async def __call__(self, base: str, specifier: str, extension: str) -> AttemptOutcome:
        # A leading slash stays under the base ("/abs/x" -> <base>/abs/x)
        joined = os.path.join(base, specifier.lstrip("/" + os.sep))
        candidate = os.path.abspath(with_extension(joined, extension))
        logger.debug(f"[import:local] {specifier} -> checking {candidate}")

        try:
            status = await self.stat(candidate)
        except Exception as e:
            logger.debug(f"[import:local] {candidate} not usable: {e}")
            return AttemptOutcome.not_found()

        if status is None:
            return AttemptOutcome.not_found()
        return AttemptOutcome(file=candidate)

    def __repr__(self) -> str:
        return "LocalResolver()"


class PackageResolver:
    """Resolve a specifier as a package or module rooted at a base directory.

    Tries the specifier with the extension appended first, then the bare
    specifier. Only the second lookup's failure is carried forward.
    """

    def __init__(self, module_resolver: ModuleResolverFunction):
        self.module_resolver = module_resolver

    async def __call__(self, base: str, specifier: str, extension: str) -> AttemptOutcome:
        extended = with_extension(specifier, extension)
        logger.debug(f"[import:package] {extended} from {base}")

        try:
            resolved = await self.module_resolver(extended, base)
        except Exception as e:
            logger.debug(f"[import:package] {extended} failed from {base}: {e}")
            resolved = None

        if resolved:
            return AttemptOutcome(file=os.path.abspath(resolved))

        logger.debug(f"[import:package] {specifier} from {base} (bare)")
        try:
            resolved = await self.module_resolver(specifier, base)
        except Exception as e:
            logger.debug(f"[import:package] {specifier} failed from {base}: {e}")
            return AttemptOutcome.not_found(e)

        if resolved:
            return AttemptOutcome(file=os.path.abspath(resolved))
        return AttemptOutcome.not_found()

    def __repr__(self) -> str:
        return f"PackageResolver({self.module_resolver!r})"
