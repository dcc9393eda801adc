"""Resolution stack - ordered, sequential execution of resolver attempts.

Resolution order (first match wins):
1. Local lookup in each include path, in include-path order
2. Package lookup from each include path, in include-path order

Attempts are awaited one at a time. The stack never races attempts against
each other, so a slow attempt early in the order always takes precedence
over a fast one later.
"""

import logging
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Sequence

from .models import AttemptOutcome
from .models import ResolverAttempt
from .models import StackResult
from .models import Strategy

logger = logging.getLogger(__name__)

Resolver = Callable[[str, str, str], Awaitable[AttemptOutcome]]

STRATEGY_ORDER = (Strategy.LOCAL, Strategy.PACKAGE)


def build_attempts(include_paths: Sequence[str]) -> list[ResolverAttempt]:
    """Expand include paths into the ordered attempt list.

    Args:
        include_paths: Base directories in precedence order

    Returns:
        All local attempts followed by all package attempts, each group in
        include-path order

    Example:
        >>> [str(a) for a in build_attempts(["a", "b"])]
        ['local:a', 'local:b', 'package:a', 'package:b']
    """
    return [ResolverAttempt(strategy, base) for strategy in STRATEGY_ORDER for base in include_paths]


class ResolutionStack:
    """Runs resolver attempts in order and stops at the first match."""

    def __init__(self, local: Resolver, package: Resolver):
        self._resolvers: dict[Strategy, Resolver] = {
            Strategy.LOCAL: local,
            Strategy.PACKAGE: package,
        }

    async def run(self, specifier: str, extension: str, include_paths: Sequence[str]) -> StackResult:
        """Try every attempt in order until one resolves.

        Args:
            specifier: Import specifier as written in the stylesheet
            extension: Stylesheet extension (with leading dot)
            include_paths: Base directories in precedence order

        Returns:
            StackResult with the resolved file, or with file=None and the most
            recent error carried by any attempt
        """
        attempts = build_attempts(include_paths)
        error: BaseException | None = None

        for index, attempt in enumerate(attempts, start=1):
            outcome = await self._resolvers[attempt.strategy](attempt.base, specifier, extension)

            if outcome.found:
                logger.debug(f"[import:stack] {specifier} -> {outcome.file} ({attempt})")
                return StackResult(file=outcome.file, attempts_run=index)

            if outcome.error is not None:
                error = outcome.error

            logger.debug(f"[import:stack] {attempt} missed, {len(attempts) - index} remaining")

        return StackResult(file=None, error=error, attempts_run=len(attempts))
