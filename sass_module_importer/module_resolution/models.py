"""Data models for the import resolution pipeline.

Defines the per-call types that flow through the pipeline:
- Strategy: Which resolver an attempt uses
- ResolverAttempt: One (strategy, base directory) pair
- AttemptOutcome: What a single attempt produced
- StackResult: What a full run of the stack produced
- Resolved / NoResult: The importer's non-fatal results
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    """Resolver strategy bound to an attempt.

    Types:
    - LOCAL: Direct filesystem lookup relative to the base directory
    - PACKAGE: Node-style module resolution rooted at the base directory
    """

    LOCAL = "local"
    PACKAGE = "package"


@dataclass(frozen=True)
class ResolverAttempt:
    """A single unit of work: one strategy applied to one base directory."""

    strategy: Strategy
    base: str

    def __str__(self) -> str:
        return f"{self.strategy.value}:{self.base}"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of one attempt.

    Attributes:
        file: Absolute path when the attempt resolved, None otherwise
        error: Failure carried from an underlying collaborator, if any
    """

    file: str | None = None
    error: BaseException | None = None

    @property
    def found(self) -> bool:
        return self.file is not None

    @classmethod
    def not_found(cls, error: BaseException | None = None) -> AttemptOutcome:
        return cls(file=None, error=error)


@dataclass(frozen=True)
class StackResult:
    """Result of running every attempt (or stopping at the first match)."""

    file: str | None = None
    error: BaseException | None = None
    attempts_run: int = 0


@dataclass(frozen=True)
class Resolved:
    """The specifier resolved to a file on disk."""

    file: str

    def to_dict(self) -> dict[str, str]:
        """Payload handed to a completion callback."""
        return {"file": self.file}


@dataclass(frozen=True)
class NoResult:
    """Nothing matched; the host should apply its own default resolution."""
