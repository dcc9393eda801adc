"""Import resolution pipeline.

This package provides the resolver strategies and the stack that sequences
them. The importer entry point wires them together with configuration.
"""

from .models import AttemptOutcome
from .models import NoResult
from .models import Resolved
from .models import ResolverAttempt
from .models import StackResult
from .models import Strategy
from .node import NodeModuleResolver
from .resolvers import LocalResolver
from .resolvers import PackageResolver
from .resolvers import stat_file
from .stack import ResolutionStack
from .stack import build_attempts

__all__ = [
    "AttemptOutcome",
    "LocalResolver",
    "NoResult",
    "NodeModuleResolver",
    "PackageResolver",
    "ResolutionStack",
    "Resolved",
    "ResolverAttempt",
    "StackResult",
    "Strategy",
    "build_attempts",
    "stat_file",
]
