"""Resolve Sass @import specifiers against include paths and node_modules."""

from .errors import ImportResolutionError
from .errors import ModuleResolutionError
from .errors import SassImporterError
from .extension import normalize_extension
from .extension import with_extension
from .importer import ImporterConfig
from .importer import ImportOptions
from .importer import Importer
from .importer import create_importer
from .module_resolution import NodeModuleResolver
from .module_resolution import NoResult
from .module_resolution import Resolved

__all__ = [
    "ImportOptions",
    "ImportResolutionError",
    "Importer",
    "ImporterConfig",
    "ModuleResolutionError",
    "NoResult",
    "NodeModuleResolver",
    "Resolved",
    "SassImporterError",
    "create_importer",
    "normalize_extension",
    "with_extension",
]
