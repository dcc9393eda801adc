"""Exception types raised by the import resolution pipeline.

- SassImporterError: Base class for everything this package raises
- ModuleResolutionError: A module-resolution lookup failed (carried, not fatal)
- ImportResolutionError: Every attempt was exhausted after a carried failure
"""


class SassImporterError(Exception):
    """Base error for sass-module-importer."""


class ModuleResolutionError(SassImporterError):
    """Module resolution failed for a reason other than plain absence."""

    def __init__(self, message: str, request: str | None = None, basedir: str | None = None):
        super().__init__(message)
        self.request = request
        self.basedir = basedir


class ImportResolutionError(SassImporterError):
    """Fatal failure: no strategy resolved the specifier and at least one errored."""

    def __init__(self, specifier: str, previous_file: str):
        super().__init__(f"Could not find file: {specifier} from parent {previous_file}")
        self.specifier = specifier
        self.previous_file = previous_file
