"""
Error types raised by the catalog tools.

Every failure is fatal for a run; the CLI maps any CatalogError to exit code 1.
"""


class CatalogError(Exception):
    """Base class for catalog processing failures."""


class UsageError(CatalogError):
    """A required command-line value is missing."""


class InputError(CatalogError):
    """An input or alias file could not be read or parsed."""


class OutputError(CatalogError):
    """The result file could not be written."""
