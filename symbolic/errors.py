"""
Error taxonomy shared by the search and export pipelines.

RenderFailure and WriteFailure are isolated to a single export variant.
CatalogUnavailable means a static catalog could not be served, which
should never happen for the bundled catalogs.
"""


class SymbolicError(Exception):
    """Base class for all Symbolic errors."""


class CatalogUnavailable(SymbolicError):
    """A symbol catalog is missing, unreadable or inconsistent."""


class RenderFailure(SymbolicError):
    """An icon could not produce pixel data for a variant."""


class WriteFailure(SymbolicError):
    """A rendered snapshot could not be persisted."""
