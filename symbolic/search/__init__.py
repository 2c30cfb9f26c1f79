"""
Search package - Symbol catalogs and the filter pipeline.

Filtering runs on a worker pool; results are published back to the UI
context, latest filter only.
"""

from .catalog import Catalog, default_catalogs, load_symbols
from .dispatch import ImmediateDispatcher, QueueDispatcher
from .pipeline import SearchState, Section, Subscription, SymbolSearchPipeline, compute_sections
from .symbols import Symbol, SymbolSetIdentifier, filter_symbols, matches

__all__ = [
    "Catalog",
    "ImmediateDispatcher",
    "QueueDispatcher",
    "SearchState",
    "Section",
    "Subscription",
    "Symbol",
    "SymbolSearchPipeline",
    "SymbolSetIdentifier",
    "compute_sections",
    "default_catalogs",
    "filter_symbols",
    "load_symbols",
    "matches",
]
