"""
Symbol Catalogs - Static, read-only symbol sets in priority order.

Each catalog is a plain text file under data/catalogs, one symbol name
per line:

    # Material Design
    home
    home-outline
    account

Catalogs are loaded once per process and shared by every concurrent
filter computation.
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from loguru import logger

from symbolic.errors import CatalogUnavailable
from symbolic.search.symbols import Symbol, SymbolSetIdentifier

CATALOG_DIR = Path(__file__).parent.parent / "data" / "catalogs"

# Priority order of the catalogs shown in search results
DEFAULT_ORDER = (
    SymbolSetIdentifier.MATERIAL_DESIGN,
    SymbolSetIdentifier.SF_SYMBOLS,
)

_cache: dict[SymbolSetIdentifier, tuple[Symbol, ...]] = {}
_cache_lock = threading.Lock()


@dataclass(frozen=True)
class Catalog:
    """Descriptor for one symbol set: identifier plus symbol accessor."""
    identifier: SymbolSetIdentifier
    accessor: Callable[[], Sequence[Symbol]]

    @property
    def display_name(self) -> str:
        return self.identifier.display_name

    @property
    def symbols(self) -> Sequence[Symbol]:
        try:
            return self.accessor()
        except CatalogUnavailable:
            raise
        except Exception as e:
            raise CatalogUnavailable(f"Catalog {self.identifier.value} failed: {e}") from e


def load_symbols(identifier: SymbolSetIdentifier,
                 path: Optional[Path] = None) -> tuple[Symbol, ...]:
    """
    Load (and cache) the symbols for a set.

    Args:
        identifier: Symbol set to load
        path: Catalog file, defaults to data/catalogs/<identifier>.txt

    Returns:
        Symbols in file order

    Raises:
        CatalogUnavailable: File is missing or contains a duplicate name
    """
    with _cache_lock:
        if identifier in _cache:
            return _cache[identifier]

        catalog_path = path or CATALOG_DIR / f"{identifier.value}.txt"
        try:
            lines = catalog_path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise CatalogUnavailable(f"Could not read catalog {catalog_path}: {e}") from e

        symbols = _parse_symbols(identifier, lines)
        _cache[identifier] = symbols
        logger.debug(f"Loaded {len(symbols)} symbols for {identifier.value} from {catalog_path}")
        return symbols


def _parse_symbols(identifier: SymbolSetIdentifier, lines: Iterable[str]) -> tuple[Symbol, ...]:
    """Convert catalog lines to symbols, rejecting duplicate names."""
    seen = set()
    symbols = []
    for line in lines:
        name = line.strip()
        if not name or name.startswith("#"):
            continue
        if name in seen:
            raise CatalogUnavailable(f"Duplicate symbol '{name}' in {identifier.value}")
        seen.add(name)
        symbols.append(Symbol(set=identifier, name=name))
    return tuple(symbols)


def clear_cache() -> None:
    """Forget loaded catalogs."""
    with _cache_lock:
        _cache.clear()


def default_catalogs(order: Optional[Iterable[str]] = None) -> list[Catalog]:
    """
    Build the catalog table in priority order.

    Args:
        order: Symbol set identifiers (e.g. ["sf-symbols"]), defaults to
            DEFAULT_ORDER

    Returns:
        List of Catalog descriptors backed by the bundled data files
    """
    identifiers = [SymbolSetIdentifier(value) for value in order] if order else list(DEFAULT_ORDER)
    return [
        Catalog(identifier=identifier, accessor=lambda i=identifier: load_symbols(i))
        for identifier in identifiers
    ]
