"""
Symbols - Catalog entries and the filter matching rule.

A symbol is identified by its set and name. Filtering keeps the catalog
order and matches names by case-insensitive substring.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable


class SymbolSetIdentifier(str, Enum):
    """Known symbol sets."""

    MATERIAL_DESIGN = "material-design"
    SF_SYMBOLS = "sf-symbols"
    EMOJI = "emoji"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    SymbolSetIdentifier.MATERIAL_DESIGN: "Material Design",
    SymbolSetIdentifier.SF_SYMBOLS: "SF Symbols",
    SymbolSetIdentifier.EMOJI: "Emoji",
}


@dataclass(frozen=True)
class Symbol:
    """A single named entry in a symbol set."""
    set: SymbolSetIdentifier
    name: str

    @property
    def id(self) -> str:
        return f"{self.set.value}-{self.name}"


Matcher = Callable[[Symbol, str], bool]


def matches(symbol: Symbol, text: str) -> bool:
    """Return True if the symbol name contains text, ignoring case."""
    return text.casefold() in symbol.name.casefold()


def filter_symbols(symbols: Iterable[Symbol], text: str,
                   matcher: Matcher = matches) -> tuple[Symbol, ...]:
    """
    Filter symbols by text, keeping their original order.

    An empty filter matches everything.
    """
    if not text:
        return tuple(symbols)
    return tuple(symbol for symbol in symbols if matcher(symbol, text))
