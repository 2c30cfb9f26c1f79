"""
Shared test fixtures for the Symbolic test suite.

Provides in-memory catalogs, a queued dispatcher standing in for the UI
main loop, and settings/catalog files that use real file I/O.
"""

import pytest
import toml

from symbolic.search.catalog import Catalog, clear_cache
from symbolic.search.dispatch import QueueDispatcher
from symbolic.search.symbols import Symbol, SymbolSetIdentifier


def make_catalog(identifier, names):
    """Catalog descriptor over a fixed list of names."""
    symbols = tuple(Symbol(set=identifier, name=name) for name in names)
    return Catalog(identifier=identifier, accessor=lambda: symbols)


@pytest.fixture
def catalogs():
    """Two catalogs in priority order: Material Design, then SF Symbols."""
    return [
        make_catalog(SymbolSetIdentifier.MATERIAL_DESIGN,
                     ["home", "home-outline", "account", "alarm"]),
        make_catalog(SymbolSetIdentifier.SF_SYMBOLS,
                     ["house", "house.fill", "person", "alarm"]),
    ]


@pytest.fixture
def dispatcher():
    return QueueDispatcher()


@pytest.fixture
def fresh_catalog_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"max_workers": 2},
        "catalogs": {"order": ["sf-symbols", "material-design"]},
        "export": {"directory": str(tmp_path / "exports"), "format": "PNG",
                   "max_workers": 2, "icon_set": "watchOS"},
        "logging": {"level": "DEBUG"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def tmp_catalog_file(tmp_path):
    """Create a real catalog file with comments and blank lines."""
    path = tmp_path / "catalog.txt"
    path.write_text("# Test catalog\nhome\n\nhome-outline\n  account  \n")
    return path
