"""
Symbolic Application - Wires the pipelines for one UI session.

The session owns the symbol search (started and stopped with the symbol
picker) and the export pipeline used by icon set previews.

Usage:
    from symbolic.panels.gtk import GLibDispatcher

    app = SymbolicApp(dispatcher=GLibDispatcher())
    app.search.subscribe(show_sections)
    app.start()
"""

from typing import Any, Dict, Optional

from loguru import logger

from symbolic.export.icon import Renderable
from symbolic.export.models import ExportItem, get_icon_set
from symbolic.export.pipeline import IconExportPipeline
from symbolic.export.writer import SnapshotWriter
from symbolic.search.catalog import default_catalogs
from symbolic.search.dispatch import Dispatcher
from symbolic.search.pipeline import SymbolSearchPipeline
from symbolic.utils.helpers import configure_logging, export_directory, load_settings


class SymbolicApp:
    """Search and export pipelines configured from settings."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None,
                 dispatcher: Optional[Dispatcher] = None):
        self.settings = settings or load_settings()
        configure_logging(self.settings["logging"]["level"])

        self.search = SymbolSearchPipeline(
            catalogs=default_catalogs(self.settings["catalogs"]["order"]),
            dispatcher=dispatcher,
            max_workers=self.settings["search"]["max_workers"],
        )

        export = self.settings["export"]
        self.exporter = IconExportPipeline(
            writer=SnapshotWriter(export["format"]),
            max_workers=export["max_workers"],
            directory=export_directory(self.settings),
        )

    def start(self) -> None:
        self.search.start()
        logger.info("Symbolic session started")

    def stop(self) -> None:
        self.search.stop()
        logger.info("Symbolic session stopped")

    def export_icon_set(self, icon: Renderable, name: Optional[str] = None) -> list[ExportItem]:
        """Export a built-in icon set, the configured one by default."""
        icon_set = get_icon_set(name or self.settings["export"]["icon_set"])
        return self.exporter.export(icon, icon_set)
