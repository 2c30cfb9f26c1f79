"""
Icon Export Pipeline - One snapshot file per variant of an icon set.

snapshot() renders and writes a single variant and raises on failure.
export() runs every variant of a set independently; a variant that fails
becomes an inert ExportItem and the rest of the set is unaffected.
"""

import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from loguru import logger

from symbolic.errors import RenderFailure, WriteFailure
from symbolic.export.icon import Renderable
from symbolic.export.models import ExportItem, IconSetDefinition, VariantDefinition
from symbolic.export.writer import SnapshotWriter


def suggested_name(icon: Renderable, definition: VariantDefinition) -> str:
    """File name for a variant, e.g. "Icon 16pt@2x"."""
    name = getattr(icon, "name", "Icon")
    size = definition.size if definition.size is not None else getattr(icon, "size", None)
    if size is None:
        return f"{name}@{definition.label}"
    return f"{name} {size:g}pt@{definition.label}"


class IconExportPipeline:
    """Render icons per variant and persist them through a writer."""

    def __init__(self, writer: Optional[SnapshotWriter] = None, max_workers: int = 4,
                 directory=None):
        self.writer = writer or SnapshotWriter()
        self.max_workers = max_workers
        self.directory = Path(directory) if directory else Path(tempfile.gettempdir())

    def snapshot(self, icon: Renderable, definition: VariantDefinition, directory) -> Path:
        """
        Render icon for one variant and write it under directory.

        Returns:
            Path of the written file

        Raises:
            RenderFailure: The icon produced no image data
            WriteFailure: The image could not be persisted
        """
        try:
            image = icon.render(definition)
        except RenderFailure:
            raise
        except Exception as e:
            raise RenderFailure(f"Rendering {definition.id} failed: {e}") from e
        if image is None:
            raise RenderFailure(f"Rendering {definition.id} produced no image")

        try:
            return self.writer.write(image, suggested_name(icon, definition), directory)
        except WriteFailure:
            raise
        except Exception as e:
            raise WriteFailure(f"Writing {definition.id} failed: {e}") from e

    def export_item(self, icon: Renderable, definition: VariantDefinition, directory=None,
                    index: int = 0) -> ExportItem:
        """Snapshot one variant, turning failures into an inert item."""
        try:
            path = self.snapshot(icon, definition, directory or self.directory)
        except (RenderFailure, WriteFailure) as e:
            logger.warning(f"Export of variant {index} ({definition.id}) failed: {e}")
            return ExportItem(index=index, definition=definition, error=e)
        return ExportItem(index=index, definition=definition, path=path)

    def export(self, icon: Renderable, icon_set: IconSetDefinition, directory=None) -> list[ExportItem]:
        """
        Export every variant of an icon set.

        Variants render concurrently; results keep definition order.
        """
        directory = directory or self.directory
        definitions = list(icon_set.definitions)
        if not definitions:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="icon-export") as pool:
            items = list(pool.map(
                lambda pair: self.export_item(icon, pair[1], directory, index=pair[0]),
                enumerate(definitions),
            ))

        failed = sum(1 for item in items if item.is_empty)
        logger.debug(f"Exported {len(items) - failed}/{len(items)} variants of {icon_set.name}")
        return items
