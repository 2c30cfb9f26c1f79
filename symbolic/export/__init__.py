"""
Export package - Icon set definitions and per-variant snapshots.

Each variant of an icon set is rendered and written independently, so a
failed variant never takes the rest of the set down with it.
"""

from .icon import Icon, Renderable
from .models import ICON_SETS, ExportItem, IconSetDefinition, VariantDefinition, get_icon_set
from .pipeline import IconExportPipeline
from .writer import SnapshotWriter

__all__ = [
    "ICON_SETS",
    "ExportItem",
    "Icon",
    "IconExportPipeline",
    "IconSetDefinition",
    "Renderable",
    "SnapshotWriter",
    "VariantDefinition",
    "get_icon_set",
]
