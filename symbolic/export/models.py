"""
Icon Set Definitions - Which variants must be exported for an icon set.

A variant is one required output: a point size rendered at a scale, with
an optional description of its purpose. Definition order is display and
export order. Variants sharing a scale are distinct and never merged.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class VariantDefinition:
    """One required output configuration for an icon export."""
    scale: float
    description: Optional[str] = None
    size: Optional[float] = None  # Points; None uses the icon's own size
    id: str = ""

    def __post_init__(self):
        if not self.id:
            object.__setattr__(self, "id", self._default_id())

    def _default_id(self) -> str:
        parts = [f"{self.size:g}pt" if self.size is not None else None, f"{self.scale:g}x", self.description]
        return "-".join(part.lower().replace(" ", "-") for part in parts if part)

    @property
    def label(self) -> str:
        """Scale label shown under a preview, e.g. "2x"."""
        if not math.isfinite(self.scale):
            return f"{self.scale}x"
        return f"{int(self.scale)}x"


@dataclass(frozen=True)
class IconSetDefinition:
    """Named, ordered list of variants exported together."""
    name: str
    definitions: tuple[VariantDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "definitions", tuple(self.definitions))

    def __iter__(self):
        return iter(self.definitions)

    def __len__(self):
        return len(self.definitions)


@dataclass(frozen=True)
class ExportItem:
    """
    Transferable result for one exported variant.

    An item without a path is inert: dragging it transfers nothing.
    """
    index: int
    definition: VariantDefinition
    path: Optional[Path] = None
    error: Optional[Exception] = None

    @property
    def is_empty(self) -> bool:
        return self.path is None

    @property
    def uri(self) -> Optional[str]:
        return self.path.resolve().as_uri() if self.path else None


def _variants(*specs) -> tuple[VariantDefinition, ...]:
    return tuple(VariantDefinition(size=size, scale=scale, description=description)
                 for size, scale, description in specs)


MACOS = IconSetDefinition("macOS", _variants(
    (16, 1, None), (16, 2, None),
    (32, 1, None), (32, 2, None),
    (128, 1, None), (128, 2, None),
    (256, 1, None), (256, 2, None),
    (512, 1, None), (512, 2, None),
))

IOS = IconSetDefinition("iOS", _variants(
    (20, 2, "Notification"), (20, 3, "Notification"),
    (29, 2, "Settings"), (29, 3, "Settings"),
    (40, 2, "Spotlight"), (40, 3, "Spotlight"),
    (60, 2, "iPhone"), (60, 3, "iPhone"),
    (76, 2, "iPad"),
    (83.5, 2, "iPad Pro"),
    (1024, 1, "App Store"),
))

WATCHOS = IconSetDefinition("watchOS", _variants(
    (24, 2, "Notification 38mm"),
    (27.5, 2, "Notification 42mm"),
    (40, 2, "Home Screen 38mm"),
    (44, 2, "Home Screen 40mm"),
    (1024, 1, "App Store"),
))

ICON_SETS = (MACOS, IOS, WATCHOS)


def get_icon_set(name: str) -> IconSetDefinition:
    """Look up a built-in icon set by name (case-insensitive)."""
    for icon_set in ICON_SETS:
        if icon_set.name.lower() == name.lower():
            return icon_set
    raise KeyError(f"Unknown icon set: {name}")
