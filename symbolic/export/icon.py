"""
Icon - A renderable icon design.

The export pipeline only needs render(definition). Icon renders a rounded
background with an optional foreground image and text glyph using PIL.
Shading and effects belong to the design tools, not here.
"""

import math
from dataclasses import dataclass
from typing import Optional, Protocol

from PIL import Image, ImageDraw, ImageFont

from symbolic.errors import RenderFailure
from symbolic.export.models import VariantDefinition


class Renderable(Protocol):
    name: str

    def render(self, definition: VariantDefinition) -> Image.Image:
        ...


@dataclass
class Icon:
    """Icon design rendered on a square canvas."""
    name: str = "Icon"
    size: float = 512  # Points at 1x
    background: str = "#1E88E5"
    foreground: str = "#FFFFFF"
    corner_radius: float = 0.225  # Fraction of the canvas
    glyph: str = ""
    image: Optional[Image.Image] = None  # Foreground artwork, scaled to fit
    padding: float = 0.2  # Fraction of the canvas around the artwork
    max_pixels: int = 4096

    def pixel_size(self, definition: VariantDefinition) -> int:
        """
        Output edge length in pixels for a variant.

        Raises:
            RenderFailure: Scale or resulting size is unsupported
        """
        scale = definition.scale
        if not math.isfinite(scale) or scale <= 0:
            raise RenderFailure(f"Unsupported scale {scale} for {self.name}")
        points = definition.size if definition.size is not None else self.size
        pixels = round(points * scale)
        if pixels < 1 or pixels > self.max_pixels:
            raise RenderFailure(f"Cannot render {self.name} at {pixels}px (max {self.max_pixels}px)")
        return pixels

    def render(self, definition: VariantDefinition) -> Image.Image:
        """Render the icon for a variant as an RGBA image."""
        pixels = self.pixel_size(definition)

        try:
            canvas = Image.new("RGBA", (pixels, pixels), (0, 0, 0, 0))
            draw = ImageDraw.Draw(canvas)
            radius = int(pixels * self.corner_radius)
            draw.rounded_rectangle((0, 0, pixels - 1, pixels - 1), radius=radius, fill=self.background)

            inset = int(pixels * self.padding)
            content = max(1, pixels - 2 * inset)

            if self.image is not None:
                artwork = self.image.convert("RGBA")
                ratio = content / max(artwork.size)
                artwork = artwork.resize(
                    (max(1, round(artwork.width * ratio)), max(1, round(artwork.height * ratio))),
                    Image.Resampling.LANCZOS,
                )
                offset = ((pixels - artwork.width) // 2, (pixels - artwork.height) // 2)
                canvas.alpha_composite(artwork, offset)

            if self.glyph:
                font = ImageFont.load_default(size=content)
                draw.text((pixels / 2, pixels / 2), self.glyph, fill=self.foreground,
                          font=font, anchor="mm")
        except (OSError, ValueError) as e:
            raise RenderFailure(f"Rendering {self.name} failed: {e}") from e

        return canvas
