"""Geometry and drawing-image adapters.

Path data is handed to ``svgpathtools.parse_path``; the resulting
``svgpathtools.Path`` is the geometry value object. Brushes are resolved to
RGBA tuples with Pillow's ``ImageColor`` so that any colour string Pillow
understands ("black", "#ff000080", "rgb(0, 128, 255)") can be used.

Nothing here rasterizes; a :class:`DrawingImage` only pairs a geometry with
its fill.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from PIL import ImageColor
from svgpathtools import Path as Geometry
from svgpathtools import parse_path


Brush = tuple[int, int, int, int]
BrushLike = str | Sequence[int]


def _is_channel(value) -> bool:
    # bool is an int subclass but never a colour channel
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def resolve_brush(value: BrushLike) -> Brush:
    """Resolve a colour value into an RGBA tuple.

    Args:
        value: Colour string accepted by ``PIL.ImageColor.getrgb`` or an
            RGB/RGBA sequence of ints in 0..255.

    Returns:
        (r, g, b, a) tuple. RGB inputs are made opaque.

    Raises:
        ValueError: If the value is not a recognised colour.
    """
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value)
    elif isinstance(value, (tuple, list)):
        rgb = tuple(value)
        if len(rgb) not in (3, 4) or not all(_is_channel(channel) for channel in rgb):
            raise ValueError(f"Invalid brush color: {value!r}")
    else:
        raise ValueError(f"Invalid brush color: {value!r}")

    if len(rgb) == 3:
        rgb = (*rgb, 255)
    return rgb


@dataclass(frozen=True)
class GeometryDrawing:
    """A geometry filled with a brush."""

    geometry: Geometry
    brush: Brush


@dataclass(frozen=True)
class DrawingImage:
    """Image source wrapping a single geometry drawing.

    Attributes:
        drawing: The filled geometry this image displays.
    """

    drawing: GeometryDrawing

    @property
    def geometry(self) -> Geometry:
        return self.drawing.geometry

    @property
    def brush(self) -> Brush:
        return self.drawing.brush


@runtime_checkable
class GeometryBackend(Protocol):
    """Adapter for turning path data into geometry and drawable images."""

    def parse_geometry(self, path_data: str):
        ...

    def create_drawing_image(self, geometry, brush: BrushLike):
        ...


class SvgPathBackend:
    """Default backend built on svgpathtools and Pillow colours."""

    def parse_geometry(self, path_data: str) -> Geometry:
        # Syntax errors from the parser propagate unchanged
        return parse_path(path_data)

    def create_drawing_image(self, geometry: Geometry, brush: BrushLike) -> DrawingImage:
        return DrawingImage(GeometryDrawing(geometry=geometry, brush=resolve_brush(brush)))
