"""Markup hooks for declarative UI templates.

A template engine instantiates one of these with the attributes given in
markup and calls ``provide_value`` to get the object to bind:

    IconGeometryExtension(icon="home").provide_value()
    IconSourceExtension(icon="delete", brush="#d32f2f").provide_value()
"""

from __future__ import annotations

from dataclasses import dataclass

from mdi_icons.factory import IconsFactory
from mdi_icons.geometry import BrushLike
from mdi_icons.icons import Icon


@dataclass
class IconGeometryExtension:
    """Resolves an icon reference into its geometry."""

    icon: Icon | str

    def provide_value(self, service_provider=None):
        return IconsFactory().create_geometry(Icon.parse(self.icon))


@dataclass
class IconSourceExtension:
    """Resolves an icon reference into a drawing image filled with ``brush``.

    Without a brush the factory uses the configured default fill.
    """

    icon: Icon | str
    brush: BrushLike | None = None

    def provide_value(self, service_provider=None):
        return IconsFactory().create_drawing_image(Icon.parse(self.icon), self.brush)
