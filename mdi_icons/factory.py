"""Icon resolver: embedded SVG -> path data -> geometry / drawing image.

Every call re-opens the resource, re-reads and re-parses it. Icons are
small and resolved while UI is built, so nothing is cached.

Usage:
    from mdi_icons.factory import IconsFactory
    from mdi_icons.icons import Icon

    factory = IconsFactory()
    geometry = factory.create_geometry(Icon.ICON_HOME)
    image = factory.create_drawing_image(Icon.ICON_HOME, "white")
"""

from __future__ import annotations

from typing import BinaryIO
from xml.etree import ElementTree

from mdi_icons.config import settings
from mdi_icons.exceptions import IconError, IconFormatError, IconNotFoundError
from mdi_icons.geometry import BrushLike, GeometryBackend, SvgPathBackend
from mdi_icons.icons import ICON_PREFIX_LENGTH, Icon, format_icon_name
from mdi_icons.logging import LoggerFactory
from mdi_icons.resources import (
    PackageResourceProvider,
    ResourceProvider,
    get_icon_resource_name,
)


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_NAMESPACES = {"svg": SVG_NAMESPACE}
SVG_ROOT_TAG = f"{{{SVG_NAMESPACE}}}svg"
# Direct child only; icons are a root <svg> holding one <path>
SVG_PATH_QUERY = "svg:path"

log = LoggerFactory.for_icons()


class IconsFactory:
    """Creates geometries and drawing images from embedded icons."""

    def __init__(
        self,
        provider: ResourceProvider | None = None,
        backend: GeometryBackend | None = None,
        prefix_length: int = ICON_PREFIX_LENGTH,
    ):
        self.provider = provider if provider is not None else PackageResourceProvider()
        self.backend = backend if backend is not None else SvgPathBackend()
        self.prefix_length = prefix_length

    def get_icon_name(self, icon: Icon | str) -> str:
        return format_icon_name(icon, self.prefix_length)

    def get_icon_stream_name(self, icon: Icon | str) -> str:
        return get_icon_resource_name(self.get_icon_name(icon))

    def get_icon_stream(self, icon: Icon | str) -> BinaryIO | None:
        """Open the icon's SVG resource, or None if it isn't embedded."""
        return self.provider.open_resource(self.get_icon_stream_name(icon))

    def get_icon_data(self, icon: Icon | str) -> str:
        """Extract the path data ('d' attribute) from an icon's SVG.

        Raises:
            IconNotFoundError: No resource exists for the icon.
            IconFormatError: The SVG has no root svg/path with a 'd' value.
            xml.etree.ElementTree.ParseError: The SVG is not well-formed.
        """
        stream = self.get_icon_stream(icon)
        if stream is None:
            raise IconNotFoundError(icon)

        with stream:
            content = stream.read().decode("utf-8-sig")

        root = ElementTree.fromstring(content)
        node = root.find(SVG_PATH_QUERY, SVG_NAMESPACES) if root.tag == SVG_ROOT_TAG else None
        data = node.get("d") if node is not None else None
        if not data or not data.strip():
            raise IconFormatError(icon, self.get_icon_name(icon))

        log.debug(f"Read icon {self.get_icon_name(icon)} ({len(data)} chars of path data)")
        return data

    def create_geometry(self, icon: Icon | str):
        """Parse the icon's path data into a geometry.

        Path syntax errors from the backend are not wrapped.
        """
        return self.backend.parse_geometry(self.get_icon_data(icon))

    def create_drawing_image(self, icon: Icon | str, brush: BrushLike | None = None):
        """Create a drawing image filling the icon's geometry with ``brush``.

        Args:
            icon: Icon to draw.
            brush: Fill colour; defaults to the ``default_brush`` setting.
        """
        if brush is None:
            brush = settings.get_default_brush()
        geometry = self.create_geometry(icon)
        return self.backend.create_drawing_image(geometry, brush)

    def verify_icons(self) -> list[tuple[Icon, Exception]]:
        """Resolve every icon and collect the ones that fail.

        Returns:
            List of (icon, error) pairs; empty when every icon is usable.
        """
        problems: list[tuple[Icon, Exception]] = []
        for icon in Icon:
            try:
                self.create_geometry(icon)
            except (IconError, ElementTree.ParseError, ValueError, IndexError) as error:
                log.warning(f"Icon {icon.name} failed verification: {error}")
                problems.append((icon, error))
        return problems
