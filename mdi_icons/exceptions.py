"""Custom exceptions for icon lookup and parsing.

Exception Hierarchy:
    IconError (base)
        ├── IconNotFoundError
        └── IconFormatError

Path data that the geometry parser rejects is not wrapped: the parser's own
``ValueError``/``IndexError`` reaches the caller unchanged, as does
``xml.etree.ElementTree.ParseError`` for malformed SVG.

Usage:
    from mdi_icons.exceptions import IconNotFoundError

    if stream is None:
        raise IconNotFoundError(icon)
"""

from __future__ import annotations

from enum import Enum


def _icon_label(icon: object) -> str:
    if isinstance(icon, Enum):
        return icon.name
    return str(icon)


class IconError(Exception):
    """Base exception for all icon operations."""


class IconNotFoundError(IconError):
    """No embedded resource exists for the icon."""

    def __init__(self, icon: object):
        self.icon = icon
        super().__init__(f"Icon '{_icon_label(icon)}' not found")


class IconFormatError(IconError):
    """Resource exists but has no readable root svg/path 'd' attribute."""

    def __init__(self, icon: object, resource_key: str | None = None):
        self.icon = icon
        self.resource_key = resource_key
        super().__init__(f"Cannot read icon '{resource_key or _icon_label(icon)}'")
