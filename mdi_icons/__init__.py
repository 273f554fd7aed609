"""Material Design icons as vector geometry and drawing images."""

from mdi_icons.__version__ import __version__
from mdi_icons.exceptions import IconError, IconFormatError, IconNotFoundError
from mdi_icons.factory import IconsFactory
from mdi_icons.icons import Icon, format_icon_name

__all__ = [
    "Icon",
    "IconError",
    "IconFormatError",
    "IconNotFoundError",
    "IconsFactory",
    "__version__",
    "format_icon_name",
]
