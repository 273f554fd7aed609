"""Icon identifiers for the embedded Material Design icon set.

Every member of :class:`Icon` maps to exactly one SVG file under
``mdi_icons/svg``. Member names follow the ``ICON_<NAME>`` convention and
the resource key is derived from the name by :func:`format_icon_name`:

    Icon.ICON_ACCOUNT_MULTIPLE_OUTLINE -> "account-multiple-outline"

Usage:
    from mdi_icons.icons import Icon

    icon = Icon.parse("home")
    assert icon is Icon.ICON_HOME
"""

from __future__ import annotations

from enum import Enum, auto

from mdi_icons.exceptions import IconNotFoundError


# Naming convention for Icon members; the prefix length is what gets stripped
ICON_PREFIX = "icon_"
ICON_PREFIX_LENGTH = len(ICON_PREFIX)


def format_icon_name(icon: Enum | str, prefix_length: int = ICON_PREFIX_LENGTH) -> str:
    """Convert an icon identifier into its resource key.

    Strips exactly ``prefix_length`` leading characters from the name,
    lower-cases it and replaces every underscore with a hyphen.

    Args:
        icon: Icon member or raw identifier name (e.g., "icon_home").
        prefix_length: Number of leading characters to drop.

    Returns:
        Resource key, e.g. "account-multiple-outline".
    """
    name = icon.name if isinstance(icon, Enum) else str(icon)
    return name[prefix_length:].lower().replace("_", "-")


class Icon(Enum):
    """Closed set of icons shipped with the package."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return format_icon_name(name)

    ICON_ACCOUNT = auto()
    ICON_ACCOUNT_MULTIPLE_OUTLINE = auto()
    ICON_ALERT = auto()
    ICON_ARROW_LEFT = auto()
    ICON_ARROW_RIGHT = auto()
    ICON_BELL = auto()
    ICON_CHECK = auto()
    ICON_CHEVRON_LEFT = auto()
    ICON_CHEVRON_RIGHT = auto()
    ICON_CLOSE = auto()
    ICON_CONTENT_SAVE = auto()
    ICON_DELETE = auto()
    ICON_DOWNLOAD = auto()
    ICON_EMAIL = auto()
    ICON_FILE = auto()
    ICON_FOLDER = auto()
    ICON_HEART = auto()
    ICON_HOME = auto()
    ICON_INFORMATION = auto()
    ICON_LOCK = auto()
    ICON_MAGNIFY = auto()
    ICON_MENU = auto()
    ICON_MINUS = auto()
    ICON_NULL = auto()
    ICON_PAUSE = auto()
    ICON_PENCIL = auto()
    ICON_PLAY = auto()
    ICON_PLUS = auto()
    ICON_REFRESH = auto()
    ICON_STAR = auto()
    ICON_STOP = auto()
    ICON_UPLOAD = auto()

    @property
    def resource_key(self) -> str:
        """Resource key for this icon (e.g., "content-save")."""
        return self.value

    @classmethod
    def parse(cls, value: Icon | str) -> Icon:
        """Resolve an Icon from a member, member name or resource key.

        Accepts ``Icon.ICON_HOME``, ``"ICON_HOME"``, ``"icon_home"`` and
        ``"home"``.

        Raises:
            IconNotFoundError: If no member matches.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        member = cls.__members__.get(text.upper())
        if member is not None:
            return member
        try:
            return cls(text.lower())
        except ValueError:
            raise IconNotFoundError(value) from None
