"""Embedded icon resource access.

Icon SVG files ship inside the package under ``mdi_icons/svg``. Lookups go
through a :class:`ResourceProvider` so the resolver can run against the
packaged files, a directory on disk, or an in-memory set of resources.

Resource names are slash-separated and start with the namespace:

    mdi_icons/svg/account-multiple-outline.svg
"""

from __future__ import annotations

import importlib.resources
import io
from pathlib import Path
from typing import BinaryIO, Mapping, Protocol, runtime_checkable

from mdi_icons.logging import LoggerFactory


RESOURCE_NAMESPACE = "mdi_icons"
RESOURCE_SUBDIR = "svg"
RESOURCE_SUFFIX = ".svg"

log = LoggerFactory.for_resources()


def get_icon_resource_name(icon_name: str) -> str:
    """Build the full resource name for a formatted icon name.

    Args:
        icon_name: Formatted icon name (e.g., "content-save").

    Returns:
        e.g. "mdi_icons/svg/content-save.svg"
    """
    return f"{RESOURCE_NAMESPACE}/{RESOURCE_SUBDIR}/{icon_name}{RESOURCE_SUFFIX}"


@runtime_checkable
class ResourceProvider(Protocol):
    """Capability interface: resource name -> byte stream."""

    def open_resource(self, name: str) -> BinaryIO | None:
        """Open a resource for reading, or return None if it doesn't exist."""
        ...

    def list_resources(self) -> list[str]:
        """Return the names of all available resources, sorted."""
        ...


class PackageResourceProvider:
    """Reads resources bundled inside installed packages.

    The first segment of a resource name is the package anchor passed to
    ``importlib.resources.files``; the rest is the path inside it.
    """

    def __init__(self, namespace: str = RESOURCE_NAMESPACE):
        self.namespace = namespace

    def _traversable(self, name: str):
        package, _, relative = name.partition("/")
        if not relative:
            return None
        try:
            node = importlib.resources.files(package)
        except ModuleNotFoundError:
            return None
        for part in relative.split("/"):
            node = node.joinpath(part)
        return node

    def open_resource(self, name: str) -> BinaryIO | None:
        node = self._traversable(name)
        if node is None or not node.is_file():
            log.trace(f"Resource missing: {name}")
            return None
        log.trace(f"Opening resource {name}")
        return node.open("rb")

    def list_resources(self) -> list[str]:
        root = importlib.resources.files(self.namespace).joinpath(RESOURCE_SUBDIR)
        return sorted(
            f"{self.namespace}/{RESOURCE_SUBDIR}/{item.name}"
            for item in root.iterdir()
            if item.is_file() and item.name.endswith(RESOURCE_SUFFIX)
        )


class DirectoryResourceProvider:
    """Reads resources from a directory laid out like the package.

    The namespace segment is dropped, so ``mdi_icons/svg/home.svg`` resolves
    to ``<root>/svg/home.svg``.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _path_for(self, name: str) -> Path:
        _namespace, _, relative = name.partition("/")
        return self.root.joinpath(*relative.split("/"))

    def open_resource(self, name: str) -> BinaryIO | None:
        path = self._path_for(name)
        if not path.is_file():
            log.trace(f"Resource missing: {path}")
            return None
        log.trace(f"Opening resource {path}")
        return path.open("rb")

    def list_resources(self) -> list[str]:
        svg_dir = self.root / RESOURCE_SUBDIR
        if not svg_dir.is_dir():
            return []
        return sorted(
            f"{RESOURCE_NAMESPACE}/{RESOURCE_SUBDIR}/{path.name}"
            for path in svg_dir.glob(f"*{RESOURCE_SUFFIX}")
        )


class InMemoryResourceProvider:
    """Serves resources from a name -> bytes mapping."""

    def __init__(self, resources: Mapping[str, bytes | str] | None = None):
        self.resources: dict[str, bytes] = {}
        for name, content in (resources or {}).items():
            self.add(name, content)

    def add(self, name: str, content: bytes | str) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.resources[name] = content

    def open_resource(self, name: str) -> BinaryIO | None:
        content = self.resources.get(name)
        if content is None:
            return None
        return io.BytesIO(content)

    def list_resources(self) -> list[str]:
        return sorted(self.resources)
