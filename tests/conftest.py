"""
Pytest configuration and shared fixtures for mdi-icons tests.

This module provides common fixtures and utilities used across all test modules.
"""

import io

import pytest
from loguru import logger

from mdi_icons.config import settings
from mdi_icons.icons import Icon
from mdi_icons.logging import PACKAGE_NAME
from mdi_icons.resources import InMemoryResourceProvider, get_icon_resource_name


HOME_PATH_DATA = "M10,20V14H14V20H19V12H22L12,3L2,12H5V20H10Z"
CHECK_PATH_DATA = "M21,7L9,19L3.5,13.5L4.91,12.09L9,16.17L19.59,5.59L21,7Z"


def make_svg(body: str, xmlns: str = ' xmlns="http://www.w3.org/2000/svg"') -> str:
    """Wrap SVG body markup in a root svg element."""
    return f'<svg{xmlns} viewBox="0 0 24 24">{body}</svg>'


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temporary file and reset to defaults."""
    settings_file = tmp_path / "config" / "settings.json"
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_file)
    monkeypatch.setattr(settings.settings_store, "values", dict(settings.DEFAULT_SETTINGS))
    return settings_file


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added during a test and silence the library again."""
    yield
    logger.remove()
    logger.disable(PACKAGE_NAME)


# ==============================================================================
# Resource Fixtures
# ==============================================================================


@pytest.fixture
def memory_provider() -> InMemoryResourceProvider:
    """
    Fixture providing an in-memory icon set with two valid icons.

    Returns:
        Provider containing the home and check icons only.
    """
    return InMemoryResourceProvider(
        {
            get_icon_resource_name(Icon.ICON_HOME.value): make_svg(
                f'<path d="{HOME_PATH_DATA}" />'
            ),
            get_icon_resource_name(Icon.ICON_CHECK.value): make_svg(
                f'<path d="{CHECK_PATH_DATA}" />'
            ),
        }
    )


class TrackingStream(io.BytesIO):
    """BytesIO that records whether it was closed."""

    def __init__(self, content: bytes):
        super().__init__(content)
        self.was_closed = False

    def close(self) -> None:
        self.was_closed = True
        super().close()


class TrackingResourceProvider(InMemoryResourceProvider):
    """In-memory provider that keeps every stream it hands out."""

    def __init__(self, resources=None):
        super().__init__(resources)
        self.opened: list[TrackingStream] = []

    def open_resource(self, name):
        content = self.resources.get(name)
        if content is None:
            return None
        stream = TrackingStream(content)
        self.opened.append(stream)
        return stream


@pytest.fixture
def tracking_provider() -> TrackingResourceProvider:
    """Fixture providing a provider whose streams can be checked for closure."""
    return TrackingResourceProvider()


@pytest.fixture
def svg_document():
    """Fixture providing the make_svg helper."""
    return make_svg
