"""Test configuration and fixtures for cl_thumbnail_tools.

This module provides:
- Source image factories (gradients, solid colors) built in memory
- Fake collaborators for ThumbnailRenderer (config store, image renderer)
"""

from collections.abc import Callable

import numpy as np
import pytest
from PIL import Image

from cl_thumbnail_tools import ThumbnailSettings

ImageFactory = Callable[[int, int], Image.Image]


# ============================================================================
# Source Images
# ============================================================================


@pytest.fixture
def gradient_image() -> ImageFactory:
    """Build an RGB image with distinct horizontal and vertical gradients.

    Every row differs from its neighbours, so misplaced or missing bands show
    up as pixel differences.
    """

    def _make(width: int, height: int) -> Image.Image:
        xs = np.linspace(0, 255, num=max(width, 1), dtype=np.float64)[:width]
        ys = np.linspace(0, 255, num=max(height, 1), dtype=np.float64)[:height]
        red = np.tile(xs, (height, 1))
        green = np.tile(ys[:, None], (1, width))
        blue = (red + green) / 2
        pixels = np.stack([red, green, blue], axis=-1).astype(np.uint8)
        return Image.fromarray(pixels)

    return _make


@pytest.fixture
def solid_image() -> Callable[..., Image.Image]:
    """Build a single-color image."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, ...] = (200, 40, 40),
        mode: str = "RGB",
    ) -> Image.Image:
        return Image.new(mode, (width, height), color)

    return _make


# ============================================================================
# Fake Collaborators
# ============================================================================


class FakeConfigStore:
    """In-memory user config store."""

    def __init__(self, thumbnail_size: int = 128):
        self._config: ThumbnailSettings = ThumbnailSettings(thumbnail_size=thumbnail_size)

    @property
    def config(self) -> ThumbnailSettings:
        return self._config


class FakeImageRenderer:
    """Decodes images from a dict keyed by handle; snapshots are (handle, version) tuples."""

    def __init__(self, images: dict[object, Image.Image]):
        self.images: dict[object, Image.Image] = images
        self.requested: list[object] = []

    async def render(self, handle: object) -> Image.Image:
        self.requested.append(handle)
        if handle not in self.images:
            raise KeyError(f"No image for handle {handle!r}")
        return self.images[handle].copy()

    async def render_snapshot(self, snapshot: object) -> Image.Image:
        handle, _version = snapshot  # type: ignore[misc]
        return await self.render(handle)


@pytest.fixture
def config_store() -> FakeConfigStore:
    return FakeConfigStore(thumbnail_size=96)


@pytest.fixture
def image_renderer(gradient_image: ImageFactory) -> FakeImageRenderer:
    return FakeImageRenderer(
        {
            "landscape": gradient_image(800, 400),
            "portrait": gradient_image(300, 600),
            "square": gradient_image(500, 500),
        }
    )
