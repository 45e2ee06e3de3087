"""Protocols for the collaborators a ThumbnailRenderer depends on."""

from typing import Protocol, runtime_checkable

from PIL import Image

from .schemas import ThumbnailSettings


@runtime_checkable
class UserConfigStore(Protocol):
    """Read access to the user's configuration.

    Storage and persistence are owned by the application; only the current
    settings are needed here.
    """

    @property
    def config(self) -> ThumbnailSettings: ...


@runtime_checkable
class ImageRenderer(Protocol):
    """Decodes stored images into in-memory bitmaps.

    Implementations raise whatever their storage raises when an image cannot
    be read; callers propagate those errors unchanged.
    """

    async def render(self, handle: object) -> Image.Image:
        """Decode the image identified by an opaque handle.

        Returns:
            A new image owned by the caller
        """
        ...

    async def render_snapshot(self, snapshot: object) -> Image.Image:
        """Decode a point-in-time snapshot of an image."""
        ...
