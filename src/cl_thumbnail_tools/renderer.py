"""ThumbnailRenderer - renders thumbnails for stored images."""

import asyncio
from collections.abc import Iterable

from loguru import logger
from PIL import Image

from .algo.compositor import render_thumbnail
from .common.protocols import ImageRenderer, UserConfigStore
from .common.schemas import ThumbnailOptions
from .utils.profiling import timed


class ThumbnailRenderer:
    """Renders thumbnails at the user's preferred size or an explicit one.

    Images are decoded by the injected `ImageRenderer`; compositing runs in a
    worker thread so the event loop stays free while bands are drawn. Each
    decoded source is closed once its thumbnail is done.

    Example:
        renderer = ThumbnailRenderer(config_store, image_renderer)
        thumb = await renderer.render(image_id)
        thumbs = await renderer.render_many(image_ids, size=256)
    """

    def __init__(
        self,
        config_store: UserConfigStore,
        image_renderer: ImageRenderer,
        options: ThumbnailOptions | None = None,
    ):
        """Initialize renderer.

        Args:
            config_store: Source of the persisted thumbnail size
            image_renderer: Decodes images by handle or snapshot
            options: Compositor options shared by every render
        """
        self.config_store: UserConfigStore = config_store
        self.image_renderer: ImageRenderer = image_renderer
        self.options: ThumbnailOptions = options or ThumbnailOptions()

    @property
    def default_size(self) -> int:
        return self.config_store.config.thumbnail_size

    def render_bitmap(self, image: Image.Image, size: int | None = None) -> Image.Image:
        """Render an already decoded image; `size` defaults to the user preference."""
        if size is None:
            size = self.default_size
        return render_thumbnail(image, size, options=self.options)

    async def render(self, handle: object, size: int | None = None) -> Image.Image:
        """Decode the image behind `handle` and render its thumbnail."""
        source = await self.image_renderer.render(handle)
        with source:
            return await asyncio.to_thread(self.render_bitmap, source, size)

    async def render_snapshot(self, snapshot: object, size: int) -> Image.Image:
        """Decode a snapshot and render its thumbnail at `size`."""
        source = await self.image_renderer.render_snapshot(snapshot)
        with source:
            return await asyncio.to_thread(self.render_bitmap, source, size)

    @timed(label="gallery render")
    async def render_many(
        self, handles: Iterable[object], size: int | None = None
    ) -> list[Image.Image]:
        """Render a gallery of thumbnails concurrently.

        Renders interleave band by band on the shared backend. Results keep
        the order of `handles`; the first failure is raised.
        """
        handles = list(handles)
        logger.info(f"Rendering {len(handles)} thumbnail(s)")
        return list(await asyncio.gather(*(self.render(handle, size) for handle in handles)))
