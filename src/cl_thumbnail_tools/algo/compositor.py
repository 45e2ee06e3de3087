"""Square thumbnail compositor."""

import time
from collections.abc import Callable
from functools import partial

from loguru import logger
from PIL import Image

from ..backend import PillowBackend, default_backend
from ..common.schemas import ThumbnailOptions
from ..utils.profiling import timed
from .fit import compute_fit_rect, plan_bands

Pause = Callable[[], None]


def _no_pause() -> None:
    return None


def default_pause(options: ThumbnailOptions) -> Pause:
    """Sleep for `options.yield_seconds` between bands, or not at all when it is 0."""
    if options.yield_seconds <= 0:
        return _no_pause
    return partial(time.sleep, options.yield_seconds)


@timed
def render_thumbnail(
    source: Image.Image,
    size: int,
    *,
    options: ThumbnailOptions | None = None,
    pause: Pause | None = None,
    backend: PillowBackend | None = None,
) -> Image.Image:
    """
    Render `source` into a new size x size thumbnail.

    The whole source is scaled to fit (never cropped), centered on an opaque
    canvas and outlined with a 1-pixel border. Scaling is done in horizontal
    bands with `pause()` called between them, so other renders waiting on the
    shared backend get a turn. The output does not depend on the pauses.

    Args:
        source: Decoded source image; it is only read
        size: Edge length of the thumbnail in pixels
        options: Rendering options (defaults to ThumbnailOptions())
        pause: Called between bands (defaults to a short sleep)
        backend: Drawing backend (defaults to the process-wide Pillow backend)

    Returns:
        A newly allocated RGB image of exactly size x size pixels

    Raises:
        InvalidThumbnailArgument: If size or a source dimension is not positive
    """
    options = options or ThumbnailOptions()
    backend = backend or default_backend
    pause = pause or default_pause(options)

    source_width, source_height = source.size

    fit = compute_fit_rect(source_width, source_height, size)
    bands = plan_bands(source_width, source_height, fit, options.band_pixel_budget)

    drawable = backend.prepare_source(source)
    canvas = backend.new_canvas(size, options.background_color)

    for index, band in enumerate(bands):
        if index:
            pause()
        backend.draw_band(canvas, drawable, band, fit, options.resample)

    # Drawn last so image content never covers it
    backend.draw_outline(canvas, fit, options.border_color)

    logger.debug(f"Rendered {size}px thumbnail of {source_width}x{source_height} in {len(bands)} band(s)")
    return canvas
