"""Fit rectangle and band planning for square thumbnails."""

from loguru import logger

from ..common.errors import InvalidThumbnailArgument
from ..common.schemas import BAND_PIXEL_BUDGET, Band, FitRect


def validate_dimensions(source_width: int, source_height: int, size: int) -> None:
    """Raise InvalidThumbnailArgument unless every dimension is positive."""
    if size <= 0:
        raise InvalidThumbnailArgument(f"Thumbnail size must be positive, got {size}")
    if source_width <= 0 or source_height <= 0:
        raise InvalidThumbnailArgument(
            f"Source dimensions must be positive, got {source_width}x{source_height}"
        )


def compute_fit_rect(source_width: int, source_height: int, size: int) -> FitRect:
    """
    Place a source of the given dimensions inside a size x size canvas.

    The longer source side spans the whole canvas; the other side is scaled
    proportionally and centered. Square sources take the height-filling branch.

    Args:
        source_width: Source width in pixels
        source_height: Source height in pixels
        size: Edge length of the square canvas

    Returns:
        The fit rectangle in canvas coordinates

    Raises:
        InvalidThumbnailArgument: If any dimension is not positive
    """
    validate_dimensions(source_width, source_height, size)

    if source_width > source_height:
        width = size
        left = 0
        # Extreme aspect ratios still keep one visible row
        height = max(1, round(source_height * size / source_width))
        top = (size - height) // 2
    else:
        height = size
        top = 0
        width = max(1, round(source_width * size / source_height))
        left = (size - width) // 2

    fit = FitRect(left=left, top=top, width=width, height=height)
    logger.debug(f"Fit {source_width}x{source_height} into {size}px: {fit}")
    return fit


def max_band_height(source_width: int, pixel_budget: int = BAND_PIXEL_BUDGET) -> int:
    """Rows of a source this wide that fit in one band's pixel budget."""
    return max(1, round(pixel_budget / source_width))


def plan_bands(
    source_width: int,
    source_height: int,
    fit: FitRect,
    pixel_budget: int = BAND_PIXEL_BUDGET,
) -> list[Band]:
    """
    Split the source into horizontal bands and map each onto the fit rectangle.

    Destination rows are the linearly scaled band edges, rounded to whole
    pixels. Adjacent bands share their edge row, so the bands tile the fit
    rectangle without gaps or overlaps. A band that rounds to no destination
    rows is dropped; its source rows are still covered by the neighbouring
    bands' source boxes.

    Returns:
        Bands in top-to-bottom order
    """
    step = max_band_height(source_width, pixel_budget)
    scale = fit.height / source_height

    bands: list[Band] = []
    for source_top in range(0, source_height, step):
        source_height_band = min(source_height, source_top + step) - source_top
        dest_top = fit.top + round(source_top * scale)
        dest_bottom = fit.top + round((source_top + source_height_band) * scale)
        if dest_bottom == dest_top:
            continue
        box_top = (dest_top - fit.top) / scale
        box_bottom = (dest_bottom - fit.top) / scale
        bands.append(
            Band(
                source_top=source_top,
                source_height=source_height_band,
                source_box=(0.0, box_top, float(source_width), min(box_bottom, float(source_height))),
                dest_top=dest_top,
                dest_bottom=dest_bottom,
            )
        )

    logger.debug(
        f"Planned {len(bands)} band(s) of up to {step} rows for {source_width}x{source_height}"
    )
    return bands
