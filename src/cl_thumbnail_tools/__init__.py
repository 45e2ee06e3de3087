"""cl_thumbnail_tools - Square thumbnail rendering and size-step quantization."""

from .algo.compositor import render_thumbnail
from .algo.fit import compute_fit_rect, plan_bands
from .algo.size_steps import (
    clamp_size,
    max_step_number,
    min_step_number,
    size_to_step_number,
    step_number_to_size,
)
from .backend import PillowBackend
from .common.errors import InvalidThumbnailArgument
from .common.protocols import ImageRenderer, UserConfigStore
from .common.schemas import (
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    Band,
    FitRect,
    ThumbnailOptions,
    ThumbnailSettings,
)
from .renderer import ThumbnailRenderer

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "MIN_SIZE",
    "Band",
    "FitRect",
    "ImageRenderer",
    "InvalidThumbnailArgument",
    "PillowBackend",
    "ThumbnailOptions",
    "ThumbnailRenderer",
    "ThumbnailSettings",
    "UserConfigStore",
    "__version__",
    "clamp_size",
    "compute_fit_rect",
    "max_step_number",
    "min_step_number",
    "plan_bands",
    "render_thumbnail",
    "size_to_step_number",
    "step_number_to_size",
]
