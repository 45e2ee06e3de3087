"""Common module - protocols, schemas, and errors."""

from .errors import InvalidThumbnailArgument
from .protocols import ImageRenderer, UserConfigStore
from .schemas import (
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    Band,
    FitRect,
    ThumbnailOptions,
    ThumbnailSettings,
)

__all__ = [
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "MIN_SIZE",
    "Band",
    "FitRect",
    "ImageRenderer",
    "InvalidThumbnailArgument",
    "ThumbnailOptions",
    "ThumbnailSettings",
    "UserConfigStore",
]
