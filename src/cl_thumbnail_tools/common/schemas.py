"""Pydantic schemas for thumbnail geometry, options and settings."""

from typing import ClassVar

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_SIZE = 64
DEFAULT_SIZE = 128
MAX_SIZE = 1024

BAND_PIXEL_BUDGET = 3_000_000
YIELD_SECONDS = 0.001

Color = tuple[int, int, int]

# ─────────────────────────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────────────────────────


class FitRect(BaseModel):
    """Centered, aspect-preserving region of the square canvas holding the image."""

    model_config = ConfigDict(frozen=True)

    left: int = Field(..., ge=0)
    top: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def outline(self) -> tuple[int, int, int, int]:
        """Inclusive corner coordinates of the 1-pixel border."""
        return (self.left, self.top, self.right - 1, self.bottom - 1)


class Band(BaseModel):
    """One horizontal slice of the source drawn in a single backend call.

    `source_top`/`source_height` are the integer source rows the band was cut
    from. `source_box` is the exact (fractional) source region that maps onto
    destination rows `dest_top` to `dest_bottom`, so resampling band by band
    reproduces a single-pass resample.
    """

    model_config = ConfigDict(frozen=True)

    source_top: int = Field(..., ge=0)
    source_height: int = Field(..., gt=0)
    source_box: tuple[float, float, float, float]
    dest_top: int = Field(..., ge=0)
    dest_bottom: int = Field(..., ge=0)

    @property
    def dest_height(self) -> int:
        return self.dest_bottom - self.dest_top


# ─────────────────────────────────────────────────────────────
# Rendering options
# ─────────────────────────────────────────────────────────────


class ThumbnailOptions(BaseModel):
    """Knobs for the compositor.

    Attributes:
        band_pixel_budget: Source pixels drawn per backend call
        yield_seconds: Pause between bands (0 disables pausing)
        resample: Pillow resampling filter; only smooth filters are accepted
        background_color: Opaque canvas color outside the fit rectangle
        border_color: Color of the 1-pixel border around the image
    """

    ALLOWED_RESAMPLE: ClassVar[frozenset[Image.Resampling]] = frozenset(
        {
            Image.Resampling.BICUBIC,
            Image.Resampling.LANCZOS,
            Image.Resampling.HAMMING,
        }
    )

    model_config = ConfigDict(frozen=True)

    band_pixel_budget: int = Field(default=BAND_PIXEL_BUDGET, gt=0)
    yield_seconds: float = Field(default=YIELD_SECONDS, ge=0)
    resample: Image.Resampling = Image.Resampling.BICUBIC
    background_color: Color = (255, 255, 255)
    border_color: Color = (0, 0, 0)

    @field_validator("resample")
    @classmethod
    def validate_resample_quality(cls, v: Image.Resampling) -> Image.Resampling:
        """Reject nearest, box and bilinear filters."""
        if v not in cls.ALLOWED_RESAMPLE:
            raise ValueError(
                f"Resampling filter {v.name} is too coarse for thumbnails; "
                "use BICUBIC, LANCZOS or HAMMING"
            )
        return v

    @field_validator("background_color", "border_color")
    @classmethod
    def validate_color_channels(cls, v: Color) -> Color:
        if any(channel < 0 or channel > 255 for channel in v):
            raise ValueError(f"Color channels must be in [0, 255], got {v}")
        return v


# ─────────────────────────────────────────────────────────────
# User preference
# ─────────────────────────────────────────────────────────────


class ThumbnailSettings(BaseModel):
    """Persisted thumbnail preference, as read from the user's config store."""

    thumbnail_size: int = Field(
        default=DEFAULT_SIZE,
        ge=MIN_SIZE,
        le=MAX_SIZE,
        description="Edge length of rendered thumbnails in pixels",
    )
