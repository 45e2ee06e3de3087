"""Pillow drawing backend shared by every thumbnail render in the process.

Every drawing call goes through one process-wide lock, the way GDI-style 2D
backends serialize their callers. The compositor never takes the lock
itself; it only keeps each call short by drawing in bands.
"""

import threading
from contextlib import AbstractContextManager

from PIL import Image, ImageDraw

from .common.schemas import Band, Color, FitRect

_BACKEND_LOCK = threading.Lock()

# Modes Pillow resamples with every filter and pastes onto an RGB canvas
_RESAMPLABLE_MODES = frozenset({"L", "RGB", "RGBA"})


class PillowBackend:
    """Thin adapter over Pillow used by the compositor."""

    def __init__(self, lock: AbstractContextManager[object] | None = None):
        self.lock: AbstractContextManager[object] = lock if lock is not None else _BACKEND_LOCK

    def new_canvas(self, size: int, background: Color) -> Image.Image:
        """Allocate an opaque size x size RGB canvas."""
        return Image.new("RGB", (size, size), background)

    def prepare_source(self, source: Image.Image) -> Image.Image:
        """Return `source` itself, or a converted copy if its mode cannot be resampled smoothly.

        Palette and bilevel images would otherwise be resampled with nearest
        neighbour by Pillow.
        """
        if source.mode in _RESAMPLABLE_MODES:
            return source
        has_alpha = source.mode in ("LA", "PA", "RGBa", "La") or "transparency" in source.info
        with self.lock:
            return source.convert("RGBA" if has_alpha else "RGB")

    def draw_band(
        self,
        canvas: Image.Image,
        source: Image.Image,
        band: Band,
        fit: FitRect,
        resample: Image.Resampling,
    ) -> None:
        """Resample one band of `source` into its rows of the fit rectangle."""
        with self.lock:
            scaled = source.resize(
                (fit.width, band.dest_height),
                resample=resample,
                box=band.source_box,
            )
            mask = scaled if scaled.mode == "RGBA" else None
            canvas.paste(scaled, (fit.left, band.dest_top), mask)

    def draw_outline(self, canvas: Image.Image, fit: FitRect, color: Color) -> None:
        """Draw a 1-pixel rectangle exactly on the fit rectangle's edge."""
        with self.lock:
            ImageDraw.Draw(canvas).rectangle(fit.outline, outline=color, width=1)


default_backend = PillowBackend()
