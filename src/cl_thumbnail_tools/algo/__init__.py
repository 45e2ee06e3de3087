"""Thumbnail algorithms: size quantization, fitting and compositing."""

from .compositor import render_thumbnail
from .fit import compute_fit_rect, plan_bands
from .size_steps import clamp_size, size_to_step_number, step_number_to_size

__all__ = [
    "clamp_size",
    "compute_fit_rect",
    "plan_bands",
    "render_thumbnail",
    "size_to_step_number",
    "step_number_to_size",
]
