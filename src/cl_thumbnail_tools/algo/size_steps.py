"""Piecewise-linear mapping between slider step numbers and thumbnail sizes.

The size control moves in fine steps at small sizes and coarse steps at large
sizes. Each segment is (first step, first size, pixels per step):

    64-256   : 32 px/step, steps 0-6
    256-448  : 48 px/step, steps 6-10
    448-832  : 64 px/step, steps 10-16
    832-     : 96 px/step, steps 16-

Neither direction clamps; callers bound the result with `clamp_size` before
persisting it.
"""

from ..common.schemas import MAX_SIZE, MIN_SIZE

SEGMENTS: tuple[tuple[float, float, float], ...] = (
    (0.0, 64.0, 32.0),
    (6.0, 256.0, 48.0),
    (10.0, 448.0, 64.0),
    (16.0, 832.0, 96.0),
)


def step_number_to_size(step_number: float) -> float:
    """Convert a slider step number to a (fractional) thumbnail size."""
    first_step, first_size, slope = SEGMENTS[0]
    for next_step, next_size, next_slope in SEGMENTS[1:]:
        if step_number < next_step:
            break
        first_step, first_size, slope = next_step, next_size, next_slope
    return first_size + (step_number - first_step) * slope


def size_to_step_number(size: float) -> float:
    """Convert a thumbnail size to its slider step number.

    Exact inverse of `step_number_to_size`; the segment is selected by the
    size breakpoints.
    """
    first_step, first_size, slope = SEGMENTS[0]
    for next_step, next_size, next_slope in SEGMENTS[1:]:
        if size < next_size:
            break
        first_step, first_size, slope = next_step, next_size, next_slope
    return (size - first_size) / slope + first_step


def clamp_size(size: float) -> int:
    """Round a size and bound it to [MIN_SIZE, MAX_SIZE]."""
    return max(MIN_SIZE, min(MAX_SIZE, round(size)))


def min_step_number() -> float:
    return size_to_step_number(MIN_SIZE)


def max_step_number() -> float:
    return size_to_step_number(MAX_SIZE)
