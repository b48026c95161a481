import numpy as np

from thematic_map.exceptions import ColorRangeError, DegenerateInputError
from thematic_map.gradients import Gradient

# returned for every element when all values are equal
CONSTANT_LEVEL = 0.5


def normalize(values):
    """Rescale values to [0, 1] using the min and max of the whole collection.

    Length and order are preserved. A constant collection maps to 0.5 everywhere.
    """
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        raise DegenerateInputError("Cannot normalize an empty collection")
    if not np.isfinite(values).all():
        raise DegenerateInputError("Cannot normalize a collection containing NaN or inf")

    vmin, vmax = values.min(), values.max()
    if vmax == vmin:
        return np.full(values.shape, CONSTANT_LEVEL)
    return (values - vmin) / (vmax - vmin)


def map_color(value, gradient):
    """Look up the RGBA colour of a normalized value in a gradient."""
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ColorRangeError(f"Normalized value {value} is outside [0, 1]")
    cmap = Gradient.from_name(gradient).cmap
    return tuple(float(c) for c in cmap(value))


def colorize(values, gradient):
    """Colours for a collection of present (non-missing) values.

    Normalization is done once over the full collection, so colours keep the same
    relative meaning across the map.
    """
    gradient = Gradient.from_name(gradient)
    return [map_color(level, gradient) for level in normalize(values)]


def preview_colors(gradient, samples=10):
    if not 2 <= samples <= 20:
        raise ValueError(f"samples must be between 2 and 20, got {samples}")
    return colorize(range(1, samples + 1), gradient)
