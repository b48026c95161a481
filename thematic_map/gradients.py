from enum import Enum

import matplotlib
from matplotlib.colors import LinearSegmentedColormap

from thematic_map.exceptions import UnknownGradientError

# Paul Tol's "sunset" scheme, matplotlib does not ship it
SUNSET = [
    "#364B9A", "#4A7BB7", "#6EA6CD", "#98CAE1", "#C2E4EF", "#EAECCC",
    "#FEDA8B", "#FDB366", "#F67E4B", "#DD3D2D", "#A50026",
]


class Gradient(Enum):
    """Supported colour gradients, valued by their matplotlib colormap name."""

    HEAT = "YlOrRd"
    VIRIDIS = "viridis"
    INFERNO = "inferno"
    MAGMA = "magma"
    SUNSET = "sunset"
    COOLWARM = "coolwarm"
    SPECTRAL = "Spectral"
    REDBLUE = "RdBu"
    REDS = "Reds"
    BLUES = "Blues"
    GREENS = "Greens"
    PURPLES = "Purples"
    ORANGES = "Oranges"

    @property
    def label(self):
        return _LABELS[self]

    @property
    def cmap(self):
        if self is Gradient.SUNSET:
            return LinearSegmentedColormap.from_list("sunset", SUNSET)
        return matplotlib.colormaps[self.value]

    @classmethod
    def from_name(cls, name):
        """Look up a gradient by its label ("Heat", "RedBlue", ...), ignoring case."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for gradient, label in _LABELS.items():
            if label.lower() == key:
                return gradient
        raise UnknownGradientError(name, cls.labels())

    @classmethod
    def labels(cls):
        return [gradient.label for gradient in cls]


_LABELS = {
    Gradient.HEAT: "Heat",
    Gradient.VIRIDIS: "Viridis",
    Gradient.INFERNO: "Inferno",
    Gradient.MAGMA: "Magma",
    Gradient.SUNSET: "Sunset",
    Gradient.COOLWARM: "CoolWarm",
    Gradient.SPECTRAL: "Spectral",
    Gradient.REDBLUE: "RedBlue",
    Gradient.REDS: "Reds",
    Gradient.BLUES: "Blues",
    Gradient.GREENS: "Greens",
    Gradient.PURPLES: "Purples",
    Gradient.ORANGES: "Oranges",
}
