import logging
from dataclasses import dataclass, field
from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import pandas as pd
from matplotlib.colors import to_hex

from thematic_map import config
from thematic_map.colors import colorize, preview_colors
from thematic_map.exceptions import DegenerateInputError

logger = logging.getLogger(__name__)


@dataclass
class RenderedMap:
    """A rendered figure together with the colour assigned to every polygon."""

    fig: plt.Figure
    ax: plt.Axes
    colors: list = field(default_factory=list)
    path: Path = None


def _new_map(title, figsize=config.FIGSIZE):
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    return fig, ax


def _plot_polygons(ax, gdf, colors):
    gdf.plot(ax=ax, color=list(colors), edgecolor=config.EDGE_COLOR, linewidth=config.EDGE_WIDTH)


def _plot_missing(ax, gdf):
    gdf.plot(ax=ax, color=config.MISSING_COLOR, edgecolor=config.EDGE_COLOR, linewidth=config.EDGE_WIDTH)


def _save(fig, output_path, keep_open):
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=config.DPI)
        logger.info(f"Saved map to {output_path}")
    if not keep_open:
        plt.close(fig)
    return output_path


def render_choropleth(joined, gradient, title=None, output_path=None, note=None, keep_open=False):
    """Render a choropleth of the 'per_100k' column.

    Parameters
    ----------
    joined : GeoDataFrame with a 'geometry' and a 'per_100k' column, NaN marks missing data
    gradient : Gradient or gradient label
    title : str, figure title (the report date)
    output_path : str or Path, PNG to write (overwritten), nothing is written if None
    note : str, optional small print below the map
    keep_open : bool, leave the matplotlib figure open for further composition

    Returns
    -------
    RenderedMap, `colors` lists one hex colour per row of `joined`, in row order
    """
    if len(joined) == 0:
        raise DegenerateInputError("Cannot render a map without municipalities")

    # Partition into municipalities with and without data
    missing = joined["per_100k"].isna()
    present = joined.loc[~missing]

    # Colours are computed over all present rates at once
    colors = pd.Series(to_hex(config.MISSING_COLOR, keep_alpha=True), index=joined.index, dtype=object)
    if len(present):
        colors.loc[~missing] = [to_hex(c, keep_alpha=True) for c in colorize(present["per_100k"].to_numpy(), gradient)]
    else:
        logger.warning(f"No case counts available for any municipality ({title})")

    fig, ax = _new_map(title)
    if len(present):
        _plot_polygons(ax, present, colors.loc[~missing])
    if missing.any():
        logger.info(f"{int(missing.sum())} of {len(joined)} municipalities without data")
        _plot_missing(ax, joined.loc[missing])
    if note:
        fig.text(0.01, 0.01, note, fontsize=6, color="grey")

    path = _save(fig, output_path, keep_open)
    return RenderedMap(fig=fig, ax=ax, colors=colors.tolist(), path=path)


def render_no_data(shapes, date_range, output_path=None, keep_open=False):
    """Placeholder map asking for a date inside the available range."""
    if len(shapes) == 0:
        raise DegenerateInputError("Cannot render a map without municipalities")

    title = f"Select a date between {date_range.first} and {date_range.last}"
    fig, ax = _new_map(title)
    shapes.plot(ax=ax, color=config.NO_DATA_COLOR, edgecolor=config.EDGE_COLOR, linewidth=config.EDGE_WIDTH)

    path = _save(fig, output_path, keep_open)
    colors = [to_hex(config.NO_DATA_COLOR, keep_alpha=True)] * len(shapes)
    return RenderedMap(fig=fig, ax=ax, colors=colors, path=path)


def render_swatch(gradient, samples=10, output_path=None, keep_open=False):
    """Strip of `samples` evenly spaced colours of a gradient."""
    colors = [to_hex(c, keep_alpha=True) for c in preview_colors(gradient, samples)]

    fig, ax = plt.subplots(figsize=(0.5 * samples, 0.6))
    for i, color in enumerate(colors):
        ax.add_patch(mpatches.Rectangle((i, 0), 1, 1, facecolor=color, edgecolor="white"))
    ax.set_xlim(0, samples)
    ax.set_ylim(0, 1)
    ax.set_axis_off()

    path = _save(fig, output_path, keep_open)
    return RenderedMap(fig=fig, ax=ax, colors=colors, path=path)
