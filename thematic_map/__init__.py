"""Choropleth maps of COVID-19 cases per 100,000 inhabitants per municipality."""

from thematic_map.dates import DateRange, DateStatus
from thematic_map.gradients import Gradient
from thematic_map.pipeline import SourceData, ThematicMap

__all__ = ["DateRange", "DateStatus", "Gradient", "SourceData", "ThematicMap"]
