import logging
from dataclasses import dataclass
from datetime import date

import geopandas as gpd
import pandas as pd

from thematic_map import config
from thematic_map.dates import DateRange, DateStatus, to_date
from thematic_map.gradients import Gradient
from thematic_map.join import join_cases
from thematic_map.loaders import read_interim_cases, read_interim_shapes, read_report_date
from thematic_map.render import render_choropleth, render_no_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceData:
    """Case counts and municipality shapes, loaded once and shared read-only."""

    cases: pd.DataFrame
    shapes: gpd.GeoDataFrame
    date_range: DateRange
    date_of_report: date = None

    @classmethod
    def from_frames(cls, cases, shapes, date_of_report=None):
        return cls(cases, shapes, DateRange.from_series(cases["date"]), date_of_report)


def load_source(cases_path=None, shapes_path=None, report_date_path=None):
    """Load the interim datasets written by the scripts in data/conversion."""
    interim = config.get_dirs()["interim"]
    cases = read_interim_cases(cases_path or interim / config.CASES_FILENAME)
    shapes = read_interim_shapes(shapes_path or interim / config.GEOGRAPHY_FILENAME)
    date_of_report = read_report_date(report_date_path or interim / config.REPORT_DATE_FILENAME)
    source = SourceData.from_frames(cases, shapes, date_of_report)
    logger.info(
        f"Loaded {len(cases)} case records for {len(shapes)} municipalities, "
        f"publication dates {source.date_range.first} to {source.date_range.last}"
    )
    return source


class ThematicMap:
    """Renders one map per request from the same source data."""

    def __init__(self, source, output_path=None):
        self.source = source
        self.output_path = output_path

    def render(self, date, gradient_name=config.DEFAULT_GRADIENT, output_path=None, keep_open=False):
        gradient = Gradient.from_name(gradient_name)
        output_path = output_path or self.output_path or config.get_output_path()
        date = to_date(date)

        if self.source.date_range.check(date) is DateStatus.OUT_OF_RANGE:
            logger.info(f"{date} is outside {self.source.date_range.first} - {self.source.date_range.last}")
            return render_no_data(self.source.shapes, self.source.date_range, output_path, keep_open=keep_open)

        joined = join_cases(self.source.shapes, self.source.cases, date)
        note = None
        if self.source.date_of_report:
            note = f"Source: RIVM, figures of {self.source.date_of_report}"
        return render_choropleth(
            joined, gradient, title=str(date), output_path=output_path, note=note, keep_open=keep_open
        )
