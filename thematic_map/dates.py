from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

import pandas as pd


class DateStatus(Enum):
    VALID = "valid"
    OUT_OF_RANGE = "out-of-range"


def to_date(value):
    """Convert a string, datetime or pandas Timestamp to a datetime.date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return pd.Timestamp(value).date()


@dataclass(frozen=True)
class DateRange:
    """Publication dates for which case counts are available (both ends included)."""

    first: date
    last: date

    def __post_init__(self):
        object.__setattr__(self, "first", to_date(self.first))
        object.__setattr__(self, "last", to_date(self.last))
        if self.first > self.last:
            raise ValueError(f"Empty date range: {self.first} > {self.last}")

    @classmethod
    def from_series(cls, dates):
        return cls(dates.min(), dates.max())

    def check(self, value):
        if self.first <= to_date(value) <= self.last:
            return DateStatus.VALID
        return DateStatus.OUT_OF_RANGE
