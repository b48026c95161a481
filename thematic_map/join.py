import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def per_100k(total_reported, population, rounded=False):
    """Cases per 100,000 inhabitants.

    Rows with a missing count, or a missing or non-positive population, get NaN.
    """
    total_reported = np.asarray(total_reported, dtype=float)
    population = np.asarray(population, dtype=float)
    # population <= 0 would give inf, treat it as missing instead
    with np.errstate(divide="ignore", invalid="ignore"):
        rate = np.where(population > 0, total_reported * 100_000 / population, np.nan)
    if rounded:
        rate = np.round(rate)
    if rate.ndim == 0:
        return float(rate)
    return rate


def join_cases(shapes, cases, date):
    """Left join the municipality shapes with the case counts of a single date.

    One row is returned per shape, in the order of `shapes`, with the added columns
    'total_reported' and 'per_100k' (NaN where no count is available).
    """
    # Filter on selected date
    cases_date = cases.loc[cases["date"] == pd.Timestamp(date), ["NM_MUN", "total_reported"]]

    # Report case counts that have no matching municipality
    orphans = sorted(set(cases_date["NM_MUN"]) - set(shapes["NM_MUN"]))
    if orphans:
        logger.warning(
            f"Dropping {len(orphans)} case record(s) on {pd.Timestamp(date).date()} "
            f"without matching municipality: {', '.join(orphans)}"
        )

    # Join with municipality shapes (left merge keeps the order of the shapes)
    joined = shapes.merge(cases_date, on="NM_MUN", how="left", validate="many_to_one")
    joined.index = shapes.index

    # Report invalid populations
    invalid = joined.loc[~(joined["POP"] > 0), "NM_MUN"].tolist()
    if invalid:
        logger.warning(f"Treating {len(invalid)} municipalities with invalid population as missing: {', '.join(invalid)}")

    # Add column (total reported per 100,000 inhabitants)
    joined["per_100k"] = per_100k(joined["total_reported"], joined["POP"])
    assert not np.isinf(joined["per_100k"]).any()
    return joined
