"""Unit tests for joining case counts with municipality shapes"""
import logging
from datetime import date

import geopandas as gpd
import numpy as np
import pandas as pd
import pytest
from shapely.geometry import box

from thematic_map.join import join_cases, per_100k


def test_per_100k():
    assert per_100k(200, 400) == 50000.0


def test_per_100k_missing_count():
    assert np.isnan(per_100k(np.nan, 400))


@pytest.mark.parametrize("population", [0, -99999999, np.nan])
def test_per_100k_invalid_population(population):
    rate = per_100k(10, population)
    assert np.isnan(rate)


def test_per_100k_rounded():
    assert list(per_100k([1, 2], [3, 3], rounded=True)) == [33333.0, 66667.0]


def test_left_join():
    shapes = gpd.GeoDataFrame({"NM_MUN": ["A", "B"], "POP": [100, 200]}, geometry=[box(0, 0, 1, 1), box(1, 0, 2, 1)])
    cases = pd.DataFrame({"date": pd.to_datetime(["2020-05-01"]), "NM_MUN": ["A"], "total_reported": [50]})

    joined = join_cases(shapes, cases, date(2020, 5, 1))

    assert joined["per_100k"].iloc[0] == 50000.0
    assert np.isnan(joined["per_100k"].iloc[1])


def test_join_filters_on_date(shapes, cases):
    joined = join_cases(shapes, cases, date(2020, 3, 2))

    assert joined["total_reported"].iloc[0] == 7
    assert joined["total_reported"].iloc[1] == 3
    assert np.isnan(joined["total_reported"].iloc[2])


def test_join_keeps_order_of_shapes(shapes, cases):
    shuffled = shapes.iloc[[2, 0, 1]]

    joined = join_cases(shuffled, cases, date(2020, 3, 1))

    assert len(joined) == len(shuffled)
    assert joined["NM_MUN"].tolist() == ["Culemborg", "Amsterdam", "Bergen"]
    assert joined.index.tolist() == shuffled.index.tolist()
    assert joined.geometry.tolist() == shuffled.geometry.tolist()
    assert joined["per_100k"].iloc[0] == 25000.0


def test_join_without_cases_for_date(shapes, cases):
    joined = join_cases(shapes, cases, date(2021, 1, 1))

    assert len(joined) == 3
    assert joined["per_100k"].isna().all()


def test_join_is_case_sensitive(shapes):
    cases = pd.DataFrame({"date": pd.to_datetime(["2020-03-01"]), "NM_MUN": ["amsterdam"], "total_reported": [1]})

    joined = join_cases(shapes, cases, date(2020, 3, 1))

    assert joined["per_100k"].isna().all()


def test_join_logs_orphan_case_records(shapes, cases, caplog):
    orphan = pd.DataFrame({"date": pd.to_datetime(["2020-03-01"]), "NM_MUN": ["Atlantis"], "total_reported": [5]})
    cases = pd.concat([cases, orphan], ignore_index=True)

    with caplog.at_level(logging.WARNING, logger="thematic_map.join"):
        joined = join_cases(shapes, cases, date(2020, 3, 1))

    assert "Atlantis" in caplog.text
    assert "Atlantis" not in joined["NM_MUN"].tolist()
    assert len(joined) == 3


def test_join_invalid_population_is_missing(shapes, cases, caplog):
    shapes = shapes.assign(POP=[0, 200, 400])

    with caplog.at_level(logging.WARNING, logger="thematic_map.join"):
        joined = join_cases(shapes, cases, date(2020, 3, 1))

    assert np.isnan(joined["per_100k"].iloc[0])
    assert joined["per_100k"].iloc[2] == 25000.0
    assert "Amsterdam" in caplog.text


def test_join_does_not_modify_inputs(shapes, cases):
    shapes_before, cases_before = shapes.copy(), cases.copy()

    join_cases(shapes, cases, date(2020, 3, 1))

    pd.testing.assert_frame_equal(cases, cases_before)
    assert shapes.columns.tolist() == shapes_before.columns.tolist()
