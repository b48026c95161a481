# pylint: disable=redefined-outer-name
import matplotlib

matplotlib.use("Agg")

import geopandas as gpd
import matplotlib.pyplot as plt
import pandas as pd
import pytest
from shapely.geometry import box

from thematic_map.pipeline import SourceData


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def working_root(tmp_path, monkeypatch):
    monkeypatch.setenv("THEMATIC_MAP_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture
def shapes():
    return gpd.GeoDataFrame(
        {
            "NM_MUN": ["Amsterdam", "Bergen", "Culemborg"],
            "POP": [100, 200, 400],
        },
        geometry=[box(0, 0, 1, 1), box(1, 0, 2, 1), box(2, 0, 3, 1)],
    )


@pytest.fixture
def cases():
    return pd.DataFrame(
        {
            "date": pd.to_datetime(["2020-03-01", "2020-03-01", "2020-03-02", "2020-03-02"]),
            "NM_MUN": ["Amsterdam", "Culemborg", "Amsterdam", "Bergen"],
            "total_reported": [50, 100, 7, 3],
        }
    )


@pytest.fixture
def source(cases, shapes):
    return SourceData.from_frames(cases, shapes)
