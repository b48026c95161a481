"""Configuration settings for the thematic map."""

import os
from pathlib import Path

# Sources
# >>>>>>>

DATA_URL = "https://data.rivm.nl/covid-19/COVID-19_aantallen_gemeente_per_dag.csv"
SHAPE_URL = "https://www.cbs.nl/-/media/cbs/dossiers/nederland-regionaal/wijk-en-buurtstatistieken/wijkbuurtkaart_2020_v1.zip"
SHAPEFILE_NAME = "gemeente_2020_v1.shp"

# RIVM publishes semicolon separated files
CASES_SEPARATOR = ";"
CASES_COLUMNS = ["Date_of_publication", "Municipality_name", "Total_reported"]
REPORT_DATE_COLUMN = "Date_of_report"

# CBS attribute names
SHAPE_NAME_COLUMN = "GM_NAAM"
SHAPE_POPULATION_COLUMN = "AANT_INW"
SHAPE_WATER_COLUMN = "H2O"
LAND_VALUES = ("NEE", "no")

# Interim files
CASES_FILENAME = "cases_per_day_mun.csv"
REPORT_DATE_FILENAME = "date_of_report.txt"
GEOGRAPHY_FILENAME = "geographic-dataset.parquet"
OUTPUT_FILENAME = "thematic_map.png"

# Figure
# >>>>>>

# 500 x 600 pixels
FIGSIZE = (5, 6)
DPI = 100
EDGE_COLOR = "#cccccc"
EDGE_WIDTH = 0.3
MISSING_COLOR = "lightgrey"
NO_DATA_COLOR = "white"
DEFAULT_GRADIENT = "Heat"


def get_root():
    """Get the working root holding data/, downloads/, shapefiles/ and output/."""
    return Path(os.environ.get("THEMATIC_MAP_ROOT", os.getcwd()))


def get_dirs():
    root = get_root()
    return dict(
        data=root / "data",
        interim=root / "data" / "interim",
        downloads=root / "downloads",
        shapefiles=root / "shapefiles",
        output=root / "output",
    )


def make_dirs():
    """Create the working directories if they do not exist yet."""
    dirs = get_dirs()
    for path in dirs.values():
        path.mkdir(parents=True, exist_ok=True)
    return dirs


def get_output_path():
    return get_dirs()["output"] / OUTPUT_FILENAME


def get_log_level():
    return os.environ.get("THEMATIC_MAP_LOG_LEVEL", "INFO").upper()
