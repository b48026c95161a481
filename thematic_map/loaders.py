import logging
import zipfile
from pathlib import Path

import geopandas as gpd
import pandas as pd
import requests

from thematic_map import config
from thematic_map.exceptions import MissingColumnsError

logger = logging.getLogger(__name__)


def download(url, path, overwrite=True, timeout=180):
    """Stream `url` to `path`. An existing file is kept when overwrite is False."""
    path = Path(path)
    if path.exists() and not overwrite:
        logger.info(f"Using existing download {path}")
        return path

    logger.info(f"Downloading {url}")
    path.parent.mkdir(parents=True, exist_ok=True)
    r = requests.get(url, stream=True, timeout=timeout)
    r.raise_for_status()
    with open(path, "wb") as f:
        for chunk in r.iter_content(chunk_size=1024 * 1024):
            if chunk:
                f.write(chunk)
    return path


def extract_shapefile(zip_path, shapefile_name, dest_dir):
    """Extract the members of a zip archive belonging to one shapefile (.shp, .shx, .dbf, ...)."""
    dest_dir = Path(dest_dir)
    shp_path = dest_dir / shapefile_name
    if shp_path.exists():
        return shp_path

    stem = Path(shapefile_name).stem
    dest_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(zip_path) as z:
        members = [m for m in z.namelist() if Path(m).name.split(".")[0] == stem]
        if not members:
            raise FileNotFoundError(f"{shapefile_name} not found in {zip_path}")
        for member in members:
            # flatten any folder structure inside the archive
            (dest_dir / Path(member).name).write_bytes(z.read(member))
            logger.debug(f"Extracted {member}")
    return shp_path


def _check_columns(df, required, path):
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise MissingColumnsError(path, missing)


def read_cases(path, sep=config.CASES_SEPARATOR):
    """Read the RIVM daily counts per municipality.

    Returns the counts summed per (date, municipality) and the date the figures were
    last updated (None when the file has no report date column).
    """
    df = pd.read_csv(path, sep=sep, low_memory=False)
    _check_columns(df, config.CASES_COLUMNS, path)

    # Date the figures were updated
    date_of_report = None
    if config.REPORT_DATE_COLUMN in df.columns:
        date_of_report = pd.to_datetime(df[config.REPORT_DATE_COLUMN]).max().date()

    # Select columns of interest and drop NA's
    df = df[config.CASES_COLUMNS].dropna()
    df = df.rename(columns={
        "Date_of_publication": "date",
        "Municipality_name": "NM_MUN",
        "Total_reported": "total_reported",
    })
    df["date"] = pd.to_datetime(df["date"]).dt.normalize()

    # Sum multiple data points for a municipality on a specific date
    df = (
        df.groupby(["date", "NM_MUN"], as_index=False)["total_reported"]
        .sum()
    )
    df["total_reported"] = df["total_reported"].astype(int)
    return df, date_of_report


def read_shapes(path):
    """Read the CBS municipality boundaries, keeping land polygons only."""
    gdf = gpd.read_file(path)
    required = [config.SHAPE_NAME_COLUMN, config.SHAPE_POPULATION_COLUMN, config.SHAPE_WATER_COLUMN]
    _check_columns(gdf, required, path)

    # Filter for land (i.e. not water)
    gdf = gdf[gdf[config.SHAPE_WATER_COLUMN].isin(config.LAND_VALUES)]

    # Select and rename columns
    gdf = gdf[[config.SHAPE_NAME_COLUMN, config.SHAPE_POPULATION_COLUMN, "geometry"]]
    gdf = gdf.rename(columns={config.SHAPE_NAME_COLUMN: "NM_MUN", config.SHAPE_POPULATION_COLUMN: "POP"})
    gdf = gdf.reset_index(drop=True)

    duplicates = gdf.loc[gdf["NM_MUN"].duplicated(), "NM_MUN"].unique().tolist()
    if duplicates:
        logger.warning(f"Municipality names occur more than once: {', '.join(duplicates)}")
    return gdf


def read_interim_cases(path):
    df = pd.read_csv(path, parse_dates=["date"])
    _check_columns(df, ["date", "NM_MUN", "total_reported"], path)
    return df


def read_interim_shapes(path):
    gdf = gpd.read_parquet(path)
    _check_columns(gdf, ["NM_MUN", "POP", "geometry"], path)
    return gdf


def read_report_date(path):
    path = Path(path)
    if not path.exists():
        return None
    return pd.Timestamp(path.read_text().strip()).date()
