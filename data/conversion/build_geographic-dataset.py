import logging
import shapely

from thematic_map import config
from thematic_map.loaders import download, extract_shapefile, read_shapes

logging.basicConfig(level=config.get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("build_geographic-dataset")

dirs = config.make_dirs()


# Fetch the municipality shapefiles and demographics
# >>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>>

# Download the district and neighbourhood map by CBS (only once, it is large)
path_zipfile = download(config.SHAPE_URL, dirs['downloads'] / config.SHAPE_URL.split('/')[-1], overwrite=False)

# Extract the municipality layer
path_shapefile = extract_shapefile(path_zipfile, config.SHAPEFILE_NAME, dirs['shapefiles'])

# Load geodata, land only, with the number of inhabitants
gdf = read_shapes(path_shapefile)


# Check population
# >>>>>>>>>>>>>>>>

# CBS uses negative numbers as "secret"/"unknown" markers
invalid = gdf[~(gdf['POP'] > 0)]
if len(invalid):
    logger.warning(f"{len(invalid)} municipalities without a valid number of inhabitants: {', '.join(invalid['NM_MUN'])}")


# Save result
# >>>>>>>>>>>

# To avoid plotting issues with self-intersecting rings
gdf["geometry"] = gdf.geometry.apply(shapely.make_valid)

# Save to a GeoParquet
gdf.to_parquet(dirs['interim'] / config.GEOGRAPHY_FILENAME, compression='brotli')
logger.info(f"Saved {len(gdf)} municipalities to {dirs['interim'] / config.GEOGRAPHY_FILENAME}")
