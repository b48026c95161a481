import logging
import argparse

from thematic_map import config
from thematic_map.gradients import Gradient
from thematic_map.pipeline import ThematicMap, load_source

# arguments determine the date and colours of the map
# How to run: python render-map.py -date 2020-12-15 -cmap Viridis
parser = argparse.ArgumentParser()
parser.add_argument("-date", type=str, help="Publication date to map (YYYY-MM-DD). Defaults to the latest available date.", default=None)
parser.add_argument("-cmap", type=str, help="Colour gradient.", choices=Gradient.labels(), default=config.DEFAULT_GRADIENT)
parser.add_argument("-output", type=str, help="Output PNG.", default=None)
args = parser.parse_args()

logging.basicConfig(level=config.get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# load the interim datasets (run the scripts in data/conversion first)
source = load_source()

# default to the most recent publication
date = args.date or source.date_range.last

result = ThematicMap(source).render(date, args.cmap, output_path=args.output)
print(f"saved: {result.path}")
