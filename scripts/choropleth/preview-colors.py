import logging
import argparse

from thematic_map import config
from thematic_map.gradients import Gradient
from thematic_map.render import render_swatch

# How to run: python preview-colors.py -cmap Sunset -samples 15
parser = argparse.ArgumentParser()
parser.add_argument("-cmap", type=str, help="Colour gradient.", choices=Gradient.labels(), default=config.DEFAULT_GRADIENT)
parser.add_argument("-samples", type=int, help="Number of colours (2-20).", default=10)
args = parser.parse_args()

logging.basicConfig(level=config.get_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

output_path = config.make_dirs()['output'] / f'colors_{args.cmap}.png'
result = render_swatch(args.cmap, args.samples, output_path=output_path)
print(f"saved: {result.path}")
