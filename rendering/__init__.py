"""
Rendering module: the drawing-surface contract and its backends.
Uses Cairo for resolution-independent output.
"""

from config.render_config import GardenRenderConfig
from .surface import DrawingSurface, RecordingSurface, Segment
from .cairo_surface import CairoSurface
from .tk_surface import TkCanvasSurface
from .exporters import export_garden_data, load_garden_data
from .garden_renderer import GardenRenderer
from .utils import hex_to_rgba, rgba_to_hex
