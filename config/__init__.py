"""
Configuration module.
"""

from .garden_config import GardenConfig, load_config, save_config
from .render_config import GardenRenderConfig

__all__ = [
    'GardenConfig',
    'load_config',
    'save_config',
    'GardenRenderConfig',
]
