"""
Data exporters to convert recorded drawing calls into renderer-friendly format.
"""

import json
from pathlib import Path
from typing import Any, Dict

from .surface import RecordingSurface


def export_garden_data(surface: RecordingSurface, output_path: str) -> Dict[str, Any]:
    """
    Export the segments stroked on a recording surface to JSON.

    Format:
    {
        "width": int,
        "height": int,
        "segments": [
            {"start": [x, y], "end": [x, y], "color": "#RRGGBB"}
        ]
    }
    """
    data = {
        "width": surface.width,
        "height": surface.height,
        "segments": [segment.to_dict() for segment in surface.segments]
    }

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    return data


def load_garden_data(path: str) -> Dict[str, Any]:
    if not Path(path).exists():
        raise FileNotFoundError(
            f"Garden render data not found at {path}. "
            f"Run main_garden.py --mode export first."
        )
    with open(path, 'r') as f:
        return json.load(f)
