"""Output module exports."""

from .json_output import areas_to_dict, areas_to_json
from .text_output import render_area, render_areas, render_measure

__all__ = ['areas_to_dict', 'areas_to_json', 'render_area', 'render_areas', 'render_measure']
