"""Data model exports."""

from .measure import Measure
from .area import Area
from .areas import Areas

__all__ = ['Measure', 'Area', 'Areas']
