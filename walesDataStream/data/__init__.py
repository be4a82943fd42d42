"""
Package initialization for data orchestration modules.
"""

from .catalogue import DatasetCatalogue, DatasetSource
from .populator import DataPopulator
from .repository import DataRepository, DatasetLoadResult

__all__ = [
    'DatasetCatalogue',
    'DatasetSource',
    'DataPopulator',
    'DataRepository',
    'DatasetLoadResult'
]
