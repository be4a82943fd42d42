"""
Dataset catalogue.

The catalogue lists the known source files, the parser each needs and their
column mappings. It is built from the 'areas' and 'datasets' sections of the
YAML configuration rather than held as module state.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from ..core.columns import SourceColumnMapping, SourceDataType, column_mapping_from_config
from ..core.errors import NotFoundError


@dataclass(frozen=True)
class DatasetSource:
    """One importable file: its code, display name, file name, parser and columns."""

    code: str
    name: str
    file: str
    parser: SourceDataType
    cols: SourceColumnMapping

    @classmethod
    def from_config(cls, entry: Dict[str, Any]) -> 'DatasetSource':
        missing = [key for key in ('code', 'file', 'parser', 'cols') if key not in entry]
        if missing:
            raise ValueError(f"Dataset entry {entry.get('code', '?')} is missing {missing}")
        try:
            parser = SourceDataType(str(entry['parser']).lower())
        except ValueError:
            raise ValueError(f"Dataset {entry['code']}: unknown parser '{entry['parser']}'")
        return cls(
            code=str(entry['code']),
            name=str(entry.get('name', entry['code'])),
            file=str(entry['file']),
            parser=parser,
            cols=column_mapping_from_config(entry['cols']),
        )


class DatasetCatalogue:
    """The authority code table plus every dataset that can be imported."""

    def __init__(self, areas_source: DatasetSource, datasets: Iterable[DatasetSource]):
        self.areas_source = areas_source
        self._datasets: Dict[str, DatasetSource] = {}
        for dataset in datasets:
            self._datasets[dataset.code] = dataset

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'DatasetCatalogue':
        if 'areas' not in config:
            raise ValueError("No areas configuration found")
        areas_source = DatasetSource.from_config(config['areas'])
        datasets = [DatasetSource.from_config(entry) for entry in config.get('datasets') or []]
        return cls(areas_source, datasets)

    def codes(self) -> List[str]:
        return list(self._datasets)

    def get(self, code: str) -> DatasetSource:
        try:
            return self._datasets[code]
        except KeyError:
            raise NotFoundError(f"No dataset matches key: {code}")

    def select(self, codes: Iterable[str] = None) -> List[DatasetSource]:
        """
        Return the datasets for the given codes, in the order given.

        None, an empty list or 'all' (any case) selects every dataset.
        """
        codes = list(codes or [])
        if not codes or any(c.lower() == 'all' for c in codes):
            return list(self._datasets.values())
        return [self.get(code) for code in codes]

    def __len__(self) -> int:
        return len(self._datasets)
