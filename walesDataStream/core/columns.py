"""
Column roles, source data types and import filters.

A source file is described by a SourceDataType (which parser reads it) and a
column mapping from abstract SourceColumn roles to the literal headers used
by that particular file.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


class SourceColumn(Enum):
    """Abstract roles a column can play in a source file."""

    AUTH_CODE = "auth_code"
    AUTH_NAME_ENG = "auth_name_eng"
    AUTH_NAME_CYM = "auth_name_cym"
    MEASURE_CODE = "measure_code"
    MEASURE_NAME = "measure_name"
    YEAR = "year"
    VALUE = "value"
    SINGLE_MEASURE_CODE = "single_measure_code"
    SINGLE_MEASURE_NAME = "single_measure_name"


class SourceDataType(Enum):
    """The file layouts the pipeline knows how to read."""

    AUTHORITY_CODE_CSV = "authority_code_csv"
    AUTHORITY_BY_YEAR_CSV = "authority_by_year_csv"
    WELSH_STATS_JSON = "welsh_stats_json"


SourceColumnMapping = Dict[SourceColumn, str]
YearFilter = Tuple[int, int]

ALL_YEARS: YearFilter = (0, 0)


def column_mapping_from_config(cols: Mapping[str, str]) -> SourceColumnMapping:
    """
    Build a column mapping from its configuration form.

    Args:
        cols: Mapping of lowercase role names (e.g. 'auth_code') to headers

    Returns:
        SourceColumnMapping keyed by SourceColumn

    Raises:
        ValueError: if a role name is not a known SourceColumn
    """
    mapping: SourceColumnMapping = {}
    for role, header in cols.items():
        try:
            column = SourceColumn(str(role).lower())
        except ValueError:
            raise ValueError(f"Unknown column role in configuration: {role}")
        mapping[column] = str(header)
    return mapping


def _as_set(values) -> FrozenSet[str]:
    """A single code is one item, not a sequence of characters."""
    if not values:
        return frozenset()
    if isinstance(values, str):
        return frozenset((values,))
    return frozenset(values)


@dataclass(frozen=True)
class ImportFilters:
    """
    Restrictions applied while parsing.

    An empty areas or measures set imports everything for that dimension,
    and a years range of (0, 0) imports every year. Measure codes are
    compared case-insensitively, authority codes as given.
    """

    areas: FrozenSet[str] = field(default_factory=frozenset)
    measures: FrozenSet[str] = field(default_factory=frozenset)
    years: YearFilter = ALL_YEARS

    def __post_init__(self):
        object.__setattr__(self, 'areas', _as_set(self.areas))
        object.__setattr__(
            self, 'measures', frozenset(m.lower() for m in _as_set(self.measures))
        )
        start, end = self.years or ALL_YEARS
        object.__setattr__(self, 'years', (int(start), int(end)))

    @classmethod
    def build(cls,
              areas: Optional[Iterable[str]] = None,
              measures: Optional[Iterable[str]] = None,
              years: Optional[YearFilter] = None) -> 'ImportFilters':
        """Build filters from optional (possibly None) components."""
        return cls(
            areas=_as_set(areas),
            measures=_as_set(measures),
            years=years or ALL_YEARS,
        )

    def accepts_area(self, authority_code: str) -> bool:
        return not self.areas or authority_code in self.areas

    def accepts_measure(self, measure_code: str) -> bool:
        return not self.measures or measure_code.lower() in self.measures

    def accepts_year(self, year: int) -> bool:
        start, end = self.years
        if start == 0 and end == 0:
            return True
        return start <= year <= end
