"""
Measure: a labelled series of yearly values for one statistic.
"""

from typing import Dict, Iterator, Tuple

import pandas as pd

from ..core.errors import NotFoundError


class Measure:
    """
    A named time series of numeric values keyed by year.

    The code is normalised to lowercase on construction and never changes.
    Values are kept ordered by year so derived statistics use chronological
    order rather than insertion order.
    """

    def __init__(self, code: str, label: str):
        self._code = code.lower()
        self.label = label
        self._values: Dict[int, float] = {}

    @property
    def code(self) -> str:
        return self._code

    @property
    def values(self) -> Dict[int, float]:
        """Year → value, ascending by year."""
        return dict(sorted(self._values.items()))

    def get_code(self) -> str:
        return self._code

    def get_label(self) -> str:
        return self.label

    def set_label(self, label: str):
        self.label = label

    def set_value(self, year: int, value: float):
        """Insert or overwrite the value for a year."""
        self._values[int(year)] = float(value)

    def get_value(self, year: int) -> float:
        try:
            return self._values[int(year)]
        except KeyError:
            raise NotFoundError(f"No value found for year {year}")

    def items(self) -> Iterator[Tuple[int, float]]:
        return iter(sorted(self._values.items()))

    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def combine(self, other: 'Measure'):
        """
        Merge another series into this one.

        Every year in `other` overwrites the same year here; years only
        present here are left alone.
        """
        for year, value in other._values.items():
            self._values[year] = value

    def copy(self) -> 'Measure':
        clone = Measure(self._code, self.label)
        clone._values = dict(self._values)
        return clone

    def get_average(self) -> float:
        if not self._values:
            return 0.0
        return sum(self._values.values()) / len(self._values)

    def get_difference(self) -> float:
        """Value at the last year minus value at the first year."""
        if len(self._values) < 2:
            return 0.0
        first = self._values[min(self._values)]
        last = self._values[max(self._values)]
        return last - first

    def get_difference_as_percentage(self) -> float:
        if len(self._values) < 2:
            return 0.0
        first = self._values[min(self._values)]
        if first == 0:
            return 0.0
        return self.get_difference() / first * 100

    def to_series(self) -> pd.Series:
        """Return the values as a Series indexed by year."""
        years = sorted(self._values)
        return pd.Series(
            [self._values[y] for y in years],
            index=pd.Index(years, name='year', dtype='int64'),
            name=self._code,
            dtype='float64',
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return (
            self._code == other._code
            and self.label == other.label
            and self._values == other._values
        )

    def __repr__(self) -> str:
        return f"Measure(code={self._code!r}, label={self.label!r}, years={len(self._values)})"
