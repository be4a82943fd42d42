"""
Area: one local authority with its names and measures.
"""

from typing import Dict

from ..core.errors import NotFoundError
from .measure import Measure


class Area:
    """
    A geographic unit identified by an authority code.

    Language codes and measure codes are stored lowercase and every lookup
    lowercases its key first, so callers may use any casing.
    """

    def __init__(self, authority_code: str):
        self._authority_code = authority_code
        self._names: Dict[str, str] = {}
        self._measures: Dict[str, Measure] = {}

    @property
    def authority_code(self) -> str:
        return self._authority_code

    def get_local_authority_code(self) -> str:
        return self._authority_code

    @property
    def names(self) -> Dict[str, str]:
        return dict(sorted(self._names.items()))

    @property
    def measures(self) -> Dict[str, Measure]:
        """Measure code → Measure, in code order."""
        return dict(sorted(self._measures.items()))

    def set_name(self, lang: str, name: str):
        """
        Set the name of the area in a language.

        Args:
            lang: Three-letter ISO 639-3 code such as 'eng' or 'cym'
            name: The name in that language
        """
        self._names[lang.lower()] = name

    def get_name(self, lang: str) -> str:
        try:
            return self._names[lang.lower()]
        except KeyError:
            raise NotFoundError(f"Language not found: {lang} (area {self._authority_code})")

    def has_name(self, lang: str) -> bool:
        return lang.lower() in self._names

    def set_measure(self, code: str, measure: Measure):
        """
        Add a measure, merging it into any existing measure with the same code.

        The existing Measure is mutated in place and the new measure's years
        win where both define a value.
        """
        key = code.lower()
        existing = self._measures.get(key)
        if existing is not None:
            existing.combine(measure)
        else:
            self._measures[key] = measure

    def get_measure(self, code: str) -> Measure:
        try:
            return self._measures[code.lower()]
        except KeyError:
            raise NotFoundError(f"No measure found matching {code}")

    def has_measure(self, code: str) -> bool:
        return code.lower() in self._measures

    def merge(self, other: 'Area'):
        """Union another area's names and measures into this one."""
        for lang, name in other._names.items():
            self._names[lang] = name
        for code, measure in other._measures.items():
            self.set_measure(code, measure.copy())

    def copy(self) -> 'Area':
        """Return a deep copy detached from this area."""
        clone = Area(self._authority_code)
        clone._names = dict(self._names)
        clone._measures = {code: m.copy() for code, m in self._measures.items()}
        return clone

    def size(self) -> int:
        return len(self._measures)

    def __len__(self) -> int:
        return len(self._measures)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return (
            self._authority_code == other._authority_code
            and self._names == other._names
            and self._measures == other._measures
        )

    def __repr__(self) -> str:
        return f"Area({self._authority_code!r}, names={self._names!r}, measures={len(self._measures)})"
