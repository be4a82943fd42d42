"""
Areas: the top-level container of every imported Area.
"""

from typing import Dict, Iterator

import pandas as pd

from ..core.errors import NotFoundError
from ..output.json_output import areas_to_dict, areas_to_json
from ..output.text_output import render_areas
from .area import Area


class Areas:
    """
    All imported areas keyed by authority code.

    There is exactly one Area per authority code. Both insertion paths use
    the same field-level merge: names from the incoming Area overwrite names
    in the same language, and measures are combined year by year.
    """

    def __init__(self):
        self._areas: Dict[str, Area] = {}

    def set_area(self, authority_code: str, area: Area) -> Area:
        """
        Store an area under the given authority code.

        If an area already exists for the code the new area is merged into it
        (new names and years take precedence) and the stored area is returned.
        """
        existing = self._areas.get(authority_code)
        if existing is None:
            self._areas[authority_code] = area
            return area
        if existing is not area:
            existing.merge(area)
        return existing

    def insert_area(self, area: Area) -> Area:
        """Store an area under its own authority code, merging if present."""
        return self.set_area(area.authority_code, area)

    def get_area(self, authority_code: str) -> Area:
        try:
            return self._areas[authority_code]
        except KeyError:
            raise NotFoundError(f"Area not found: {authority_code}")

    def has_area(self, authority_code: str) -> bool:
        return authority_code in self._areas

    def merge(self, other: 'Areas'):
        """Merge every area of another collection into this one."""
        for code, area in other._areas.items():
            self.set_area(code, area)

    def copy(self) -> 'Areas':
        clone = Areas()
        clone._areas = {code: area.copy() for code, area in self._areas.items()}
        return clone

    def size(self) -> int:
        return len(self._areas)

    def __len__(self) -> int:
        return len(self._areas)

    def __iter__(self) -> Iterator[Area]:
        for code in sorted(self._areas):
            yield self._areas[code]

    def __contains__(self, authority_code) -> bool:
        return authority_code in self._areas

    def __eq__(self, other) -> bool:
        if not isinstance(other, Areas):
            return NotImplemented
        return self._areas == other._areas

    def codes(self):
        return sorted(self._areas)

    def to_dict(self) -> dict:
        return areas_to_dict(self)

    def to_json(self, indent=None) -> str:
        """Serialise the collection; an empty collection gives '{}'."""
        return areas_to_json(self, indent=indent)

    def to_frame(self) -> pd.DataFrame:
        """
        Flatten the collection into one row per (area, measure, year).

        Returns:
            pd.DataFrame with columns authority_code, name_eng, name_cym,
            measure_code, measure_label, year, value
        """
        columns = ['authority_code', 'name_eng', 'name_cym',
                   'measure_code', 'measure_label', 'year', 'value']
        rows = []
        for area in self:
            name_eng = area.get_name('eng') if area.has_name('eng') else None
            name_cym = area.get_name('cym') if area.has_name('cym') else None
            for code, measure in area.measures.items():
                for year, value in measure.items():
                    rows.append({
                        'authority_code': area.authority_code,
                        'name_eng': name_eng,
                        'name_cym': name_cym,
                        'measure_code': code,
                        'measure_label': measure.label,
                        'year': year,
                        'value': value,
                    })

        df = pd.DataFrame(rows, columns=columns)
        if not df.empty:
            df['year'] = df['year'].astype('int64')
            df['value'] = df['value'].astype('float64')
        return df.reset_index(drop=True)

    def __str__(self) -> str:
        return render_areas(self)

    def __repr__(self) -> str:
        return f"Areas({len(self._areas)} areas)"
