"""
StatsWales JSON parser.

This module reads the hierarchical JSON exports: a document with a 'value'
array holding one record per (area, measure, year), or per (area, year) for
single-measure datasets that carry no measure code field.
"""

import json
import logging
from typing import Any, Dict, Optional, TextIO, Tuple

from ..core.abstractions import DatasetParser
from ..core.columns import ImportFilters, SourceColumn, SourceColumnMapping, SourceDataType
from ..core.errors import MalformedInputError
from ..models.area import Area
from ..models.areas import Areas
from ..models.measure import Measure
from .tokens import is_missing, parse_value, parse_year, single_measure


class WelshStatsJSONParser(DatasetParser):
    """Parses StatsWales JSON records into areas and measures."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def parse(self,
              stream: TextIO,
              cols: SourceColumnMapping,
              areas: Areas,
              filters: ImportFilters) -> None:
        """
        Merge every accepted record into the collection.

        Filters are checked in the order area, measure, year. A record that
        fails one is skipped before anything is created. Accepted records
        create the Area if needed (English name only) and merge their single
        value into the measure.
        """
        self.logger.info("Parsing StatsWales JSON")

        try:
            document = json.load(stream)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Invalid JSON: {e}")

        if not isinstance(document, dict) or not isinstance(document.get('value'), list):
            raise MalformedInputError("JSON document has no 'value' array")

        records = document['value']
        imported = 0
        skipped = {'area': 0, 'measure': 0, 'year': 0}

        for index, record in enumerate(records):
            context = f"Record {index}"
            if not isinstance(record, dict):
                raise MalformedInputError(f"{context}: expected an object")

            code = self._field(record, cols, SourceColumn.AUTH_CODE, context, required=True)
            code = str(code).strip()
            if not filters.accepts_area(code):
                skipped['area'] += 1
                continue

            measure_code, measure_label = self._resolve_measure(record, cols, context)
            if not filters.accepts_measure(measure_code):
                skipped['measure'] += 1
                continue

            year = parse_year(self._field(record, cols, SourceColumn.YEAR, context, required=True), context)
            if not filters.accepts_year(year):
                skipped['year'] += 1
                continue

            value = parse_value(self._field(record, cols, SourceColumn.VALUE, context, required=True), context)
            name_eng = self._field(record, cols, SourceColumn.AUTH_NAME_ENG, context)

            area = self._area_for(areas, code, name_eng)
            measure = Measure(measure_code, measure_label)
            measure.set_value(year, value)
            area.set_measure(measure_code, measure)
            imported += 1

        self.logger.info(
            f"Imported {imported} of {len(records)} records "
            f"(skipped by filter: {skipped['area']} area, {skipped['measure']} measure, {skipped['year']} year)"
        )

    def _field(self,
               record: Dict[str, Any],
               cols: SourceColumnMapping,
               role: SourceColumn,
               context: str,
               required: bool = False) -> Optional[Any]:
        """Look up the field mapped to a role; None when absent and optional."""
        key = cols.get(role)
        raw = record.get(key) if key is not None else None
        if is_missing(raw):
            if required:
                raise MalformedInputError(f"{context}: missing field for {role.value} ({key})")
            return None
        return raw

    def _resolve_measure(self,
                         record: Dict[str, Any],
                         cols: SourceColumnMapping,
                         context: str) -> Tuple[str, str]:
        """Return (code, label) from the record, or from the mapping for single-measure files."""
        code = self._field(record, cols, SourceColumn.MEASURE_CODE, context)
        if code is not None:
            label = self._field(record, cols, SourceColumn.MEASURE_NAME, context)
            return str(code).lower(), str(label) if label is not None else str(code)

        measure_info = single_measure(cols)
        if measure_info is None:
            raise MalformedInputError(f"{context}: no measure code and no single measure in the column mapping")
        return measure_info

    def _area_for(self, areas: Areas, code: str, name_eng: Optional[Any]) -> Area:
        """Reuse the stored area, or create one with its English name."""
        if areas.has_area(code):
            area = areas.get_area(code)
            if name_eng is not None and not area.has_name('eng'):
                area.set_name('eng', str(name_eng))
            return area

        area = Area(code)
        if name_eng is not None:
            area.set_name('eng', str(name_eng))
        return areas.insert_area(area)

    def get_source_type(self) -> SourceDataType:
        return SourceDataType.WELSH_STATS_JSON
