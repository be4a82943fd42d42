"""
Authority-by-year table parser.

This module reads wide single-measure tables: the header lists the years
after the authority code column and each row holds one area's values for
the measure named in the column mapping.
"""

import logging
from typing import List, TextIO, Tuple

import pandas as pd

from ..core.abstractions import DatasetParser
from ..core.columns import ImportFilters, SourceColumn, SourceColumnMapping, SourceDataType
from ..core.errors import MalformedInputError
from ..models.areas import Areas
from ..models.measure import Measure
from .tokens import is_missing, parse_value, parse_year, single_measure


class AuthorityByYearCSVParser(DatasetParser):
    """Parses authority-by-year CSV files into measures of existing areas."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def parse(self,
              stream: TextIO,
              cols: SourceColumnMapping,
              areas: Areas,
              filters: ImportFilters) -> None:
        """
        Merge one measure per row into the matching Area.

        Areas must already be present in the collection (load the authority
        code table first); a row for an unknown area raises NotFoundError.
        """
        measure_info = single_measure(cols)
        if measure_info is None:
            raise MalformedInputError(
                "Authority-by-year tables need a single measure code in the column mapping"
            )
        measure_code, measure_label = measure_info
        self.logger.info(f"Parsing authority-by-year table for measure '{measure_code}'")

        if not filters.accepts_measure(measure_code):
            self.logger.info(f"Measure '{measure_code}' excluded by measure filter, skipping table")
            return

        try:
            df = pd.read_csv(stream, dtype=str, keep_default_na=False, index_col=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise MalformedInputError(f"Could not read authority-by-year table: {e}")

        code_col = cols.get(SourceColumn.AUTH_CODE)
        if code_col not in df.columns:
            code_col = df.columns[0]
        year_columns = self._year_columns(df, code_col, filters)

        imported = 0
        skipped = 0
        for line_no, (_, row) in enumerate(df.iterrows(), start=2):
            code = row[code_col]
            if is_missing(code):
                raise MalformedInputError(f"Line {line_no}: missing authority code")
            code = str(code).strip()

            if not filters.accepts_area(code):
                skipped += 1
                continue

            area = areas.get_area(code)

            measure = Measure(measure_code, measure_label)
            for column, year in year_columns:
                value = parse_value(row[column], f"Line {line_no}, year {year}")
                measure.set_value(year, value)

            area.set_measure(measure_code, measure)
            imported += 1

        self.logger.info(
            f"Imported '{measure_code}' for {imported} areas "
            f"({skipped} skipped by area filter, {len(year_columns)} year columns kept)"
        )

    def _year_columns(self,
                      df: pd.DataFrame,
                      code_col: str,
                      filters: ImportFilters) -> List[Tuple[str, int]]:
        """Parse the year headers and drop those outside the year filter."""
        kept = []
        for column in df.columns:
            if column == code_col:
                continue
            year = parse_year(column, "Header")
            if filters.accepts_year(year):
                kept.append((column, year))
            else:
                self.logger.debug(f"Year {year} excluded by year filter")
        return kept

    def get_source_type(self) -> SourceDataType:
        return SourceDataType.AUTHORITY_BY_YEAR_CSV
