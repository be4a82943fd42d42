"""
Authority code table parser.

This module reads the areas table: one row per local authority with its
authority code, English name and Welsh name.
"""

import logging
from typing import TextIO

import pandas as pd

from ..core.abstractions import DatasetParser
from ..core.columns import ImportFilters, SourceColumn, SourceColumnMapping, SourceDataType
from ..core.errors import MalformedInputError
from ..models.area import Area
from ..models.areas import Areas
from .tokens import is_missing

REQUIRED_ROLES = [SourceColumn.AUTH_CODE, SourceColumn.AUTH_NAME_ENG, SourceColumn.AUTH_NAME_CYM]


class AuthorityCodeCSVParser(DatasetParser):
    """Parses the authority code CSV into named Area objects."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def parse(self,
              stream: TextIO,
              cols: SourceColumnMapping,
              areas: Areas,
              filters: ImportFilters) -> None:
        """Create an Area with English and Welsh names for every accepted row."""
        self.logger.info("Parsing authority code table")

        try:
            df = pd.read_csv(stream, dtype=str, keep_default_na=False, index_col=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise MalformedInputError(f"Could not read authority code table: {e}")

        if len(df.columns) < len(REQUIRED_ROLES):
            raise MalformedInputError(
                f"Authority code table needs {len(REQUIRED_ROLES)} columns, found {len(df.columns)}"
            )
        code_col, eng_col, cym_col = self._resolve_columns(df, cols)

        imported = 0
        skipped = 0
        # Header is line 1
        rows = df[[code_col, eng_col, cym_col]].itertuples(index=False, name=None)
        for line_no, values in enumerate(rows, start=2):
            if any(is_missing(v) for v in values):
                raise MalformedInputError(
                    f"Line {line_no}: expected {len(REQUIRED_ROLES)} columns (code, English name, Welsh name)"
                )
            code, name_eng, name_cym = (str(v).strip() for v in values)

            if not filters.accepts_area(code):
                skipped += 1
                continue

            area = Area(code)
            area.set_name('eng', name_eng)
            area.set_name('cym', name_cym)
            areas.insert_area(area)
            imported += 1

        self.logger.info(f"Imported {imported} areas ({skipped} skipped by area filter)")

    def _resolve_columns(self, df: pd.DataFrame, cols: SourceColumnMapping):
        """Use the mapped headers when the file has them, otherwise the first three columns."""
        headers = [cols.get(role) for role in REQUIRED_ROLES]
        if all(h in df.columns for h in headers):
            return headers
        self.logger.debug(
            f"Mapped headers {headers} not all present in {list(df.columns)}, using column positions"
        )
        return list(df.columns[:len(REQUIRED_ROLES)])

    def get_source_type(self) -> SourceDataType:
        return SourceDataType.AUTHORITY_CODE_CSV
