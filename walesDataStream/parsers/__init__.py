"""Parsers module exports."""

from .authority_code_csv import AuthorityCodeCSVParser
from .authority_by_year_csv import AuthorityByYearCSVParser
from .welsh_stats_json import WelshStatsJSONParser

__all__ = ['AuthorityCodeCSVParser', 'AuthorityByYearCSVParser', 'WelshStatsJSONParser']
