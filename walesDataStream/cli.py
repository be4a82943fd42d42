"""
Command line interface.

Imports the configured datasets, optionally restricted to some areas,
measures and years, and prints the result as tables or JSON.
"""

import argparse
import re
import sys
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .core.columns import ALL_YEARS, ImportFilters
from .core.errors import NotFoundError
from .data.repository import DataRepository

YEARS_PATTERN = re.compile(r'^(\d{4})(?:-(\d{4}))?$')
DEFAULT_CONFIG = 'config.yaml'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='walesDataStream',
        description='Parse official Welsh Government statistics data files.',
    )
    parser.add_argument('--config', default=DEFAULT_CONFIG,
                        help='YAML configuration with the dataset catalogue')
    parser.add_argument('--dir', default=None,
                        help='Directory for input data files (defaults to paths.data in the config)')
    parser.add_argument('-d', '--datasets', default=None,
                        help="Comma-separated dataset codes to import (omit or 'all' for every dataset)")
    parser.add_argument('-a', '--areas', default=None,
                        help="Comma-separated authority codes to import (omit or 'all' for every area)")
    parser.add_argument('-m', '--measures', default=None,
                        help="Comma-separated measure codes to import (omit or 'all' for every measure)")
    parser.add_argument('-y', '--years', default='0',
                        help='A single year (YYYY) or inclusive range (YYYY-ZZZZ); 0 for all years')
    parser.add_argument('-j', '--json', action='store_true',
                        help='Print the output as JSON instead of tables')
    return parser


def parse_list_arg(value: Optional[str]) -> List[str]:
    """Split a comma-separated argument; empty when omitted or 'all'."""
    if not value:
        return []
    items = [item.strip() for item in value.split(',') if item.strip()]
    if any(item.lower() == 'all' for item in items):
        return []
    return items


def parse_areas_arg(value: Optional[str]) -> FrozenSet[str]:
    return frozenset(parse_list_arg(value))


def parse_measures_arg(value: Optional[str]) -> FrozenSet[str]:
    return frozenset(item.lower() for item in parse_list_arg(value))


def parse_years_arg(value: Optional[str]) -> Tuple[int, int]:
    """
    Parse 'YYYY' or 'YYYY-ZZZZ' into an inclusive (start, end) range.

    '0' or an empty value means all years.

    Raises:
        ValueError: if the value is neither form
    """
    if value is None or value.strip() in ('', '0'):
        return ALL_YEARS
    match = YEARS_PATTERN.match(value.strip())
    if not match:
        raise ValueError("Invalid input for years argument")
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else start
    return start, end


def run(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        years = parse_years_arg(args.years)
    except ValueError as e:
        parser.error(str(e))

    filters = ImportFilters(
        areas=parse_areas_arg(args.areas),
        measures=parse_measures_arg(args.measures),
        years=years,
    )

    repo = DataRepository(args.config)
    try:
        areas = repo.load(
            data_dir=args.dir,
            datasets=parse_list_arg(args.datasets),
            filters=filters,
        )
    except NotFoundError as e:
        parser.error(str(e))

    unknown = sorted(filters.areas - set(areas.codes()))
    if unknown:
        parser.error(f"Invalid input for area argument: {', '.join(unknown)}")

    for failure in repo.failures():
        print(f"Error importing dataset {failure.code}: {failure.message}", file=sys.stderr)

    if args.json:
        print(areas.to_json())
    else:
        print(areas)
    return 0
