"""
Data repository for building the merged Areas collection.

This module loads the configuration, sets up logging, and runs the import:
the authority code table first, then every selected dataset, each one
independently so that a broken file is reported without stopping the run.
"""

import logging
import sys
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..core.columns import ImportFilters
from ..core.errors import ErrorKind, WalesDataStreamError
from ..models.areas import Areas
from ..sources.file_source import InputFile
from .catalogue import DatasetCatalogue, DatasetSource
from .populator import DataPopulator


@dataclass
class DatasetLoadResult:
    """Outcome of importing one source file."""

    code: str
    path: str
    ok: bool
    error_kind: Optional[ErrorKind] = None
    message: str = ""


class DataRepository:
    """Handles configuration, logging and the import of every dataset."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
        self.config_path = config_path

        if config is not None:
            self.config = config
        elif config_path is not None:
            self._load_config()
        else:
            raise ValueError("Either config_path or config must be given")

        # Initialize Logging
        self._setup_logging()

        self.catalogue = DatasetCatalogue.from_config(self.config)
        self.populator = DataPopulator(self.logger)
        self.results: List[DatasetLoadResult] = []

        self.logger.info(f"Initialized DataRepository with {len(self.catalogue)} datasets")

    def _load_config(self):
        """Load configuration from YAML file."""
        with open(self.config_path, 'r') as file:
            self.config = yaml.safe_load(file) or {}

    def _setup_logging(self):
        """Setup logging configuration with file and console handlers."""
        # Create logger
        self.logger = logging.getLogger('WalesDataStream')

        if not self.config.get('logs', False):
            self.logger.disabled = True
            return

        self.logger.disabled = False
        self.logger.setLevel(logging.DEBUG if self.config.get('debug') else logging.INFO)

        # Clear any existing handlers
        self.logger.handlers.clear()

        # Create formatters
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(levelname)s - %(message)s'
        )

        log_dir = Path(self.config.get('paths', {}).get('logs', 'logs'))
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / 'wales_data_stream.log'

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        self.logger.addHandler(file_handler)

        # Console handler
        if self.config.get('debug'):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(simple_formatter)
            self.logger.addHandler(console_handler)

        self.logger.info("Logging setup complete.")

    def data_dir(self) -> Path:
        return Path(self.config.get('paths', {}).get('data', 'datasets'))

    def load(self,
             data_dir: Optional[str] = None,
             datasets: Optional[Iterable[str]] = None,
             filters: Optional[ImportFilters] = None) -> Areas:
        """
        Import the authority code table and the selected datasets.

        Args:
            data_dir: Directory holding the files (defaults to paths.data)
            datasets: Dataset codes to import; None or 'all' imports every one
            filters: Area, measure and year filters

        Returns:
            Areas: the merged collection. Per-file outcomes are in self.results.

        Raises:
            NotFoundError: if a requested dataset code is not in the catalogue
        """
        directory = Path(data_dir) if data_dir is not None else self.data_dir()
        filters = filters or ImportFilters()
        selected = self.catalogue.select(datasets)

        areas = Areas()
        self.results = []

        self.results.append(self.load_source(areas, directory, self.catalogue.areas_source,
                                             ImportFilters(areas=filters.areas)))
        for source in selected:
            self.results.append(self.load_source(areas, directory, source, filters))

        failed = [r for r in self.results if not r.ok]
        self.logger.info(
            f"Import finished: {len(areas)} areas, "
            f"{len(self.results) - len(failed)} files loaded, {len(failed)} failed"
        )
        return areas

    def load_source(self,
                    areas: Areas,
                    directory: Path,
                    source: DatasetSource,
                    filters: ImportFilters) -> DatasetLoadResult:
        """
        Import one file into areas.

        The file is parsed into a copy of the collection and merged back only
        when it succeeds, so a failure leaves areas exactly as it was.
        """
        path = directory / source.file
        self.logger.info(f"Importing {source.code} from {path}")

        scratch = areas.copy()
        try:
            with InputFile(path) as stream:
                self.populator.populate(scratch, stream, source.parser, source.cols, filters)
        except WalesDataStreamError as e:
            self.logger.error(f"Error importing dataset {source.code}: {e}")
            return DatasetLoadResult(source.code, str(path), False, e.kind, str(e))

        areas.merge(scratch)
        return DatasetLoadResult(source.code, str(path), True)

    def failures(self) -> List[DatasetLoadResult]:
        return [r for r in self.results if not r.ok]
