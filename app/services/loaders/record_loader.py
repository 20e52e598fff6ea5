"""
Loading of the facility and emission record CSV files.

Usage:
    from app.services.loaders import load_record_store

    store = load_record_store(get_config(ConfigFile.DEVELOPMENT))

Rows are validated through the pydantic models. Any row breaking the data
invariants (unknown scope or gas type, negative emissions, duplicate
facility id) aborts the load with DataIntegrityError.
"""

import csv
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.core.config import Config
from app.pydantic_models import EmissionRecordPydModel, FacilityPydModel
from app.services.loaders.record_store import RecordStore

logger = logging.getLogger(__name__)

FACILITY_COLUMNS = ("id", "name", "latitude", "longitude", "industry", "description")
RECORD_COLUMNS = (
    "facility_id",
    "facility_name",
    "reporting_period",
    "scope",
    "ghg_type",
    "emissions",
)


class DataIntegrityError(Exception):
    """
    Raised when a data file violates the dataset invariants.

    Carries the file and line so the offending row can be fixed at the source.
    """

    def __init__(
        self,
        path: Path,
        message: str,
        line_number: int | None = None,
        original_exception: Exception | None = None,
    ):
        self.path = path
        self.line_number = line_number
        self.original_exception = original_exception
        self.message = message

        location = f"{path}" if line_number is None else f"{path}:{line_number}"
        error_msg = f"Invalid data in {location}: {message}"

        if original_exception:
            error_msg += (
                f"\nCaused by: {type(original_exception).__name__}: "
                f"{original_exception}"
            )

        super().__init__(error_msg)


def _read_rows(path: Path, columns: tuple[str, ...]) -> list[tuple[int, dict[str, Any]]]:
    """
    Read a CSV file and check its header.

    Returns:
        List of (line number, row) pairs, line numbers counting the header as 1
    """
    if not path.exists():
        raise DataIntegrityError(path, "file not found")

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            missing = [c for c in columns if c not in (reader.fieldnames or [])]
            if missing:
                raise DataIntegrityError(path, f"missing columns {missing}")
            return [(index, row) for index, row in enumerate(reader, start=2)]
    except UnicodeDecodeError as e:
        raise DataIntegrityError(path, "file is not valid UTF-8", original_exception=e) from e


def load_facilities(path: Path) -> list[FacilityPydModel]:
    """
    Load facility locations from CSV.

    Args:
        path: CSV file with FACILITY_COLUMNS

    Returns:
        Facilities in file order
    """
    logger.info(f"Loading facilities from {path}")
    facilities = []
    seen_ids = set()

    for line_number, row in _read_rows(path, FACILITY_COLUMNS):
        try:
            facility = FacilityPydModel.model_validate(
                {column: row[column] for column in FACILITY_COLUMNS}
            )
        except ValidationError as e:
            raise DataIntegrityError(path, "invalid facility row", line_number, e) from e

        if facility.id in seen_ids:
            raise DataIntegrityError(
                path, f"duplicate facility id {facility.id!r}", line_number
            )
        seen_ids.add(facility.id)
        facilities.append(facility)

    logger.info(f"Loaded {len(facilities)} facilities")
    return facilities


def load_records(path: Path) -> list[EmissionRecordPydModel]:
    """
    Load emission records from CSV.

    Args:
        path: CSV file with RECORD_COLUMNS

    Returns:
        Emission records in file order
    """
    logger.info(f"Loading emission records from {path}")
    records = []

    for line_number, row in _read_rows(path, RECORD_COLUMNS):
        try:
            record = EmissionRecordPydModel.model_validate(
                {column: row[column] for column in RECORD_COLUMNS}
            )
        except ValidationError as e:
            raise DataIntegrityError(path, "invalid emission record", line_number, e) from e
        records.append(record)

    logger.info(f"Loaded {len(records)} emission records")
    return records


def build_record_store(facilities_path: Path, records_path: Path) -> RecordStore:
    """Load both files and assemble the store."""
    facilities = load_facilities(facilities_path)
    records = load_records(records_path)

    known_ids = {f.id for f in facilities}
    orphan_ids = sorted({r.facility_id for r in records} - known_ids)
    if orphan_ids:
        logger.warning(f"Emission records reference unknown facilities: {orphan_ids}")

    return RecordStore(facilities, records)


def load_record_store(config: Config) -> RecordStore:
    """Build the store from the files named in the config's [data] section."""
    return build_record_store(
        config.data_path("facilities_file"),
        config.data_path("records_file"),
    )
