"""Read the centre table and the coordinate dataset from disk."""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any

from examcentre.exceptions import DataInvalid, DataUnavailable
from examcentre.models import Centre

logger = logging.getLogger(__name__)


def parse_centres(text: str) -> list[Centre]:
    """
    Parse ``state,city,pincode`` CSV text into Centre objects.

    The first row is a header and is skipped. Fields are trimmed; rows
    with fewer than three columns or an empty PIN code are dropped.
    """
    reader = csv.reader(io.StringIO(text))
    next(reader, None)

    centres: list[Centre] = []
    for row in reader:
        if len(row) < 3:
            continue
        state, city, pincode = (field.strip() for field in row[:3])
        if not pincode:
            continue
        centres.append(Centre(state=state, city=city, pincode=pincode))
    return centres


def _read_text(path: Path, dataset: str) -> str:
    if not path.is_file():
        raise DataUnavailable(str(path), dataset)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataUnavailable(str(path), dataset, str(exc)) from exc


def load_centres(path: str | Path) -> list[Centre]:
    """Load the test centre table from a CSV file."""
    path = Path(path)
    centres = parse_centres(_read_text(path, "Test centre"))
    logger.info("Loaded %d test centres from %s", len(centres), path)
    return centres


def load_coordinate_records(path: str | Path) -> list[Any]:
    """
    Load raw ``{pincode, coordinates}`` records from a JSON array file.

    Records are returned verbatim; see examcentre.coordinates.resolve
    for how they are validated.
    """
    path = Path(path)
    text = _read_text(path, "Pincode coordinate")
    try:
        records = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataInvalid(str(path), f"malformed JSON: {exc.msg}") from exc
    if not isinstance(records, list):
        raise DataInvalid(
            str(path), f"expected a JSON array, got {type(records).__name__}"
        )
    logger.info("Loaded %d coordinate records from %s", len(records), path)
    return records
