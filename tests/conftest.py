"""Shared test fixtures — small centre and coordinate datasets."""

import json
from pathlib import Path

import pytest

from examcentre.coordinates import resolve
from examcentre.models import Centre

CENTRES_CSV = """\
state,city,pincode
Delhi,New Delhi,110001
Maharashtra, Mumbai ,400001
Karnataka,Bengaluru,560001
West Bengal,Kolkata,700001
Telangana,Hyderabad,
"""

COORDINATE_RECORDS = [
    {"pincode": "110001", "coordinates": [77.2167, 28.6333]},
    {"pincode": "400001", "coordinates": [[72.8333, 18.9333]]},
    {"pincode": "560001", "coordinates": [[[77.5946, 12.9716]]]},
    {"pincode": "700001", "coordinates": [88.3639, 22.5726]},
    # User-side pincodes that are not centres
    {"pincode": "110002", "coordinates": [[[77.2400, 28.6400]]]},
    {"pincode": "400050", "coordinates": [72.8400, 19.0600]},
    # Malformed rows that must be skipped
    {"pincode": "", "coordinates": [77.0, 28.0]},
    {"pincode": "123456", "coordinates": []},
    {"pincode": "654321", "coordinates": [1.0, 2.0, 3.0]},
    {"pincode": "111111", "coordinates": ["77.0", "28.0"]},
]


@pytest.fixture()
def centres() -> list[Centre]:
    return [
        Centre("Delhi", "New Delhi", "110001"),
        Centre("Maharashtra", "Mumbai", "400001"),
        Centre("Karnataka", "Bengaluru", "560001"),
        Centre("West Bengal", "Kolkata", "700001"),
    ]


@pytest.fixture()
def index():
    return resolve(COORDINATE_RECORDS)


@pytest.fixture()
def centres_csv(tmp_path: Path) -> Path:
    path = tmp_path / "test_centres.csv"
    path.write_text(CENTRES_CSV, encoding="utf-8")
    return path


@pytest.fixture()
def coordinates_json(tmp_path: Path) -> Path:
    path = tmp_path / "pincode_coordinates.json"
    path.write_text(json.dumps(COORDINATE_RECORDS), encoding="utf-8")
    return path


@pytest.fixture()
def client(centres_csv: Path, coordinates_json: Path):
    """Create an ExamCentreAllocator over the test datasets."""
    from examcentre import ExamCentreAllocator

    return ExamCentreAllocator(
        centres_csv=centres_csv, coordinates_json=coordinates_json, seed=7
    )
