"""Tests for examcentre.coordinates module."""

import logging
from types import MappingProxyType

import pytest

from examcentre.coordinates import resolve, to_coordinate, unwrap
from examcentre.models import Coordinate


class TestUnwrap:
    def test_flat_pair_unchanged(self):
        assert unwrap([77.1, 28.6]) == [77.1, 28.6]

    @pytest.mark.parametrize(
        "raw",
        [[[77.1, 28.6]], [[[77.1, 28.6]]], [[[[[77.1, 28.6]]]]], ((77.1, 28.6),)],
    )
    def test_nested_pair(self, raw):
        assert list(unwrap(raw)) == [77.1, 28.6]

    def test_follows_first_element_only(self):
        assert unwrap([[1.0, 2.0], [3.0, 4.0]]) == [1.0, 2.0]

    def test_depth_cap(self):
        raw = [77.1, 28.6]
        for _ in range(10):
            raw = [raw]
        assert unwrap(raw, max_depth=5) is None
        assert unwrap(raw, max_depth=10) == [77.1, 28.6]

    def test_non_sequence_passthrough(self):
        assert unwrap(5) == 5
        assert unwrap([]) == []


class TestToCoordinate:
    def test_order_is_lon_lat(self):
        assert to_coordinate([77.1, 28.6]) == Coordinate(lat=28.6, lon=77.1)

    def test_integers_accepted(self):
        assert to_coordinate([[77, 28]]) == Coordinate(lat=28.0, lon=77.0)

    @pytest.mark.parametrize(
        "raw",
        [
            [1.0],
            [1.0, 2.0, 3.0],
            ["77.1", "28.6"],
            [True, False],
            [float("nan"), 28.6],
            [77.1, float("inf")],
            [None, None],
            "77.1,28.6",
            {"lon": 77.1, "lat": 28.6},
        ],
    )
    def test_rejects_malformed(self, raw):
        assert to_coordinate(raw) is None


class TestResolve:
    def test_nested_example(self):
        index = resolve([{"pincode": "110001", "coordinates": [[[77.1, 28.6]]]}])
        assert index == {"110001": Coordinate(lat=28.6, lon=77.1)}

    def test_last_write_wins(self):
        index = resolve(
            [
                {"pincode": "110001", "coordinates": [77.0, 28.0]},
                {"pincode": "110001", "coordinates": [78.0, 29.0]},
            ]
        )
        assert index["110001"] == Coordinate(lat=29.0, lon=78.0)

    def test_numeric_pincode_coerced_to_string(self):
        index = resolve([{"pincode": 560001, "coordinates": [77.59, 12.97]}])
        assert "560001" in index

    @pytest.mark.parametrize(
        "entry",
        [
            {"pincode": "", "coordinates": [77.0, 28.0]},
            {"pincode": None, "coordinates": [77.0, 28.0]},
            {"pincode": "   ", "coordinates": [77.0, 28.0]},
            {"coordinates": [77.0, 28.0]},
            {"pincode": "110001"},
            {"pincode": "110001", "coordinates": []},
            {"pincode": "110001", "coordinates": None},
            {"pincode": "110001", "coordinates": [[77.0, 28.0, 5.0]]},
            "110001,77.0,28.0",
            None,
        ],
    )
    def test_skips_bad_entries(self, entry):
        assert resolve([entry]) == {}

    def test_blank_pincode_is_warned(self, caplog):
        with caplog.at_level(logging.WARNING, logger="examcentre.coordinates"):
            index = resolve([{"pincode": "   ", "coordinates": [77.0, 28.0]}])
        assert index == {}
        assert "missing pincode" in caplog.records[0].getMessage()

    def test_accepts_any_mapping(self):
        record = MappingProxyType({"pincode": "110001", "coordinates": [77.0, 28.0]})
        assert resolve([record]) == {"110001": Coordinate(lat=28.0, lon=77.0)}

    def test_skips_are_logged_as_warnings(self, caplog):
        with caplog.at_level(logging.WARNING, logger="examcentre.coordinates"):
            resolve(
                [
                    {"pincode": "110001", "coordinates": [77.0, 28.0]},
                    {"pincode": "654321", "coordinates": [1.0, 2.0, 3.0]},
                ]
            )
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "654321" in warnings[0].getMessage()

    def test_fixture_dataset(self, index):
        assert set(index) == {
            "110001",
            "400001",
            "560001",
            "700001",
            "110002",
            "400050",
        }
        assert index["560001"] == Coordinate(lat=12.9716, lon=77.5946)
