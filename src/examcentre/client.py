"""ExamCentreAllocator — the main entry point for the library."""

from __future__ import annotations

import random
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from examcentre import coordinates, loader, pincode
from examcentre.allocator import RandomSource, allocate
from examcentre.distance import rank
from examcentre.exceptions import DataUnavailable
from examcentre.models import AllocationResult, Centre, CoordinateIndex


class ExamCentreAllocator:
    """
    Holds the loaded centre list and coordinate index for a session.

    Initialise with paths to the centre CSV and the coordinate JSON.
    Both are read once on construction and are read-only afterwards.
    Pass *seed* for reproducible allocations.
    """

    def __init__(
        self,
        centres_csv: str | Path,
        coordinates_json: str | Path,
        seed: Optional[int] = None,
    ):
        self._centres_path = Path(centres_csv)
        self._coordinates_path = Path(coordinates_json)
        self._centres: tuple[Centre, ...] = tuple(
            loader.load_centres(self._centres_path)
        )
        self._index: CoordinateIndex = MappingProxyType(
            coordinates.resolve(
                loader.load_coordinate_records(self._coordinates_path)
            )
        )
        self._random = random.Random(seed)
        self._validate_data()

    # ── Public API ────────────────────────────────────────────────

    @property
    def centres(self) -> tuple[Centre, ...]:
        return self._centres

    @property
    def index(self) -> CoordinateIndex:
        return self._index

    def allocate(
        self, pincode_input: str, rng: Optional[RandomSource] = None
    ) -> AllocationResult:
        """
        Allocate a centre for *pincode_input*.

        Uses *rng* if given, otherwise this instance's own random source.
        Never raises for bad input; see examcentre.models for outcomes.
        """
        if rng is None:
            rng = self._random.random
        return allocate(pincode_input, self._centres, self._index, rng)

    def nearest_centres(
        self, pincode_input: str, limit: int = 5
    ) -> list[tuple[Centre, float]]:
        """
        Return up to *limit* centres closest to *pincode_input* with
        their distances in km. Empty if the PIN code is invalid or unknown.
        """
        if not pincode.validate(pincode_input):
            return []
        origin = self._index.get(pincode_input)
        if origin is None:
            return []
        return rank(origin, self._centres, self._index)[:limit]

    def health_check(self) -> dict:
        """
        Report how much of the loaded data is usable.

        A centre is locatable when its PIN code appears in the index.
        """
        locatable = sum(1 for c in self._centres if c.pincode in self._index)
        return {
            "healthy": locatable > 0,
            "centres": len(self._centres),
            "locatable_centres": locatable,
            "cities": len({c.city for c in self._centres}),
            "indexed_pincodes": len(self._index),
        }

    # ── Private helpers ───────────────────────────────────────────

    def _validate_data(self) -> None:
        """Refuse to start without at least one centre."""
        if not self._centres:
            raise DataUnavailable(
                str(self._centres_path), "Test centre", "no centres listed"
            )
