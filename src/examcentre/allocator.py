"""Allocate a test centre that is deliberately not the nearest one."""

from __future__ import annotations

import random
from typing import Callable, Sequence

from examcentre import pincode as pincode_rules
from examcentre.distance import nearest as find_nearest
from examcentre.models import (
    Allocated,
    AllocationResult,
    Centre,
    CoordinateIndex,
    InvalidPincode,
    NoAlternativeAvailable,
    NoNearestFound,
    PincodeNotFound,
)

RandomSource = Callable[[], float]


def _pick(candidates: Sequence[Centre], rng: RandomSource) -> Centre:
    """Choose uniformly from *candidates* using a float in [0, 1)."""
    n = len(candidates)
    # Guard against sources that can return exactly 1.0
    return candidates[min(int(rng() * n), n - 1)]


def allocate(
    pincode_input: str,
    centres: Sequence[Centre],
    index: CoordinateIndex,
    rng: RandomSource = random.random,
) -> AllocationResult:
    """
    Decide which centre to allocate for *pincode_input*.

    Steps: validate the PIN code, look up its coordinates, find the
    nearest centre, then pick uniformly among centres in a different
    city. Every expected failure is returned as a result object rather
    than raised.

    With a single centre, that centre is both nearest and allocated.
    When several centres exist but all share the nearest city,
    NoAlternativeAvailable is returned.
    """
    if not pincode_rules.validate(pincode_input):
        return InvalidPincode(pincode_input)

    origin = index.get(pincode_input)
    if origin is None:
        return PincodeNotFound(pincode_input)

    nearest = find_nearest(origin, centres, index)
    if nearest is None:
        return NoNearestFound(pincode_input)

    if len(centres) <= 1:
        return Allocated(pincode_input, nearest, nearest)

    candidates = [c for c in centres if c.city != nearest.city]
    if not candidates:
        return NoAlternativeAvailable(pincode_input, nearest)

    return Allocated(pincode_input, nearest, _pick(candidates, rng))
