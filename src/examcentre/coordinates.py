"""Normalise raw PIN code coordinate records into a lookup index."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Iterable, Optional

from examcentre.models import Coordinate

logger = logging.getLogger(__name__)

_MAX_DEPTH = 32


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    # bool is a Real subclass; a [true, false] pair is not a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def unwrap(value: Any, max_depth: int = _MAX_DEPTH) -> Optional[Any]:
    """
    Peel wrapping levels off a nested coordinate value.

    Follows the first element while it is itself a sequence, so
    ``[[[77.1, 28.6]]]`` becomes ``[77.1, 28.6]``. Sibling elements are
    never inspected. Returns None if more than *max_depth* levels would
    have to be removed.
    """
    depth = 0
    while _is_sequence(value) and len(value) > 0 and _is_sequence(value[0]):
        if depth >= max_depth:
            return None
        value = value[0]
        depth += 1
    return value


def to_coordinate(raw: Any) -> Optional[Coordinate]:
    """Convert a raw ``[lon, lat]`` value (possibly nested) to a Coordinate."""
    pair = unwrap(raw)
    if not _is_sequence(pair) or len(pair) != 2:
        return None
    lon, lat = pair
    if not (_is_number(lon) and _is_number(lat)):
        return None
    return Coordinate(lat=float(lat), lon=float(lon))


def resolve(entries: Iterable[Any]) -> dict[str, Coordinate]:
    """
    Build a PIN code -> Coordinate index from raw records.

    Each record is a mapping with ``pincode`` and ``coordinates`` keys,
    where ``coordinates`` is ``[lon, lat]`` optionally wrapped in any
    number of single-element lists. Records that cannot be resolved are
    logged and skipped; this function never raises for bad records.
    Later records overwrite earlier ones with the same PIN code.
    """
    index: dict[str, Coordinate] = {}
    skipped = 0

    for position, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            logger.warning("Skipping record %d: not an object", position)
            skipped += 1
            continue

        pincode = entry.get("pincode")
        pincode = str(pincode).strip() if pincode else ""
        if not pincode:
            logger.warning("Skipping record %d: missing pincode", position)
            skipped += 1
            continue

        raw = entry.get("coordinates")
        if raw is None or (_is_sequence(raw) and len(raw) == 0):
            logger.warning("Skipping pincode %s: missing coordinates", pincode)
            skipped += 1
            continue

        coord = to_coordinate(raw)
        if coord is None:
            logger.warning(
                "Skipping pincode %s: unusable coordinates %r", pincode, raw
            )
            skipped += 1
            continue

        index[pincode] = coord

    logger.debug(
        "Resolved %d pincodes (%d records skipped)", len(index), skipped
    )
    return index
