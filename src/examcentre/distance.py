"""Great-circle distance and nearest-centre ranking."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from examcentre.models import Centre, Coordinate, CoordinateIndex

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometres between two points in degrees."""
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat))
        * math.cos(math.radians(b.lat))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push h fractionally outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def nearest(
    origin: Coordinate,
    centres: Sequence[Centre],
    index: CoordinateIndex,
) -> Optional[Centre]:
    """
    Return the centre closest to *origin*, or None if none can be located.

    Centres whose PIN code is missing from *index* are ignored. On a tie
    the centre listed first wins.
    """
    best: Optional[Centre] = None
    best_distance = math.inf

    for centre in centres:
        coord = index.get(centre.pincode)
        if coord is None:
            continue
        distance = haversine_km(origin, coord)
        if distance < best_distance:
            best = centre
            best_distance = distance

    return best


def rank(
    origin: Coordinate,
    centres: Sequence[Centre],
    index: CoordinateIndex,
) -> list[tuple[Centre, float]]:
    """All locatable centres with their distance from *origin*, closest first."""
    ranked = [
        (centre, haversine_km(origin, index[centre.pincode]))
        for centre in centres
        if centre.pincode in index
    ]
    ranked.sort(key=lambda pair: pair[1])
    return ranked
