"""Typed data and result models for examcentre."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union


@dataclass(frozen=True)
class Centre:
    """A test centre as listed in the centre table."""

    state: str
    city: str            # identity for exclusion
    pincode: str

    def to_dict(self) -> dict:
        return {"state": self.state, "city": self.city, "pincode": self.pincode}


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in decimal degrees."""

    lat: float
    lon: float


CoordinateIndex = Mapping[str, Coordinate]


# ── Allocation outcomes ───────────────────────────────────────


@dataclass(frozen=True)
class InvalidPincode:
    """The input is not exactly six ASCII digits."""

    pincode: str
    status: str = field(default="invalid_pincode", init=False)

    def to_dict(self) -> dict:
        return {"status": self.status, "pincode": self.pincode}


@dataclass(frozen=True)
class PincodeNotFound:
    """The input is well-formed but has no known coordinates."""

    pincode: str
    status: str = field(default="pincode_not_found", init=False)

    def to_dict(self) -> dict:
        return {"status": self.status, "pincode": self.pincode}


@dataclass(frozen=True)
class NoNearestFound:
    """No centre in the list has resolvable coordinates."""

    pincode: str
    status: str = field(default="no_nearest_found", init=False)

    def to_dict(self) -> dict:
        return {"status": self.status, "pincode": self.pincode}


@dataclass(frozen=True)
class NoAlternativeAvailable:
    """
    Every centre shares the nearest centre's city.

    The nearest centre is reported as the allocation, but callers should
    treat this as a failure to avoid it.
    """

    pincode: str
    nearest: Centre
    status: str = field(default="no_alternative_available", init=False)

    @property
    def allocated(self) -> Centre:
        return self.nearest

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "pincode": self.pincode,
            "nearest": self.nearest.to_dict(),
            "allocated": self.nearest.to_dict(),
        }


@dataclass(frozen=True)
class Allocated:
    """Successful allocation to a centre away from the nearest one."""

    pincode: str
    nearest: Centre
    allocated: Centre
    status: str = field(default="allocated", init=False)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "pincode": self.pincode,
            "nearest": self.nearest.to_dict(),
            "allocated": self.allocated.to_dict(),
        }


AllocationResult = Union[
    InvalidPincode,
    PincodeNotFound,
    NoNearestFound,
    NoAlternativeAvailable,
    Allocated,
]
