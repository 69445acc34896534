"""examcentre — Allocate an examination centre away from the nearest one."""

from examcentre.allocator import allocate
from examcentre.client import ExamCentreAllocator
from examcentre.exceptions import DataInvalid, DataUnavailable, ExamCentreError
from examcentre.models import (
    Allocated,
    AllocationResult,
    Centre,
    Coordinate,
    InvalidPincode,
    NoAlternativeAvailable,
    NoNearestFound,
    PincodeNotFound,
)

__all__ = [
    "allocate",
    "ExamCentreAllocator",
    "Centre",
    "Coordinate",
    "AllocationResult",
    "Allocated",
    "InvalidPincode",
    "PincodeNotFound",
    "NoNearestFound",
    "NoAlternativeAvailable",
    "ExamCentreError",
    "DataUnavailable",
    "DataInvalid",
]
