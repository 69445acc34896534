"""
Exam Centre Allocation — Interactive CLI
========================================
Thin wrapper around the examcentre library.

Usage:
    examcentre                   # interactive mode
    examcentre 110001            # single allocation
    examcentre --list            # list available centres
    examcentre --rank 110001     # closest centres with distances

Data paths and options are read from environment variables:
    EXAMCENTRE_CENTRES_CSV        Path to test_centres.csv
    EXAMCENTRE_COORDINATES_JSON   Path to pincode_coordinates.json
    EXAMCENTRE_LOG_LEVEL          Logging level (default WARNING)
    EXAMCENTRE_SEED               Integer seed for reproducible draws

If the paths are not set, looks for the files in the current working directory.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from examcentre import ExamCentreAllocator
from examcentre.exceptions import ExamCentreError
from examcentre.models import (
    Allocated,
    AllocationResult,
    InvalidPincode,
    NoAlternativeAvailable,
    NoNearestFound,
    PincodeNotFound,
)

# ── Defaults ──────────────────────────────────────────────────
_DEFAULT_CENTRES = os.environ.get(
    "EXAMCENTRE_CENTRES_CSV", str(Path.cwd() / "test_centres.csv")
)
_DEFAULT_COORDINATES = os.environ.get(
    "EXAMCENTRE_COORDINATES_JSON", str(Path.cwd() / "pincode_coordinates.json")
)

_BANNER = """\
╔══════════════════════════════════════╗
║      Exam Centre Allocation          ║
║   Pincode → Examination City         ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _setup_logging() -> None:
    name = os.environ.get("EXAMCENTRE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _seed_from_env() -> Optional[int]:
    raw = os.environ.get("EXAMCENTRE_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-integer EXAMCENTRE_SEED=%r", raw
        )
        return None


def format_result(result: AllocationResult) -> str:
    """Render an allocation outcome as user-facing text."""
    if isinstance(result, InvalidPincode):
        return "Please enter a valid 6-digit pincode."
    if isinstance(result, PincodeNotFound):
        return "Pincode not found. Please try another one."
    if isinstance(result, NoNearestFound):
        return "Could not determine the nearest city."
    if isinstance(result, NoAlternativeAvailable):
        return (
            f"Every centre is in {result.nearest.city}; "
            "no alternative city can be allotted."
        )
    if isinstance(result, Allocated):
        return (
            f"Your nearest city is {result.nearest.city}.\n"
            "NO. This city will not be allotted to you.\n"
            "────────────────────────────────────────\n"
            "Your allocated examination city is:\n"
            f"  {result.allocated.city} ({result.allocated.state})"
        )
    raise TypeError(f"Unknown allocation result: {result!r}")


def _print_centres(client: ExamCentreAllocator) -> None:
    print(f"Available test centres ({len(client.centres)}):")
    for centre in client.centres:
        print(f"  {centre.city:<25} {centre.state}")


def _print_ranking(client: ExamCentreAllocator, pincode: str) -> int:
    ranked = client.nearest_centres(pincode)
    if not ranked:
        print(f"No centres could be ranked for '{pincode}'.", file=sys.stderr)
        return 1
    for position, (centre, distance) in enumerate(ranked, start=1):
        print(f"  {position}. {centre.city:<25} {distance:>9.1f} km")
    return 0


def _run_interactive(client: ExamCentreAllocator) -> None:
    print(_BANNER)
    _print_centres(client)

    while True:
        try:
            raw = input("\nPincode: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ Pincode is required.")
            continue

        result = client.allocate(raw)
        prefix = "  ✓ " if isinstance(result, Allocated) else "  ✗ "
        print(prefix + format_result(result).replace("\n", "\n    "))


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point — supports both CLI args and interactive mode."""
    args = sys.argv[1:] if argv is None else argv
    _setup_logging()

    try:
        client = ExamCentreAllocator(
            centres_csv=_DEFAULT_CENTRES,
            coordinates_json=_DEFAULT_COORDINATES,
            seed=_seed_from_env(),
        )
    except ExamCentreError as exc:
        print("Could not load test centre data.", file=sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Set EXAMCENTRE_CENTRES_CSV and EXAMCENTRE_COORDINATES_JSON, "
            "or run from the directory containing the data files.",
            file=sys.stderr,
        )
        sys.exit(2)

    if not args:
        _run_interactive(client)
        return

    if args[0] == "--list":
        _print_centres(client)
        return

    if args[0] == "--rank":
        if len(args) != 2:
            print("Usage: examcentre --rank PINCODE", file=sys.stderr)
            sys.exit(2)
        sys.exit(_print_ranking(client, args[1].strip()))

    # Single-shot mode
    result = client.allocate(args[0].strip())
    if isinstance(result, Allocated):
        print(format_result(result))
        return
    print(format_result(result), file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
