"""
Command line entry point: liquid drop model reports for a list of nuclides.

Usage:
    ldm-binding                      # demo set: U-236, Pd-117, Xe-140, Sr-94
    ldm-binding 56:26 208:82         # A:Z pairs
    ldm-binding --json 4:2
"""

import argparse
import json
import sys
from typing import Optional, Sequence

from src.core.domain import Isotope, NuclideError
from src.core.domain.units import ENERGY_UNITS
from src.logger import cli_logger, setup_logging
from src.reporting import (
    MAX_PRECISION,
    MIN_PRECISION,
    ReportConfig,
    format_report,
    isotope_report_dict,
)

# Uranium-236, Palladium-117, Xenon-140, Strontium-94
DEMO_NUCLIDES: tuple[tuple[int, int], ...] = (
    (236, 92),
    (117, 46),
    (140, 54),
    (94, 38),
)


def parse_nuclide(text: str) -> tuple[int, int]:
    """Parse an `A:Z` pair."""
    parts = text.split(":")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected A:Z, got {text!r}")
    try:
        A, Z = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"A and Z must be integers, got {text!r}") from None
    return A, Z


def parse_precision(text: str) -> int:
    """Parse the number of decimal places accepted by ReportConfig."""
    try:
        precision = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"precision must be an integer, got {text!r}") from None
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise argparse.ArgumentTypeError(
            f"precision must be in [{MIN_PRECISION}, {MAX_PRECISION}], got {precision}"
        )
    return precision


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ldm-binding",
        description="Nuclear binding energy from the semi-empirical (liquid drop) mass formula.",
    )
    parser.add_argument(
        "nuclides",
        nargs="*",
        type=parse_nuclide,
        metavar="A:Z",
        help="mass number and atomic number, e.g. 236:92 (default: demo set)",
    )
    parser.add_argument(
        "--json", action="store_true", help="emit isotope_report JSON instead of text"
    )
    parser.add_argument(
        "--upper-isobar",
        action="store_true",
        help="also report the isobar with Z+1, N-1",
    )
    parser.add_argument(
        "--precision",
        type=parse_precision,
        default=5,
        help=f"decimal places ({MIN_PRECISION}..{MAX_PRECISION})",
    )
    parser.add_argument(
        "--energy-unit",
        choices=sorted(ENERGY_UNITS),
        default="MeV",
        help="energy unit for the text report",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    pairs = args.nuclides or list(DEMO_NUCLIDES)
    cli_logger.info("Reporting %d nuclide(s)", len(pairs))

    try:
        isotopes = []
        for A, Z in pairs:
            isotope = Isotope.from_nucleons(A, Z)
            isotopes.append(isotope)
            if args.upper_isobar:
                isotopes.append(isotope.upper_isobar())
    except NuclideError as e:
        cli_logger.error("%s: %s", type(e).__name__, e)
        return 1

    if args.json:
        print(json.dumps([isotope_report_dict(i) for i in isotopes], indent=2))
        return 0

    config = ReportConfig(precision=args.precision, energy_unit=args.energy_unit)
    for isotope in isotopes:
        print(format_report(isotope, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
