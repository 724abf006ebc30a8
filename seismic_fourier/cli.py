from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from typing import List, Optional, Sequence

from seismic_fourier import __version__
from seismic_fourier.analysis import compute_spectrum
from seismic_fourier.errors import LoadError, SpectrumError
from seismic_fourier.ingest import load_csv
from seismic_fourier.models.wave import Wave
from seismic_fourier.render import RenderConfig, render

PROG = "seismic-fourier"

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Fourier amplitude and phase spectrum of a recorded wave.

            The input CSV has a header line, a time column [s] first and one
            column per wave. The first wave is analysed unless --wave is given.
            """
        ),
    )
    p.add_argument("wavefile", nargs="?", help="Wave CSV file")
    p.add_argument("--csv-output", action="store_true", help="Output as CSV.")
    p.add_argument(
        "--with-coefficients",
        action="store_true",
        help="CSV output: include the A and B coefficient columns.",
    )
    p.add_argument("--phase-only", action="store_true", help="Output angular frequency and phase only.")
    p.add_argument("--wave", default=None, help="Name of the wave column to analyse (default: first).")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")
    p.add_argument("--version", action="store_true", help="Show version.")
    return p


def _select_wave(waves: List[Wave], name: Optional[str]) -> Wave:
    if not waves:
        raise LoadError("file contains no waves")
    if name is None:
        return waves[0]
    for w in waves:
        if w.name == name:
            return w
    known = ", ".join(repr(w.name) for w in waves)
    raise LoadError(f"no wave named {name!r} (available: {known})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = _build_parser()
    ns = p.parse_args(list(argv) if argv is not None else None)

    if ns.version:
        print(f"{PROG} v{__version__}")
        return 0

    if ns.wavefile is None:
        p.error("the following arguments are required: wavefile")

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    cfg = RenderConfig(
        fmt="csv" if ns.csv_output else "table",
        phase_only=ns.phase_only,
        with_coefficients=ns.with_coefficients,
    )

    try:
        wave = _select_wave(load_csv(ns.wavefile), ns.wave)
        spectrum = compute_spectrum(wave)
    except SpectrumError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("rendering %d bins of wave %r as %s", spectrum.nfold + 1, wave.name, cfg.fmt)
    render(spectrum, cfg, sys.stdout)
    return 0
