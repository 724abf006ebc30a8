"""Text and CSV rendering of a :class:`~seismic_fourier.models.spectrum.SpectrumBins`.

Both renderers read the same :func:`to_dataframe` table, so they show identical
numbers and differ only in layout and precision.

Formats
-------
table
    ``    k        T        f        A        B      AMP    PHASE``, a blank line,
    then one ``%5d`` + ``%8.3f`` row per bin.
csv
    ``k,T,f,AMP,PHASE`` (or ``k,T,f,A,B,AMP,PHASE`` with coefficients), ``%.6f``.
phase-only
    ``omega, PHASE`` pairs with ``omega = 2*pi*f``.
"""

from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import Literal, Optional, TextIO

import pandas as pd

from seismic_fourier.models.spectrum import SpectrumBins

COLUMNS = ("k", "T", "f", "A", "B", "AMP", "PHASE")
CSV_COLUMNS = ("k", "T", "f", "AMP", "PHASE")
PHASE_COLUMNS = ("omega", "PHASE")


@dataclass(frozen=True)
class RenderConfig:
    """
    fmt:
      "table" (fixed width, 3 decimals) or "csv" (6 decimals).
    phase_only:
      Render (omega, PHASE) pairs instead of the full bin table.
    with_coefficients:
      CSV only: include the A and B columns.
    """
    fmt: Literal["table", "csv"] = "table"
    phase_only: bool = False
    with_coefficients: bool = False


def to_dataframe(spectrum: SpectrumBins) -> pd.DataFrame:
    """Per-bin table with columns ``k, T, f, A, B, AMP, PHASE``."""
    return pd.DataFrame(
        {
            "k": spectrum.k,
            "T": spectrum.period,
            "f": spectrum.freq,
            "A": spectrum.a,
            "B": spectrum.b,
            "AMP": spectrum.amplitude,
            "PHASE": spectrum.phase,
        },
        columns=list(COLUMNS),
    )


def phase_dataframe(spectrum: SpectrumBins) -> pd.DataFrame:
    return pd.DataFrame({"omega": spectrum.omega, "PHASE": spectrum.phase}, columns=list(PHASE_COLUMNS))


def write_table(spectrum: SpectrumBins, out: TextIO) -> None:
    df = to_dataframe(spectrum)
    out.write("%5s" % "k" + "".join(" %8s" % c for c in COLUMNS[1:]) + "\n")
    out.write("\n")
    for row in df.itertuples(index=False):
        out.write("%5d %8.3f %8.3f %8.3f %8.3f %8.3f %8.3f\n" % tuple(row))


def write_csv(spectrum: SpectrumBins, out: TextIO, *, with_coefficients: bool = False) -> None:
    df = to_dataframe(spectrum)
    cols = list(COLUMNS) if with_coefficients else list(CSV_COLUMNS)
    df.to_csv(out, columns=cols, index=False, float_format="%.6f", lineterminator="\n")


def write_phase_table(spectrum: SpectrumBins, out: TextIO) -> None:
    out.write("".join("%8s " % c for c in PHASE_COLUMNS).rstrip() + "\n")
    out.write("\n")
    for omega, phase in phase_dataframe(spectrum).itertuples(index=False):
        out.write("%8.3f %8.3f\n" % (omega, phase))


def write_phase_csv(spectrum: SpectrumBins, out: TextIO) -> None:
    phase_dataframe(spectrum).to_csv(out, index=False, float_format="%.6f", lineterminator="\n")


def render(spectrum: SpectrumBins, config: Optional[RenderConfig] = None, out: Optional[TextIO] = None) -> None:
    """Write ``spectrum`` to ``out`` (default: stdout) according to ``config``."""
    cfg = config or RenderConfig()
    stream = out if out is not None else sys.stdout

    if cfg.fmt not in ("table", "csv"):
        raise ValueError(f"unknown output format {cfg.fmt!r}")

    if cfg.phase_only:
        if cfg.fmt == "csv":
            write_phase_csv(spectrum, stream)
        else:
            write_phase_table(spectrum, stream)
    elif cfg.fmt == "csv":
        write_csv(spectrum, stream, with_coefficients=cfg.with_coefficients)
    else:
        write_table(spectrum, stream)
