from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from seismic_fourier.errors import LoadError
from seismic_fourier.models.wave import Wave

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaveCsvReaderConfig:
    """
    Reader configuration for wave CSV files.

    dt_rel_tol:
      Relative tolerance on each time step vs dt = t[1] - t[0].
      Steps outside the tolerance are accepted but reported in Wave.warnings.
    encoding:
      Text encoding of the file.
    """
    dt_rel_tol: float = 1e-6
    encoding: str = "utf-8"


class WaveCsvReader:
    """
    Reader for wave CSV files.

    Layout:
      - line 1: header; field 0 names the time column, fields 1.. name the waves
      - lines 2..: time [s] followed by one sample per wave
      - dt is taken from the time column (t[1] - t[0]); at least two rows are needed
    """

    def __init__(self, config: Optional[WaveCsvReaderConfig] = None):
        self.config = config or WaveCsvReaderConfig()

    def read(self, file_path: str | Path) -> List[Wave]:
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise LoadError("file not found", path=path)

        try:
            # header=None: the header line fixes the field count for every row
            table = pd.read_csv(
                path,
                header=None,
                dtype=str,
                skipinitialspace=True,
                skip_blank_lines=True,
                encoding=self.config.encoding,
            )
        except pd.errors.EmptyDataError as e:
            raise LoadError("file is empty", path=path) from e
        except pd.errors.ParserError as e:
            raise LoadError(f"malformed CSV ({e})", path=path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"cannot read file ({e})", path=path) from e

        if table.shape[1] < 2:
            raise LoadError("need a time column and at least one wave column", path=path)
        names = self._wave_names(table.iloc[0], path)
        raw = table.iloc[1:].reset_index(drop=True)
        if raw.shape[0] == 0:
            raise LoadError("no data rows", path=path)
        if raw.shape[0] < 2:
            raise LoadError("need at least two rows to derive the sample interval", path=path)

        mat = self._to_numeric(raw, path)
        t = mat[:, 0]
        dt = float(t[1] - t[0])
        if not np.isfinite(dt) or dt <= 0:
            raise LoadError(f"time column must increase (dt={dt:.6g})", path=path)

        warnings: list[str] = []
        steps = np.diff(t)
        bad = np.abs(steps - dt) > self.config.dt_rel_tol * dt
        if np.any(bad):
            first = int(np.argmax(bad))
            msg = (
                f"non-uniform time step: {int(np.sum(bad))} of {steps.size} steps deviate from "
                f"dt={dt:.6g} s (first at row {first + 1}, step={steps[first]:.6g} s)"
            )
            logger.warning("%s: %s", path, msg)
            warnings.append(msg)

        waves = [
            Wave(
                name=name,
                dt=dt,
                data=np.ascontiguousarray(mat[:, j + 1], dtype=np.float64),
                source_path=path,
                warnings=tuple(warnings),
            )
            for j, name in enumerate(names)
        ]
        logger.info("%s: read %d wave(s), %d samples, dt=%.6g s", path, len(waves), mat.shape[0], dt)
        return waves

    @staticmethod
    def _wave_names(header: pd.Series, path: Path) -> List[str]:
        names = ["" if pd.isna(c) else str(c).strip() for c in header.iloc[1:]]
        if not all(names):
            raise LoadError("empty wave name in header", path=path)
        dup = sorted({n for n in names if names.count(n) > 1})
        if dup:
            raise LoadError(f"duplicate wave name(s) in header: {', '.join(dup)}", path=path)
        return names

    @staticmethod
    def _to_numeric(raw: pd.DataFrame, path: Path) -> np.ndarray:
        num = raw.apply(lambda s: pd.to_numeric(s.str.strip(), errors="coerce"))
        bad = num.isna().to_numpy()
        if np.any(bad):
            row, col = (int(v[0]) for v in np.nonzero(bad))
            cell = raw.iat[row, col]
            what = "missing value" if pd.isna(cell) else f"non-numeric value {cell!r}"
            raise LoadError(f"{what} at data row {row + 1}, column {col + 1}", path=path)
        return num.to_numpy(dtype=np.float64)


def load_csv(file_path: str | Path, config: Optional[WaveCsvReaderConfig] = None) -> List[Wave]:
    """Read every wave of a CSV file, in column order."""
    return WaveCsvReader(config).read(file_path)
