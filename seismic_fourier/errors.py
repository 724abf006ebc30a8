"""Exception taxonomy shared by the loader, the analysis core and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SpectrumError(Exception):
    """Base class for errors that abort a spectrum run."""


class LoadError(SpectrumError):
    """Input wave file is missing, unreadable, or does not parse into a wave."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = super().__str__()
        if self.path is None:
            return msg
        return f"{self.path}: {msg}"


class DegenerateInputError(SpectrumError, ValueError):
    """Wave cannot be analysed (no samples, non-positive interval, non-finite data)."""
