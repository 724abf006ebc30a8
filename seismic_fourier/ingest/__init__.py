"""Ingest package - wave file readers.

This package handles:
- Reading multi-column wave CSV files (time column + one column per wave)
- Deriving the sample interval from the recorded time column
- Flagging non-uniform time steps as warnings on the produced waves

Key classes:
- WaveCsvReader: Reads a CSV file into a list of Wave objects

Design principle:
- Readers produce validated Wave objects
- Every failure is reported as LoadError
- Samples are never modified during ingestion
"""

from .readers_csv import WaveCsvReader, WaveCsvReaderConfig, load_csv

__all__ = [
    "WaveCsvReader",
    "WaveCsvReaderConfig",
    "load_csv",
]
