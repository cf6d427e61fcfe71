"""
Data layer package.

Public API
----------
- :func:`series_frame` -- named series → step-indexed DataFrame.
- :func:`save_frame` / :func:`load_frame` -- CSV or Parquet by suffix.
"""

from .storage import load_frame, save_frame, series_frame

__all__ = [
    "load_frame",
    "save_frame",
    "series_frame",
]
