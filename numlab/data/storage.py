from pathlib import Path
from typing import Mapping, Sequence

import numpy as np
import pandas as pd


def _ensure_dir(path: Path) -> None:
    """Create directory if it does not exist."""
    path.mkdir(parents=True, exist_ok=True)


# ---------- BUILD ----------

def series_frame(columns: Mapping[str, Sequence[float] | np.ndarray]) -> pd.DataFrame:
    """
    Build a DataFrame from equal-length named series, indexed by step.

    Example:
        series_frame({"x": simulate_ar(100, 0.0, [0.5], 1.0)})
    """
    df = pd.DataFrame({name: np.asarray(vals, dtype=np.float64) for name, vals in columns.items()})
    df.index.name = "step"
    return df


# ---------- SAVE / LOAD ----------

def save_frame(df: pd.DataFrame, path: str | Path) -> Path:
    """
    Save DataFrame as CSV or Parquet depending on the file suffix.

    Example:
        save_frame(df, "out/arma_500.parquet")
    """
    full_path = Path(path)
    _ensure_dir(full_path.parent)

    if full_path.suffix == ".parquet":
        df.to_parquet(full_path, engine="pyarrow")
    else:
        df.to_csv(full_path)
    return full_path


def load_frame(path: str | Path) -> pd.DataFrame:
    """
    Load a frame written by :func:`save_frame`.
    """
    full_path = Path(path)
    if full_path.suffix == ".parquet":
        return pd.read_parquet(full_path, engine="pyarrow")
    return pd.read_csv(full_path, index_col="step")
