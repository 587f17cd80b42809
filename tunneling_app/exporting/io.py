from __future__ import annotations

import io
from typing import Any, Iterable

import pandas as pd
import xarray as xr


def frame_table(
    ds: xr.Dataset, vars: Iterable[str] = ("wave_real", "probability", "potential")
) -> pd.DataFrame:
    """Return a tidy table of one frame: one row per x, one column per variable."""
    df = ds[list(vars)].to_dataframe().reset_index()
    df.insert(1, "time", float(ds.attrs.get("time", 0.0)))
    return df


def spectrum_table(ds: xr.Dataset) -> pd.DataFrame:
    # energy, transmission, reflection, is_tunneling
    return ds[["transmission", "reflection", "is_tunneling"]].to_dataframe().reset_index()


def figure_to_png_bytes(fig: Any) -> bytes:
    """Export a Plotly figure to PNG bytes via Kaleido.
    Raises RuntimeError with a helpful message when Kaleido is not available.
    """
    try:
        return fig.to_image(format="png", engine="kaleido")
    except Exception as e:  # noqa: BLE001
        raise RuntimeError(
            "Static image export requires the optional 'export' extra: pip install -e '.[export]'"
        ) from e


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
