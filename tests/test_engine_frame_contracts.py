from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from tunneling_app.adapters.solver_barrier.engine import BarrierEngine
from tunneling_app.domain.models import FrameRequest, PhysicalParameters
from tunneling_app.orchestration.session import build_frame_request, init_session

xr = pytest.importorskip("xarray")


def test_frame_dataset_contracts(small_frame: Any) -> None:
    ds = small_frame.data
    assert "x" in ds.coords and "x" in ds.dims
    for var in ("wave_real", "probability", "potential"):
        assert var in ds.data_vars, f"Missing variable {var}"
        assert ds[var].dims == ("x",)
        assert np.isfinite(ds[var].values).all()
    assert (ds["probability"].values >= 0.0).all()
    assert np.all(np.diff(ds["x"].values) > 0)
    assert ds.sizes["x"] == 61
    assert ds.attrs["regime"] == "tunneling"
    assert 0.0 < ds.attrs["transmission_prob"] < 0.5


def test_frame_scalars_are_tiny(small_frame: Any) -> None:
    s = small_frame.scalars
    assert s.flux_residual < 1e-6
    assert s.amplitude_residual < 1e-6
    assert s.continuity_residual < 1e-6
    assert s.notes == "tunneling"


def test_engine_uses_supplied_snapshot() -> None:
    session = init_session()
    req = build_frame_request(session, n_points=11)
    # parameters and snapshot deliberately disagree: the snapshot wins
    other = req.model_copy(update={"params": req.params.model_copy(update={"energy": 9.0})})
    ds = BarrierEngine().run(other).data
    assert ds.attrs["regime"] == "tunneling"


def test_engine_solves_when_no_snapshot() -> None:
    req = FrameRequest(
        params=PhysicalParameters(energy=7.0, barrier_height=5.0, barrier_width=1.5),
        time=0.3,
        x_min=-3.0,
        x_max=4.5,
        n_points=31,
    )
    res = BarrierEngine().run(req)
    assert res.data.attrs["regime"] == "scattering"
    assert res.data.attrs["time"] == 0.3
    pot = res.data["potential"].values
    x = res.data["x"].values
    assert np.all(pot[(x >= 0) & (x <= 1.5)] == 5.0)
    assert np.all(pot[(x < 0) | (x > 1.5)] == 0.0)
