from __future__ import annotations

import numpy as np
import pytest

from tunneling_app.adapters.solver_barrier.spectrum import transmission_spectrum
from tunneling_app.domain.models import PhysicalParameters
from tunneling_app.orchestration.session import init_session


def test_wave_plot_snapshot_like(wave_fig):
    fig = wave_fig
    names = [tr.name for tr in fig.data]
    assert names[:2] == ["|Ψ(x)|²", "Re[Ψ(x,t)]"]
    assert names[2].startswith("V₀ =") and names[3].startswith("E =")
    assert fig.layout.xaxis.title.text == "Position x"
    assert fig.layout.title.text.startswith("Ψ(x, t) at t=")
    x = np.array(fig.data[0].x)
    assert x.size == 61
    assert x[0] == -3.0 and x[-1] == pytest.approx(4.2)
    # |Ψ|² is non-negative, barrier drawn at V0/5 = 1.2
    assert float(np.min(fig.data[0].y)) >= 0.0
    assert float(np.max(fig.data[2].y)) == pytest.approx(1.2)


def test_wave_animation_uses_one_snapshot(presenter):
    session = init_session()
    fig = presenter.wave_animation(session, n_frames=5)
    assert len(fig.frames) == 5
    # same coefficients: |Ψ|² identical across frames, Re Ψ moves
    p0 = np.array(fig.frames[0].data[0].y)
    p4 = np.array(fig.frames[4].data[0].y)
    assert np.allclose(p0, p4, atol=1e-12)
    r0 = np.array(fig.frames[0].data[1].y)
    r4 = np.array(fig.frames[4].data[1].y)
    assert not np.allclose(r0, r4)
    assert session.time == 0.0  # rendering never moves the clock


def test_transmission_plot_structure(presenter):
    params = PhysicalParameters(energy=4.5, barrier_height=6.0, barrier_width=1.2)
    ds = transmission_spectrum(params, np.linspace(0.5, 10.0, 20))
    fig = presenter.transmission_plot(ds, energy=4.5)
    assert [tr.name for tr in fig.data] == ["T(E)", "R(E)", "current E"]
    assert fig.layout.xaxis.title.text == "Energy E"
    y = np.array(fig.data[0].y)
    assert y.size == 20 and float(y.min()) >= 0.0 and float(y.max()) <= 1.0
