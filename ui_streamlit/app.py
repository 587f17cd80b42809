# --- standard library / typing ----------------------------------------------------------
from __future__ import annotations

import logging
from pathlib import Path
from typing import cast

# --- third-party -----------------------------------------------------------------------
import numpy as np
import streamlit as st
import xarray as xr

# --- first-party: presets --------------------------------------------------------------
from tunneling_app.adapters.presets_local.store import BUILTIN_PRESETS, LocalPresetStore

# --- first-party: engine & spectrum ----------------------------------------------------
from tunneling_app.adapters.solver_barrier.engine import BarrierEngine
from tunneling_app.adapters.solver_barrier.spectrum import transmission_spectrum
from tunneling_app.domain.ports import PlotPresenter, SolverEngine

# --- first-party: exporting and plotting -----------------------------------------------
from tunneling_app.exporting.io import (
    figure_to_png_bytes,
    frame_table,
    spectrum_table,
    to_csv_bytes,
)

# --- first-party: orchestration & reports ----------------------------------------------
from tunneling_app.orchestration.session import (
    apply_preset,
    build_frame_request,
    init_session,
    update_params,
)
from tunneling_app.plotting_plotly.presenter import PlotPresenterPlotly
from tunneling_app.reports.summary import stat_metrics, summary_markdown
from tunneling_app.reports.tutor import tutor_prompt
from tunneling_app.validation.checks import badge_for_residual

# --------------------------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------------------------
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
st.set_page_config(page_title="Quantum Tunneling Lab", layout="wide")
st.title("Quantum Lab — Time-Independent Schrödinger Equation")

if "session" not in st.session_state:
    st.session_state.session = init_session()

session = st.session_state.session
presenter: PlotPresenter = PlotPresenterPlotly()
presets = LocalPresetStore(Path("docs/presets"))
engine: SolverEngine = BarrierEngine()

# --------------------------------------------------------------------------------------
# Sidebar — lab controls
# --------------------------------------------------------------------------------------
st.sidebar.header("Lab Controls")

st.sidebar.caption("Quick presets")
preset_cols = st.sidebar.columns(len(BUILTIN_PRESETS))
for col, preset_name in zip(preset_cols, BUILTIN_PRESETS):
    with col:
        if st.button(preset_name, use_container_width=True):
            st.session_state.session = apply_preset(session, preset_name)
            session = st.session_state.session

p = session.config.params
E = st.sidebar.slider("Particle Energy (E)", 0.1, 10.0, float(p.energy), 0.1)
V0 = st.sidebar.slider("Barrier Height (V₀)", 0.0, 10.0, float(p.barrier_height), 0.1)
L = st.sidebar.slider("Barrier Width (L)", 0.2, 4.0, float(p.barrier_width), 0.1)
with st.sidebar.expander("Particle", expanded=False):
    m = st.number_input("Mass (m)", min_value=0.1, value=float(p.mass), step=0.1)

# Sliders drive the session; coefficients are re-solved only when something moved
if (E, V0, L, m) != (p.energy, p.barrier_height, p.barrier_width, p.mass):
    st.session_state.session = update_params(
        session, energy=E, barrier_height=V0, barrier_width=L, mass=m
    )
    session = st.session_state.session

with st.sidebar.expander("Animation", expanded=False):
    n_frames = st.slider("Frames", min_value=10, max_value=240, value=90, step=10)
    n_points = st.slider("x samples", min_value=200, max_value=2400,
                         value=int(session.config.view.n_points), step=100)

with st.sidebar.expander("Saved presets", expanded=False):
    name = st.text_input("Preset name", value="my_preset")
    c1, c2, c3 = st.columns(3)
    with c1:
        if st.button("Save", use_container_width=True):
            presets.save(name, session.config)
            st.success(f"Preset '{name}' saved.", icon="💾")
    with c2:
        if st.button("Load", use_container_width=True):
            try:
                st.session_state.session = init_session(presets.load(name))
                session = st.session_state.session
                st.success(f"Preset '{name}' loaded.", icon="📥")
            except FileNotFoundError:
                st.error(f"No preset named '{name}'.")
    with c3:
        if st.button("Delete", use_container_width=True):
            presets.remove(name)
            st.warning(f"Preset '{name}' deleted.", icon="🗑️")
    st.caption(f"Available: {', '.join(presets.list()) or '(none)'}")

# --------------------------------------------------------------------------------------
# Stats bar
# --------------------------------------------------------------------------------------
coeffs = session.coeffs
metrics = stat_metrics(coeffs)
for col, (label, value) in zip(st.columns(len(metrics)), metrics):
    with col:
        st.metric(label, value)

# --------------------------------------------------------------------------------------
# Tabs
# --------------------------------------------------------------------------------------
tab1, tab2, tab3, tab4 = st.tabs(["Wavefunction", "Transmission spectrum", "Tutor", "Export"])

res = engine.run(build_frame_request(session, n_points=n_points))
ds: xr.Dataset = cast(xr.Dataset, res.data)

# ---- Tab 1: Wavefunction -------------------------------------------------------------
with tab1:
    fig_anim = presenter.wave_animation(session, n_frames=int(n_frames), engine=engine)
    st.plotly_chart(fig_anim, use_container_width=True)
    st.caption(
        "Blue: Re Ψ(x,t), animated phase evolution. Purple: probability density |Ψ|². "
        "Red: the barrier V₀ (scaled). Green dashed: the particle energy E."
    )
    s = res.scalars
    st.write(
        f"Flux residual {s.flux_residual:.2e} ({badge_for_residual(s.flux_residual)}) · "
        f"continuity residual {s.continuity_residual:.2e} "
        f"({badge_for_residual(s.continuity_residual)})"
    )

# ---- Tab 2: Transmission spectrum ----------------------------------------------------
with tab2:
    energies = np.linspace(0.1, 10.0, 400)
    spec_ds = transmission_spectrum(session.config.params, energies, session.config.solver)
    fig_t = presenter.transmission_plot(spec_ds, energy=session.config.params.energy)
    st.plotly_chart(fig_t, use_container_width=True)
    st.caption("Above V₀ the transmission oscillates; T = 1 at the resonances k'L = nπ.")

# ---- Tab 3: Tutor --------------------------------------------------------------------
with tab3:
    question = st.text_input("Ask about the simulation", value="")
    st.markdown(summary_markdown(session.config.params, coeffs))
    with st.expander("Prompt for the narrative assistant", expanded=False):
        st.code(tutor_prompt(session.config.params, coeffs.transmission_prob, question or None))

# ---- Tab 4: Export -------------------------------------------------------------------
with tab4:
    c1, c2, c3 = st.columns(3)
    with c1:
        st.download_button(
            "Download CSV (frame)",
            data=to_csv_bytes(frame_table(ds)),
            file_name="frame.csv",
            mime="text/csv",
        )
    with c2:
        st.download_button(
            "Download CSV (T(E))",
            data=to_csv_bytes(spectrum_table(spec_ds)),
            file_name="transmission_spectrum.csv",
            mime="text/csv",
        )
    with c3:
        try:
            png = figure_to_png_bytes(presenter.wave_plot(res, session.config.params))
            st.download_button("Download PNG", data=png, file_name="frame.png", mime="image/png")
        except RuntimeError as e:
            st.info(str(e))

# --------------------------------------------------------------------------------------
# Footer
# --------------------------------------------------------------------------------------
st.caption(
    f"Regime: **{coeffs.regime}** · E used: **{coeffs.energy:.4g}** · Presets path: `{presets.base_dir}`"
)
