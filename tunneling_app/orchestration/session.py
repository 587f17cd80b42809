from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tunneling_app.adapters.presets_local.store import BUILTIN_PRESETS
from tunneling_app.adapters.solver_barrier.barrier import solve
from tunneling_app.domain.coefficients import WaveCoefficients

# Domain (Pydantic v2) models used by tests and the app
from tunneling_app.domain.models import (
    FrameRequest,
    PhysicalParameters,
    SimulationConfig,
    SolverSettings,
    ViewConfig,
)

__all__ = [
    "AppSession",
    "default_config",
    "init_session",
    "update_params",
    "apply_preset",
    "advance_time",
    "build_frame_request",
]

logger = logging.getLogger(__name__)


@dataclass
class AppSession:
    """
    Thin runtime container passed between UI, orchestration, and engine.

    `coeffs` is always the solution of `config.params`; both are replaced
    together so a render pass never sees a mix of old and new coefficients.
    """

    config: SimulationConfig
    coeffs: WaveCoefficients
    time: float = 0.0


# -------------------------
# Session lifecycle helpers
# -------------------------


def default_config() -> SimulationConfig:
    """Return the reference configuration: E=4.5, V0=6.0, L=1.2, m=1.0."""
    params = PhysicalParameters(
        energy=4.5,
        barrier_height=6.0,
        barrier_width=1.2,
        mass=1.0,
    )
    return SimulationConfig(
        params=params,
        view=ViewConfig(x_margin=3.0, n_points=1200, time_step=0.02),
        solver=SolverSettings(),
    )


def init_session(config: SimulationConfig | None = None) -> AppSession:
    """Create a fresh session (default config unless one is given)."""
    cfg = config or default_config()
    return AppSession(config=cfg, coeffs=solve(cfg.params, cfg.solver), time=0.0)


def _replace_params(session: AppSession, params: PhysicalParameters) -> AppSession:
    # solve first, then swap config and snapshot together
    coeffs = solve(params, session.config.solver)
    session.config, session.coeffs = session.config.model_copy(update={"params": params}), coeffs
    logger.debug(
        "params E=%g V0=%g L=%g m=%g -> %s, T=%.6g",
        params.energy, params.barrier_height, params.barrier_width, params.mass,
        coeffs.regime, coeffs.transmission_prob,
    )
    return session


def update_params(session: AppSession, **kwargs: Any) -> AppSession:
    """
    Update physical parameters from keyword arguments and re-solve.

    Allowed keys: {"energy", "barrier_height", "barrier_width", "mass"}.
    Unknown keys are ignored to keep UI interactions robust. Invalid values
    raise pydantic.ValidationError and leave the session untouched.
    """
    allowed = {"energy", "barrier_height", "barrier_width", "mass"}
    updates: dict[str, float] = {k: float(v) for k, v in kwargs.items() if k in allowed}
    if updates:
        merged = session.config.params.model_dump() | updates
        _replace_params(session, PhysicalParameters.model_validate(merged))
    return session


def apply_preset(session: AppSession, name: str) -> AppSession:
    """Apply a built-in preset (energy, height, width); mass is kept."""
    preset = BUILTIN_PRESETS.get(name)
    if preset is None:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(BUILTIN_PRESETS)}")
    logger.info("Applying preset %s", name)
    return update_params(session, **preset)


def advance_time(session: AppSession, dt: float | None = None) -> AppSession:
    """Advance the animation clock by `dt` (default: view.time_step)."""
    step = session.config.view.time_step if dt is None else float(dt)
    if step < 0.0:
        raise ValueError("time only moves forward")
    session.time += step
    return session


def build_frame_request(session: AppSession, n_points: int | None = None) -> FrameRequest:
    """Pack the current snapshot and clock into an engine request."""
    view = session.config.view
    L = session.config.params.barrier_width
    return FrameRequest(
        params=session.config.params,
        time=session.time,
        x_min=-view.x_margin,
        x_max=L + view.x_margin,
        n_points=int(n_points or view.n_points),
        coeffs=session.coeffs,
        solver=session.config.solver,
    )
