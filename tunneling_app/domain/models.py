#"""
#Domain models (v1.0.0)
#
#Pydantic v2 models define validated, immutable inputs and configuration.
#Frame results are carried as xarray Datasets with an `x` coordinate.
#"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from tunneling_app.domain.coefficients import WaveCoefficients


class PhysicalParameters(BaseModel):
    """Particle energy E, barrier height V0, barrier width L and mass m (ħ = 1)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    energy: float = Field(..., gt=0.0, description="Particle energy E")
    barrier_height: float = Field(..., ge=0.0, description="Barrier height V0")
    barrier_width: float = Field(..., gt=0.0, description="Barrier width L")
    mass: float = Field(1.0, gt=0.0, description="Particle mass m")


class SolverSettings(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    degeneracy_eps: float = Field(1e-4, gt=0.0)
    degeneracy_offset: float = Field(1e-3, gt=0.0)


class ViewConfig(BaseModel):
    x_margin: float = Field(3.0, gt=0.0)  # window is [-margin, L + margin]
    n_points: int = Field(1200, ge=2)
    time_step: float = Field(0.02, gt=0.0)


class SimulationConfig(BaseModel):
    params: PhysicalParameters
    view: ViewConfig = ViewConfig()
    solver: SolverSettings = SolverSettings()
    version: str = "1.0.0"


# --- Frame requests and results ---
class FrameRequest(BaseModel):
    """One animation frame: sample the wavefunction on [x_min, x_max] at `time`.

    When `coeffs` is set the engine samples that snapshot instead of solving
    again, so a whole render pass stays on one set of coefficients.
    """

    params: PhysicalParameters
    time: float = 0.0
    x_min: float
    x_max: float
    n_points: int = Field(1200, ge=2)
    coeffs: InstanceOf[WaveCoefficients] | None = None
    solver: SolverSettings = SolverSettings()


class SolverScalars(BaseModel):
    flux_residual: float
    amplitude_residual: float
    continuity_residual: float
    notes: str = ""


# FrameResult carries an xarray.Dataset in runtime, not validated here to avoid heavy import.
class FrameResult(BaseModel):
    data: object  # xarray.Dataset expected at runtime
    scalars: SolverScalars
    schema_version: str = "1.0.0"
