# """
# Ports (interfaces) for adapters. The UI and orchestration depend ONLY on these.
# """
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .models import FrameRequest, FrameResult, PhysicalParameters

if TYPE_CHECKING:
    # orchestration imports the domain, not the other way round
    from tunneling_app.orchestration.session import AppSession  # pragma: no cover


class SolverEngine(ABC):
    @abstractmethod
    def run(self, request: FrameRequest) -> FrameResult:
        """Sample one frame and return a Dataset on `x` plus diagnostic scalars."""


class PlotPresenter(ABC):
    @abstractmethod
    def wave_plot(self, result: FrameResult, params: PhysicalParameters) -> Any:
        """Figure: Re Ψ(x,t), |Ψ|² and the barrier outline for one frame."""

    @abstractmethod
    def wave_animation(
        self, session: AppSession, n_frames: int = 60, engine: SolverEngine | None = None
    ) -> Any:
        """Figure with `n_frames` time steps sampled from the session's coefficient snapshot."""

    @abstractmethod
    def transmission_plot(self, spectrum: Any, energy: float | None = None) -> Any:
        """Figure: T(E) and R(E) over an energy sweep, optional marker at `energy`."""
