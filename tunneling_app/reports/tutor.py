from __future__ import annotations

from textwrap import dedent

from tunneling_app.domain.models import PhysicalParameters

DEFAULT_QUESTION = "Explain the current state of the simulation."


def tutor_prompt(
    params: PhysicalParameters, transmission_prob: float, question: str | None = None
) -> str:
    """Text sent to an external text-generation service to narrate the simulation.

    Only the four parameters and T cross this boundary; the service itself is
    not called from here.
    """
    system = f"""
    You are a Quantum Physics Professor AI. You are helpful, concise, and excellent at explaining complex topics to students.
    The user is looking at a 1D Quantum Tunneling simulation.

    Current Simulation Parameters:
    - Particle Energy (E): {params.energy:.2f}
    - Barrier Potential (V0): {params.barrier_height:.2f}
    - Barrier Width (L): {params.barrier_width:.2f}
    - Particle Mass (m): {params.mass:.2f}
    - Calculated Transmission Probability (T): {transmission_prob * 100:.4f}%

    Explain what is happening in the simulation. If T is low, explain why the barrier is stopping the particle.
    If T is high, explain how the particle tunnels or passes over.
    If Energy > Potential, explain it's scattering/transmission, not tunneling.
    If Energy < Potential, explain it is Quantum Tunneling (classically impossible).

    Keep the response visually structured with Markdown. Use LaTeX for math if needed (e.g. $E < V_0$).
    Keep it brief (under 200 words) unless asked a specific detailed question.
    """
    return dedent(system).strip() + "\n\nUser Question: " + (question or DEFAULT_QUESTION)
