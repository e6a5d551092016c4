"""Simulation error types."""

from __future__ import annotations


class SimulationError(Exception):
    """Error during simulation execution."""

    pass


class GameOverError(SimulationError):
    """A finished game was asked to play another round."""

    pass


class StepLimitExceeded(SimulationError):
    """A trial ran past its step ceiling.

    This is never a valid game result: it means the configuration (or the
    engine) produced a game that does not terminate.
    """

    def __init__(self, steps: int, limit: int):
        super().__init__(steps, limit)
        self.steps = steps
        self.limit = limit

    def __str__(self) -> str:
        return f"Max step count exceeded: {self.steps} steps (limit {self.limit})"
