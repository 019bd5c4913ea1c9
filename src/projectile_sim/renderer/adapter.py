# MIT License (see LICENSE)
"""
Renderer adapters for trajectory output.

This module provides an abstract base class for rendering simulation ticks
and three implementations. The simulation loop has no output dependency;
these adapters are optional.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

import numpy as np

from ..types import State, Sample

END_OF_SIMULATION = "End of simulation..."


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(sample.time)
        renderer.draw_state(sample.state)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_sample(sample)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Elapsed simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_state(self, state: State) -> None:
        """Draw the projectile state for the current frame."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_sample(self, sample: Sample) -> None:
        """Render one simulation tick."""
        self.begin_frame(sample.time)
        self.draw_state(sample.state)
        self.end_frame()

    def finish(self) -> None:
        """Called once after the last tick. Default does nothing."""


class ConsoleRenderer(RendererAdapter):
    """
    Text renderer printing every tick to a stream (stdout by default).

    Output:
        t = 0.10000
            y = 3.486500656    y' = 34.374674059
            x = 3.535533906    x' = 35.355339059
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, time: float) -> None:
        self.output.write(f"t = {time:.5f}\n")

    def draw_state(self, state: State) -> None:
        self.output.write(f"\ty = {state.vert_pos:.9f}\ty' = {state.vert_vel:.9f}\n")
        self.output.write(f"\tx = {state.horz_pos:.9f}\tx' = {state.horz_vel:.9f}\n")

    def end_frame(self) -> None:
        self.output.flush()

    def finish(self) -> None:
        self.output.write(END_OF_SIMULATION + "\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer.

    Useful for benchmarks and quiet runs.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_state(self, state: State) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that keeps every tick in memory.

    Rows are (time, vert_pos, horz_pos, vert_vel, horz_vel).

    Example:
        renderer = BufferedRenderer()
        run_simulation(params, renderer)
        traj = renderer.as_array()
        print(traj[:, 2].max())   # furthest downrange point
    """

    COLUMNS = ("time", "vert_pos", "horz_pos", "vert_vel", "horz_vel")

    def __init__(self):
        self.rows: list[tuple[float, float, float, float, float]] = []
        self._time: float | None = None

    def begin_frame(self, time: float) -> None:
        self._time = time

    def draw_state(self, state: State) -> None:
        if self._time is None:
            return
        self.rows.append((self._time, state.vert_pos, state.horz_pos, state.vert_vel, state.horz_vel))

    def end_frame(self) -> None:
        self._time = None

    def as_array(self) -> np.ndarray:
        """Recorded trajectory as a float64 array of shape (n, 5)."""
        return np.array(self.rows, dtype=np.float64).reshape(-1, len(self.COLUMNS))

    def clear(self) -> None:
        """Drop all recorded rows."""
        self.rows.clear()
