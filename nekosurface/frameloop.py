"""Pause, single-step and timing state for the main frame loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

MAX_FRAME_US = 33000.0
STEP_FRAME_US = 16667.0
PHYSICS_SUBSTEPS = 2
INITIAL_FPS = 30.0
FPS_WINDOW_SECONDS = 0.3


class Key(IntEnum):
    """Keys the frame loop reacts to, with their window-system key codes."""

    R = 82
    T = 84
    Y = 89
    ESCAPE = 256


class KeyAction(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class FrameStep:
    """How far the simulation advances this frame."""

    run_physics: bool
    dt_seconds: float
    substeps: int = PHYSICS_SUBSTEPS

    @property
    def substep_seconds(self) -> float:
        return self.dt_seconds / self.substeps


@dataclass(frozen=True)
class UpdateStats:
    """Timing of the physics update, in microseconds."""

    average_us: float
    max_us: float
    last_us: float


class SimulationClock:
    """Turns wall-clock frame times into simulation steps.

    The simulation starts paused; T toggles the pause, Y advances one frame
    while paused, R asks for a scene reset and Escape asks to close.
    """

    def __init__(self) -> None:
        self.is_paused = True
        self.step_frame = False
        self.should_close = False
        self.num_samples = 0
        self.average_us = 0.0
        self.max_us = 0.0

    def handle_key(self, key: Union[Key, int], action: Union[KeyAction, int]) -> bool:
        """Apply a key event; returns True when the scene should be reset."""
        try:
            key = Key(key)
            action = KeyAction(action)
        except ValueError:
            return False

        reset = False
        if key is Key.R and action is KeyAction.RELEASE:
            reset = True
        if key is Key.T and action is KeyAction.RELEASE:
            self.is_paused = not self.is_paused
        if key is Key.Y and action in (KeyAction.PRESS, KeyAction.REPEAT):
            self.step_frame = self.is_paused and not self.step_frame
        if key is Key.ESCAPE and action is KeyAction.PRESS:
            self.should_close = True
        return reset

    def next_step(self, dt_us: float) -> FrameStep:
        """The step to simulate after ``dt_us`` microseconds of wall time."""
        dt_us = min(float(dt_us), MAX_FRAME_US)
        run_physics = True
        if self.is_paused:
            dt_us = 0.0
            run_physics = False
            if self.step_frame:
                dt_us = STEP_FRAME_US
                self.step_frame = False
                run_physics = True
            self.num_samples = 0
            self.max_us = 0.0
        return FrameStep(run_physics, dt_us * 0.001 * 0.001)

    def record_update(self, dt_us: float) -> UpdateStats:
        """Add the duration of one physics update to the running statistics."""
        dt_us = float(dt_us)
        if dt_us > self.max_us:
            self.max_us = dt_us
        self.average_us = (self.average_us * self.num_samples + dt_us) / (
            self.num_samples + 1
        )
        self.num_samples += 1
        return UpdateStats(self.average_us, self.max_us, dt_us)


class FpsCounter:
    """Frames per second, recomputed about every 0.3 seconds."""

    def __init__(self) -> None:
        self.fps = INITIAL_FPS
        self._frames = 0
        self._total = 0.0

    def tick(self, delta_seconds: float) -> float:
        """Count one frame that took ``delta_seconds``; returns the current rate."""
        self._total += delta_seconds
        self._frames += 1
        if self._total >= FPS_WINDOW_SECONDS:
            self.fps = self._frames / self._total
            self._frames = 0
            self._total = 0.0
        return self.fps