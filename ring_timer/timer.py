"""Countdown state machine.

Holds a single immutable ``Timer`` snapshot and replaces it on every user
action or animation tick. Observers receive each new snapshot.
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .config import DEFAULT_DURATION_MILLIS, RESET_DELAY_MILLIS
from .timer_state import TimerState

logger = logging.getLogger(__name__)


class InvalidStateError(Exception):
    """Raised when a transition is requested from a state with no mapping."""


@dataclass(frozen=True)
class Timer:
    duration_millis: int
    progress: float = 0.0
    resetting: bool = False
    state: TimerState = TimerState.Idle

    @property
    def remaining_millis(self) -> int:
        return self.duration_millis - int(self.duration_millis * self.progress)


class TimerStateMachine:
    def __init__(
        self,
        duration_millis: int = DEFAULT_DURATION_MILLIS,
        schedule: Optional[Callable[[int, Callable[[], None]], None]] = None,
        driver=None,
        track_completion: bool = True,
        reset_delay_millis: int = RESET_DELAY_MILLIS,
    ):
        """Create an idle timer.

        ``schedule(delay_millis, callback)`` runs a callback once after a
        delay (``QTimer.singleShot`` in the app). ``driver`` is the
        animation driver; it may be attached later with ``attach_driver``.
        With ``track_completion`` off the timer never enters Complete.
        """
        if duration_millis <= 0:
            raise ValueError(f"duration_millis must be positive, got {duration_millis}")
        self._timer = Timer(duration_millis=duration_millis)
        self._schedule = schedule
        self._driver = driver
        self._observers: List[Callable[[Timer], None]] = []
        self.track_completion = track_completion
        self.reset_delay_millis = reset_delay_millis
        self._reset_generation = 0

    @property
    def timer(self) -> Timer:
        return self._timer

    def attach_driver(self, driver):
        self._driver = driver

    def subscribe(self, callback: Callable[[Timer], None]) -> Callable[[], None]:
        """Call ``callback`` with every new snapshot. Returns an unsubscribe function."""
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    #####################################
    # User actions
    #####################################
    def toggle(self):
        """Primary button: start, pause, resume or restart."""
        current = self._timer
        if current.state == TimerState.Running:
            self._replace(state=TimerState.Paused)
            # freezing the driver at the current value cancels the tween
            if self._driver is not None:
                self._driver.snap_to(current.progress)
        elif current.state == TimerState.Complete:
            self._replace(state=TimerState.Running, progress=0.0)
            if self._driver is not None:
                self._driver.snap_to(0.0)
            self._start_animation()
        elif current.state in (TimerState.Idle, TimerState.Paused):
            self._replace(state=TimerState.Running)
            self._start_animation()
        else:
            raise InvalidStateError(f"toggle() has no transition from {current.state}")

    def reset(self):
        """Zero the ring now and settle the state after the reset delay."""
        self._reset_generation += 1
        generation = self._reset_generation
        self._replace(progress=0.0, resetting=True)
        if self._driver is not None:
            self._driver.snap_to(0.0)
        # snapping and clearing the flag must not share a frame, or a tween
        # still in flight could write its stale value back
        if self._schedule is not None:
            self._schedule(self.reset_delay_millis, lambda: self._finish_reset(generation))
        else:
            self._finish_reset(generation)

    #####################################
    # Animation callbacks
    #####################################
    def on_progress(self, value: float):
        """Animation tick. Ignored unless running and not resetting."""
        current = self._timer
        if current.state != TimerState.Running or current.resetting:
            return
        value = min(max(float(value), current.progress), 1.0)
        if value >= 1.0 and self.track_completion:
            self._replace(progress=1.0, state=TimerState.Complete)
        elif value != current.progress:
            self._replace(progress=value)

    #####################################
    # Helpers
    #####################################
    def _finish_reset(self, generation: int):
        # a later reset supersedes this one
        if generation != self._reset_generation:
            return
        current = self._timer
        if current.state in (TimerState.Paused, TimerState.Complete):
            self._replace(resetting=False, state=TimerState.Idle)
        else:
            self._replace(resetting=False)
            if current.state == TimerState.Running:
                self._start_animation()

    def _start_animation(self):
        current = self._timer
        if self._driver is None or current.resetting:
            return
        remaining = int(current.duration_millis * (1.0 - current.progress))
        self._driver.animate_to(1.0, remaining)

    def _replace(self, **changes):
        previous = self._timer
        self._timer = replace(previous, **changes)
        if previous.state != self._timer.state:
            logger.debug("Timer %s -> %s at progress %.3f",
                         previous.state.name, self._timer.state.name, self._timer.progress)
        for callback in list(self._observers):
            callback(self._timer)
