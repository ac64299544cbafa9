# type: ignore
from PyQt5.QtCore import QObject, QVariantAnimation, QEasingCurve, QAbstractAnimation
from PyQt5.QtWidgets import QGraphicsOpacityEffect

from .config import PULSE_PERIOD_MILLIS


class AnimationDriver(QObject):
    """Interpolates a single scalar and reports every frame to a listener.

    Only one tween runs at a time: ``snap_to`` and ``animate_to`` both cancel
    whatever is in flight, and a cancelled tween never calls back again.
    """

    def __init__(self, on_value, parent=None):
        super().__init__(parent)
        self._on_value = on_value
        self._value = 0.0
        self._target = 0.0
        self._animation = QVariantAnimation(self)
        self._animation.valueChanged.connect(self._value_changed)
        self._animation.finished.connect(self._finished)

    @property
    def value(self) -> float:
        return self._value

    def is_running(self) -> bool:
        return self._animation.state() == QAbstractAnimation.Running

    def snap_to(self, value: float):
        """Jump to ``value`` without a transition or a callback."""
        self._cancel()
        self._value = float(value)

    def animate_to(self, target: float, duration_millis: int, easing=QEasingCurve.Linear):
        """Tween from the current value to ``target`` over ``duration_millis``."""
        self._cancel()
        self._target = float(target)
        if duration_millis <= 0:
            self._value = self._target
            self._on_value(self._value)
            return
        # configuring the animation may emit valueChanged for the old range
        self._animation.blockSignals(True)
        self._animation.setStartValue(self._value)
        self._animation.setEndValue(self._target)
        self._animation.setDuration(int(duration_millis))
        self._animation.setEasingCurve(QEasingCurve(easing))
        self._animation.blockSignals(False)
        self._animation.start()

    def _cancel(self):
        if self._animation.state() != QAbstractAnimation.Stopped:
            self._animation.blockSignals(True)
            self._animation.stop()
            self._animation.blockSignals(False)

    def _value_changed(self, value):
        self._value = float(value)
        self._on_value(self._value)

    def _finished(self):
        self._value = self._target
        self._on_value(self._value)


class PulseAnimation(QObject):
    """Fades widgets out and back in on a loop (1.0 -> 0.0 -> 1.0)."""

    def __init__(self, widgets, period_millis: int = PULSE_PERIOD_MILLIS, parent=None):
        super().__init__(parent)
        # one effect per widget, Qt does not share them
        self._effects = []
        for widget in widgets:
            effect = QGraphicsOpacityEffect(widget)
            effect.setOpacity(1.0)
            widget.setGraphicsEffect(effect)
            self._effects.append(effect)

        self._animation = QVariantAnimation(self)
        self._animation.setStartValue(1.0)
        self._animation.setKeyValueAt(0.5, 0.0)
        self._animation.setEndValue(1.0)
        self._animation.setDuration(period_millis)
        self._animation.setLoopCount(-1)
        self._animation.valueChanged.connect(self._apply)

    @property
    def period_millis(self) -> int:
        return self._animation.duration()

    def is_running(self) -> bool:
        return self._animation.state() == QAbstractAnimation.Running

    def start(self):
        if not self.is_running():
            self._animation.start()

    def stop(self):
        self._animation.stop()
        self._apply(1.0)

    def _apply(self, opacity):
        for effect in self._effects:
            effect.setOpacity(float(opacity))
