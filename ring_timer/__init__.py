"""Countdown timer with a progress ring, built on PyQt5."""

__version__ = "1.0.0"
