import os

import pytest

# widgets and animations need a platform plugin even without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeScheduler:
    """Stands in for QTimer.singleShot with a manually advanced clock."""

    def __init__(self) -> None:
        self.now = 0
        self.pending = []

    def __call__(self, delay_millis, callback) -> None:
        self.pending.append((self.now + delay_millis, callback))

    def advance(self, millis: int) -> None:
        self.now += millis
        due = [entry for entry in self.pending if entry[0] <= self.now]
        self.pending = [entry for entry in self.pending if entry[0] > self.now]
        for _, callback in sorted(due, key=lambda entry: entry[0]):
            callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def qapp():
    QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app
