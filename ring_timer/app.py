# type: ignore
import logging
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QShortcut, QStyle, QToolTip
)
from PyQt5.QtCore import Qt, QTimer, QSize
from PyQt5.QtGui import QFont, QKeySequence

from .utils import format_time
from .config import Config, DEFAULT_DURATION_MILLIS
from .timer_state import TimerState
from .timer import Timer, TimerStateMachine
from .animation import AnimationDriver, PulseAnimation
from .widgets import RingWidget

QToolTip.showTime = 4000  # Set tooltip display time

logger = logging.getLogger(__name__)

# icon and tooltip of the primary button for each state
PRIMARY_BUTTON = {
    TimerState.Idle:     (QStyle.SP_MediaPlay,    "Start the countdown"),
    TimerState.Running:  (QStyle.SP_MediaPause,   "Pause the countdown"),
    TimerState.Paused:   (QStyle.SP_MediaPlay,    "Resume the countdown"),
    TimerState.Complete: (QStyle.SP_BrowserReload, "Restart the countdown"),
}
PULSING_STATES = (TimerState.Paused, TimerState.Complete)


class TimerWindow(QMainWindow):
    def __init__(self, duration_millis: int = DEFAULT_DURATION_MILLIS,
                 track_completion: bool = True, settings: Config = None):
        """Initialize the countdown window."""
        super().__init__()
        # --- Settings from settings.json ---
        self.settings = settings or Config.load_from_file()

        # --- Timer State ---
        self.machine = TimerStateMachine(
            duration_millis,
            schedule=QTimer.singleShot,
            track_completion=track_completion,
        )
        self.driver = AnimationDriver(self.machine.on_progress, self)
        self.machine.attach_driver(self.driver)

        #####################################
        # UI Setup
        #####################################
        self.initUI()

        self.machine.subscribe(self.render_timer)
        self.render_timer(self.machine.timer)

    def initUI(self):
        self.setWindowTitle("Countdown")
        self.resize(self.settings.window_width, self.settings.window_height)
        self.setMinimumSize(280, 440)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 32, 32, 16)
        layout.setSpacing(10)

        # Fonts
        font_time    = QFont(); font_time.setPointSize(40)
        font_label   = QFont(); font_label.setPointSize(18); font_label.setBold(True)
        font_toggle  = QFont(); font_toggle.setPointSize(9)

        # --- Ring with the readout stacked on top of it ---
        ring_area = QGridLayout()
        self.ring = RingWidget(self.settings)
        ring_area.addWidget(self.ring, 0, 0)

        readout = QVBoxLayout()
        readout.setAlignment(Qt.AlignCenter)
        self.time_label = QLabel()
        self.time_label.setObjectName("timeLabel")
        self.time_label.setFont(font_time)
        self.time_label.setAlignment(Qt.AlignCenter)
        readout.addWidget(self.time_label)
        self.time_up_label = QLabel("Time Up!")
        self.time_up_label.setObjectName("timeUpLabel")
        self.time_up_label.setFont(font_label)
        self.time_up_label.setAlignment(Qt.AlignCenter)
        readout.addWidget(self.time_up_label)
        ring_area.addLayout(readout, 0, 0, Qt.AlignCenter)
        layout.addLayout(ring_area)

        self.pulse = PulseAnimation([self.time_label, self.time_up_label], parent=self)

        # Reset button
        self.reset_button = QPushButton("Reset")
        self.reset_button.setObjectName("resetButton")
        self.reset_button.setFlat(True)
        self.reset_button.setToolTip("Reset the countdown (R)")
        self.reset_button.clicked.connect(self.machine.reset)
        reset_row = QHBoxLayout()
        reset_row.addStretch()
        reset_row.addWidget(self.reset_button)
        reset_row.addStretch()
        layout.addLayout(reset_row)

        layout.addStretch()

        # Primary round button: start / pause / restart
        self.primary_button = QPushButton()
        self.primary_button.setObjectName("primaryButton")
        self.primary_button.setFixedSize(64, 64)
        self.primary_button.setIconSize(QSize(32, 32))
        self.primary_button.clicked.connect(self.machine.toggle)
        primary_row = QHBoxLayout()
        primary_row.addStretch()
        primary_row.addWidget(self.primary_button)
        primary_row.addStretch()
        layout.addLayout(primary_row)

        # Always on Top
        self.always_on_top = QPushButton("Always on Top")
        self.always_on_top.setCheckable(True)
        self.always_on_top.setFont(font_toggle)
        self.always_on_top.clicked.connect(self.toggle_always_on_top)
        self.always_on_top.setToolTip("Keep the timer window always on top of other windows")
        self.always_on_top.setStyleSheet("""
            QPushButton { padding:5px; border:1px solid #666; background-color:#444; }
            QPushButton:checked { background-color:#2a5699; border-color:#1a3b6d; }
            QPushButton:hover { background-color:#555; }
            QPushButton:checked:hover { background-color:#366bb8; }
        """)
        layout.addWidget(self.always_on_top)

        # Keyboard shortcuts
        QShortcut(QKeySequence(Qt.Key_Space), self, activated=self.machine.toggle)
        QShortcut(QKeySequence(Qt.Key_R), self, activated=self.machine.reset)

        self.apply_initial_toggles()

    def apply_initial_toggles(self):
        """Apply initial toggles from settings.json"""
        if self.settings.always_on_top:
            self.always_on_top.setChecked(True)
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

    def toggle_always_on_top(self):
        """Toggle the 'Always on Top' setting."""
        self.settings.always_on_top = self.always_on_top.isChecked()
        self.settings.save_to_file()
        if self.settings.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)
        else:
            self.setWindowFlags(self.windowFlags() & ~Qt.WindowStaysOnTopHint)
        self.show()

    #####################################
    # Render a timer snapshot
    #####################################
    def render_timer(self, timer: Timer):
        """Bring every widget in line with the snapshot."""
        self.ring.set_progress(timer.progress)
        self.time_label.setText(format_time(timer.remaining_millis))
        self.time_up_label.setVisible(timer.state == TimerState.Complete)

        pixmap, tooltip = PRIMARY_BUTTON[timer.state]
        self.primary_button.setIcon(self.style().standardIcon(pixmap))
        self.primary_button.setToolTip(f"{tooltip} (Space)")

        if timer.state in PULSING_STATES:
            self.pulse.start()
        elif self.pulse.is_running():
            self.pulse.stop()

    def closeEvent(self, event):
        self.settings.update(window_width=self.width(), window_height=self.height())
        logger.info("Window closed at %s", self.machine.timer.state.name)
        super().closeEvent(event)
