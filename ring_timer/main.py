import os
import sys
import time
import logging

import click

logging.basicConfig(filename="startup.log", level=logging.INFO)
start_time = time.perf_counter()
logging.info("App start")

from PyQt5.QtWidgets import QApplication
logging.info(f"After PyQt5 import: {time.perf_counter() - start_time:.2f}s")

from PyQt5.QtGui import QPalette, QColor

from ring_timer import __version__
from ring_timer.utils import resource_path
from ring_timer.app import TimerWindow
from ring_timer.config import DEFAULT_DURATION_MILLIS, SHORT_DURATION_MILLIS
logging.info(f"After app imports: {time.perf_counter() - start_time:.2f}s")


@click.command()
@click.version_option(version=__version__, prog_name="ring-timer")
@click.option("--short", is_flag=True, help="Run the 5 second countdown instead of 30 seconds.")
@click.option("--no-complete", is_flag=True, help="Stay running at zero instead of showing 'Time Up!'.")
def main(short: bool, no_complete: bool) -> None:
    """Countdown timer with a progress ring."""
    app = QApplication(sys.argv)
    logging.info(f"After QApplication: {time.perf_counter() - start_time:.2f}s")
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window,        QColor(45, 45, 45))
    dark_palette.setColor(QPalette.WindowText,    QColor(225, 225, 225))
    dark_palette.setColor(QPalette.Base,          QColor(30, 30, 30))
    dark_palette.setColor(QPalette.AlternateBase, QColor(45, 45, 45))
    dark_palette.setColor(QPalette.ToolTipBase,   QColor(225, 225, 225))
    dark_palette.setColor(QPalette.ToolTipText,   QColor(225, 225, 225))
    dark_palette.setColor(QPalette.Text,          QColor(225, 225, 225))
    dark_palette.setColor(QPalette.Button,        QColor(45, 45, 45))
    dark_palette.setColor(QPalette.ButtonText,    QColor(225, 225, 225))
    app.setPalette(dark_palette)
    logging.info(f"After palette set: {time.perf_counter() - start_time:.2f}s")

    # load external QSS
    style_file = resource_path("style.qss")
    if os.path.exists(style_file):
        with open(style_file, "r") as f:
            app.setStyleSheet(f.read())
        logging.info(f"After loading QSS: {time.perf_counter() - start_time:.2f}s")
    else:
        logging.warning(f"Stylesheet not found: {style_file}")

    duration = SHORT_DURATION_MILLIS if short else DEFAULT_DURATION_MILLIS
    window = TimerWindow(duration_millis=duration, track_completion=not no_complete)
    logging.info(f"After TimerWindow init: {time.perf_counter() - start_time:.2f}s")
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
