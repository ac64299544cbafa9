import os
import json
import logging
from dataclasses import dataclass, asdict

from .geometry import ACCENT, BACKGROUND, INNER

SETTINGS_FILE = "settings.json"

# Countdown lengths are fixed; only the window appearance is stored.
DEFAULT_DURATION_MILLIS = 30_000
SHORT_DURATION_MILLIS = 5_000
RESET_DELAY_MILLIS = 300
PULSE_PERIOD_MILLIS = 700

logger = logging.getLogger(__name__)

@dataclass
class Config:
    # Default Values
    window_width: int = 360
    window_height: int = 560
    always_on_top: bool = False
    background_color: str = "#000000"
    inner_color: str = "#FFFFFF"
    accent_color: str = "#E29A14"

    @staticmethod
    def load_from_file(filename: str = SETTINGS_FILE) -> "Config":
        if os.path.exists(filename):
            try:
                with open(filename, "r") as f:
                    data = json.load(f)
                return Config.from_dict(data)
            except (json.JSONDecodeError, TypeError, ValueError):
                logger.warning("Invalid settings in %s, restoring defaults", filename)
                default = Config()
                default.save_to_file(filename)
                return default
        else:
            default = Config()
            default.save_to_file(filename)
            return default

    @staticmethod
    def from_dict(data: dict) -> "Config":
        """Build a Config, rejecting unknown keys and values of the wrong type."""
        if not isinstance(data, dict):
            raise TypeError(f"Settings must be an object, got {type(data).__name__}")
        defaults = Config()
        for key, value in data.items():
            if not hasattr(defaults, key):
                raise TypeError(f"Unknown setting: {key}")
            expected = type(getattr(defaults, key))
            # bool is an int subclass, so check it separately
            if (type(value) is bool) != (expected is bool) or not isinstance(value, expected):
                raise TypeError(f"{key} must be {expected.__name__}, got {type(value).__name__}")
        return Config(**data)

    def save_to_file(self, filename: str = SETTINGS_FILE):
        try:
            with open(filename, "w") as f:
                json.dump(asdict(self), f, indent=4)
        except OSError as e:
            logger.warning("Error saving settings: %s", e)

    def update(self, filename: str = SETTINGS_FILE, **kwargs):
        """Update settings attributes and save to file."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
        self.save_to_file(filename)

    def role_colors(self) -> dict:
        """Colour for each ring role used by the geometry module."""
        return {
            BACKGROUND: self.background_color,
            INNER: self.inner_color,
            ACCENT: self.accent_color,
        }
