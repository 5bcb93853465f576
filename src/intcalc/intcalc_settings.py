"""Settings for the intcalc command line tool."""

from dataclasses import dataclass
import json
import os


@dataclass
class IntCalcSettings:
    """
    intcalc settings, persisted as JSON.
    """
    log_level: str = "WARNING"
    log_dir: str | None = None  # None means log to stderr only

    DEFAULT_PATH = os.path.join("~", ".intcalc", "settings.json")

    @classmethod
    def create_default(cls) -> "IntCalcSettings":
        """Create a new IntCalcSettings object with default values."""
        return cls()

    @classmethod
    def default_path(cls) -> str:
        """Get the expanded path of the default settings file."""
        return os.path.expanduser(cls.DEFAULT_PATH)

    @classmethod
    def load(cls, path: str) -> "IntCalcSettings":
        """
        Load settings from file.

        Keys missing from the file keep their default values and unknown keys are ignored.

        Args:
            path: Path to the settings file

        Returns:
            IntCalcSettings object with loaded values

        Raises:
            OSError: If the file cannot be read
            json.JSONDecodeError: If file contains invalid JSON
            ValueError: If a setting has an invalid value
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")

        log_level = data.get("logLevel", settings.log_level)
        if not isinstance(log_level, str):
            raise ValueError(f"logLevel must be a string, got {log_level!r}")

        log_dir = data.get("logDir", settings.log_dir)
        if log_dir is not None and not isinstance(log_dir, str):
            raise ValueError(f"logDir must be a string or null, got {log_dir!r}")

        settings.log_level = log_level.upper()
        settings.log_dir = log_dir or None
        return settings

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "logLevel": self.log_level,
            "logDir": self.log_dir,
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
