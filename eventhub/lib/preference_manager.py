"""Hub settings management with config file persistence."""

from __future__ import annotations

import configparser
import logging
import os
from typing import Any

from eventhub.constants import CONFIG_SECTION
from eventhub.lib.get_platform import get_data_directory


class HubPreferences:
    """Single source of truth for configurable hub settings.

    Stores settings in an ini file under the [EVENTHUB] section.
    Handles persistence and type conversion.
    """

    # Default values for all settings (single source of truth)
    DEFAULTS = {
        "warn_no_subscribers": True,
        "log_level": "INFO",
        "max_log_files": 5,
    }

    def __init__(self, config_file_path: str = "config.ini", target: object | None = None) -> None:
        """Initialize with config path and optional target object to sync.

        Args:
            config_file_path: Path to the ini file (relative paths go in data directory)
            target: Optional object (usually an EventHub) to sync attributes on when settings change
        """
        self._config_obj = configparser.ConfigParser()
        self._target = target

        if not os.path.isabs(config_file_path):
            self.config_file_path = os.path.join(get_data_directory(), config_file_path)
        else:
            self.config_file_path = config_file_path

        logging.debug(f"Using config file: {self.config_file_path}")

    def get(self, preference: str, default_value: Any = None) -> Any:
        """Get a setting, auto-converting to bool/int/float."""
        # Silently ignores missing files
        self._config_obj.read(self.config_file_path, encoding="utf-8")

        if not self._config_obj.has_section(CONFIG_SECTION):
            return default_value

        try:
            pref = self._config_obj.get(CONFIG_SECTION, preference)
            return self._convert_value(pref)
        except (configparser.NoOptionError, ValueError):
            return default_value

    def get_or_default(self, preference: str) -> Any:
        """Get a setting, falling back to DEFAULTS if not set."""
        return self.get(preference, self.DEFAULTS.get(preference))

    def set(self, preference: str, val: Any) -> tuple[bool, str]:
        """Update a setting, persist it, and sync the target object.

        Returns (success, message) tuple.
        """
        logging.debug(f"Changing hub setting << {preference} >> to {val}")
        try:
            self._config_obj.read(self.config_file_path, encoding="utf-8")

            if CONFIG_SECTION not in self._config_obj:
                self._config_obj.add_section(CONFIG_SECTION)

            self._config_obj[CONFIG_SECTION][preference] = str(val)

            with open(self.config_file_path, "w", encoding="utf-8") as conf:
                self._config_obj.write(conf)

            self._sync_target(preference, self._convert_value(val))

            return (True, "Settings were changed successfully")
        except OSError as e:
            logging.error(f"Failed to change hub setting << {preference} >>: {e}")
            return (False, "Something went wrong! Settings were not changed")

    def clear(self) -> tuple[bool, str]:
        """Remove all settings by deleting the config file. Returns (success, message)."""
        try:
            if os.path.exists(self.config_file_path):
                os.remove(self.config_file_path)
                logging.info(f"Cleared hub settings: deleted {self.config_file_path}")
            # Drop cached values so stale settings don't survive the delete
            self._config_obj.clear()
            return (True, "Settings were cleared successfully")
        except OSError as e:
            logging.error(f"Failed to clear hub settings: {e}")
            return (False, "Something went wrong! Settings were not cleared")

    def _sync_target(self, preference: str, value: Any) -> None:
        # Only settings the target exposes are synced; the rest (logging) are read on demand
        if self._target is not None and hasattr(self._target, preference):
            setattr(self._target, preference, value)

    def _convert_value(self, val: Any) -> Any:
        """Convert a string to bool/int/float if applicable, otherwise return as-is."""
        if not isinstance(val, str):
            return val

        val_lower = val.lower()
        if val_lower in ("true", "yes", "on"):
            return True
        if val_lower in ("false", "no", "off"):
            return False

        stripped = val.lstrip("-")
        if stripped.isdigit():
            return int(val)
        if stripped.replace(".", "", 1).isdigit():
            return float(val)

        return val

    def apply_all(self, **overrides: Any) -> None:
        """Hydrate the target object with every setting it exposes.

        Priority: explicit override (if not None) > config file > DEFAULTS.
        Overrides are persisted so later lookups agree with the target.
        """
        if self._target is None:
            return

        for pref, default in self.DEFAULTS.items():
            value = overrides.get(pref)
            if value is not None:
                self.set(pref, value)
            else:
                self._sync_target(pref, self.get(pref, default))

    def reset_all(self) -> tuple[bool, str]:
        """Clear config file and reset target to defaults.

        Returns (success, message) tuple.
        """
        success, message = self.clear()
        if success and self._target is not None:
            for pref, default in self.DEFAULTS.items():
                self._sync_target(pref, default)
        return success, message
