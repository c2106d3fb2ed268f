"""Tests for HubPreferences."""

from __future__ import annotations

import os
from unittest.mock import patch

from eventhub.lib.events import EventHub
from eventhub.lib.preference_manager import HubPreferences


def test_get_nonexistent_preference(temp_config_file):
    """Test getting a setting that doesn't exist returns default value."""
    prefs = HubPreferences(temp_config_file)
    assert prefs.get("nonexistent", "default") == "default"
    assert prefs.get("nonexistent") is None


def test_get_or_default_falls_back_to_defaults(temp_config_file):
    prefs = HubPreferences(temp_config_file)
    assert prefs.get_or_default("warn_no_subscribers") is True
    assert prefs.get_or_default("log_level") == "INFO"
    assert prefs.get_or_default("max_log_files") == 5


def test_set_and_get(temp_config_file):
    prefs = HubPreferences(temp_config_file)

    success, message = prefs.set("log_level", "WARNING")
    assert success is True
    assert "successfully" in message.lower()

    assert prefs.get("log_level") == "WARNING"


def test_set_persists_to_file(temp_config_file):
    HubPreferences(temp_config_file).set("max_log_files", 3)

    with open(temp_config_file, encoding="utf-8") as f:
        content = f.read()

    assert "[EVENTHUB]" in content
    assert "max_log_files = 3" in content
    assert HubPreferences(temp_config_file).get("max_log_files") == 3


def test_type_conversion_bool(temp_config_file):
    """Test that boolean values are correctly converted."""
    prefs = HubPreferences(temp_config_file)

    for val in ["true", "True", "yes", "on"]:
        prefs.set("bool_pref", val)
        assert prefs.get("bool_pref") is True, f"Failed for value: {val}"

    for val in ["false", "FALSE", "no", "off"]:
        prefs.set("bool_pref", val)
        assert prefs.get("bool_pref") is False, f"Failed for value: {val}"


def test_type_conversion_numbers(temp_config_file):
    prefs = HubPreferences(temp_config_file)

    prefs.set("int_pref", "-10")
    assert prefs.get("int_pref") == -10

    prefs.set("float_pref", "0.5")
    result = prefs.get("float_pref")
    assert result == 0.5
    assert isinstance(result, float)


def test_set_syncs_target(temp_config_file):
    hub = EventHub()
    prefs = HubPreferences(temp_config_file, target=hub)

    prefs.set("warn_no_subscribers", "false")

    assert hub.warn_no_subscribers is False


def test_set_failure_returns_false(tmp_path):
    prefs = HubPreferences(str(tmp_path / "missing_dir" / "config.ini"))

    success, message = prefs.set("log_level", "DEBUG")

    assert success is False
    assert "not changed" in message


def test_clear_deletes_file(temp_config_file):
    prefs = HubPreferences(temp_config_file)
    prefs.set("log_level", "DEBUG")

    success, _ = prefs.clear()

    assert success is True
    assert not os.path.exists(temp_config_file)
    assert prefs.get("log_level") is None


def test_apply_all_priority(temp_config_file):
    """Override > config file > DEFAULTS."""
    hub = EventHub()
    prefs = HubPreferences(temp_config_file, target=hub)
    prefs.set("log_level", "ERROR")
    prefs.set("warn_no_subscribers", False)

    prefs.apply_all(max_log_files=2)

    assert hub.warn_no_subscribers is False
    assert prefs.get("max_log_files") == 2
    assert prefs.get_or_default("log_level") == "ERROR"

    prefs.apply_all(warn_no_subscribers=True)
    assert hub.warn_no_subscribers is True


def test_apply_all_only_syncs_attributes_the_target_has(temp_config_file):
    hub = EventHub()
    prefs = HubPreferences(temp_config_file, target=hub)

    prefs.apply_all(log_level="ERROR")

    assert not hasattr(hub, "log_level")
    assert not hasattr(hub, "max_log_files")
    assert prefs.get("log_level") == "ERROR"


def test_apply_all_without_target(temp_config_file):
    prefs = HubPreferences(temp_config_file)
    prefs.apply_all(log_level="DEBUG")
    assert prefs.get("log_level") is None


def test_reset_all_restores_defaults(temp_config_file):
    hub = EventHub()
    prefs = HubPreferences(temp_config_file, target=hub)
    prefs.set("warn_no_subscribers", False)

    success, _ = prefs.reset_all()

    assert success is True
    assert hub.warn_no_subscribers is True


def test_relative_path_uses_data_directory(tmp_path):
    with patch(
        "eventhub.lib.preference_manager.get_data_directory", return_value=str(tmp_path)
    ):
        prefs = HubPreferences("hub.ini")

    assert prefs.config_file_path == os.path.join(str(tmp_path), "hub.ini")
