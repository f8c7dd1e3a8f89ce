"""
Tests for function-triggered global options.
"""

from unittest.mock import Mock

import pytest

from cmddispatch.options import OptionSet
from cmddispatch.triggers import TriggerOption, TriggerRegistry


class TestTriggerRegistry:
    """Test TriggerRegistry declaration and firing."""

    def setup_method(self):
        """Set up test fixtures."""
        self.options = OptionSet("prog")
        self.triggers = TriggerRegistry(self.options)

    def test_declare_adds_global_flag(self):
        """Test that declaring a trigger adds a boolean flag to the option set."""
        trigger = self.triggers.declare("license", "show license", Mock())

        assert isinstance(trigger, TriggerOption)
        assert trigger.triggered is False
        assert self.options.has_options()
        assert "-license" in self.options.format_defaults()
        assert "show license" in self.options.format_defaults()
        assert len(self.triggers) == 1

    def test_version_option(self):
        """Test the -version shorthand."""
        trigger = self.triggers.version_option(Mock())

        assert trigger.name == "version"
        assert trigger.description == "show version"

    def test_fire_runs_callback_when_given(self):
        callback = Mock()
        self.triggers.declare("version", "show version", callback)
        self.options.parse(["-version"])

        assert self.triggers.fire(self.options.values) is True
        callback.assert_called_once_with()

    def test_fire_does_nothing_when_absent(self):
        callback = Mock()
        self.triggers.declare("version", "show version", callback)
        self.options.parse(["cmd"])

        assert self.triggers.fire(self.options.values) is False
        callback.assert_not_called()

    def test_collect_marks_without_running(self):
        """Test that collect() reports fired triggers but leaves callbacks to the caller."""
        callback = Mock()
        trigger = self.triggers.declare("version", "show version", callback)
        self.options.parse(["-version", "cmd"])

        fired = self.triggers.collect(self.options.values)

        assert fired == [trigger]
        assert trigger.triggered is True
        callback.assert_not_called()

    def test_two_triggers_fire_in_declaration_order(self):
        """Test that simultaneously given triggers both run without error."""
        calls = []
        self.triggers.declare("version", "show version", lambda: calls.append("version"))
        self.triggers.declare("license", "show license", lambda: calls.append("license"))
        self.options.parse(["-license", "-version"])

        assert self.triggers.fire(self.options.values) is True
        assert calls == ["version", "license"]

    def test_triggers_are_independent(self):
        version = Mock()
        license_ = Mock()
        self.triggers.declare("version", "show version", version)
        self.triggers.declare("license", "show license", license_)
        self.options.parse(["-license"])

        self.triggers.fire(self.options.values)

        version.assert_not_called()
        license_.assert_called_once_with()
        assert [t.name for t in self.triggers if t.triggered] == ["license"]

    def test_declare_rejects_empty_name(self):
        with pytest.raises(ValueError, match="must not be empty"):
            self.triggers.declare("", "nothing", Mock())

    def test_declare_same_name_twice_raises(self):
        """Test that a trigger name can only be declared once."""
        first = Mock()
        self.triggers.declare("version", "show version", first)

        with pytest.raises(ValueError, match="-version"):
            self.triggers.declare("version", "print version", Mock())

        assert len(self.triggers) == 1
        assert self.options.format_defaults() == "  -version\n        show version (default: False)"
        self.options.parse(["-version"])
        self.triggers.fire(self.options.values)
        first.assert_called_once_with()

    def test_declare_rejects_non_callable(self):
        with pytest.raises(ValueError, match="not callable"):
            self.triggers.declare("version", "show version", "not a function")  # type: ignore
