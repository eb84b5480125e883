"""Tests for the remote control command invoker."""
import pytest

from pattern_gallery.domain.appliance import (
    Command,
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
)
from pattern_gallery.domain.base.exceptions import NoCommandBoundError


class CountingCommand(Command):
    def __init__(self):
        self.calls = 0

    def execute(self):
        self.calls += 1
        return f"called {self.calls}"


class TestRemoteControl:
    """Test cases for RemoteControl."""

    def test_press_runs_bound_command(self):
        light = Light()
        remote = RemoteControl()
        remote.set_command(LightOnCommand(light))

        assert remote.press_button() == "Light is ON"
        assert light.is_on is True

    def test_rebinding_changes_next_press(self):
        light = Light()
        remote = RemoteControl()

        remote.set_command(LightOnCommand(light))
        remote.press_button()
        remote.set_command(LightOffCommand(light))

        assert remote.press_button() == "Light is OFF"
        assert light.is_on is False

    def test_press_runs_exactly_one_command(self):
        first = CountingCommand()
        second = CountingCommand()
        remote = RemoteControl()

        remote.set_command(first)
        remote.press_button()
        remote.set_command(second)
        remote.press_button()
        remote.press_button()

        assert first.calls == 1
        assert second.calls == 2

    def test_press_without_command_fails(self):
        with pytest.raises(NoCommandBoundError):
            RemoteControl().press_button()

    def test_command_can_be_bound_at_construction(self):
        remote = RemoteControl(LightOffCommand(Light()))

        assert remote.press_button() == "Light is OFF"


def test_light_starts_off():
    assert Light().is_on is False


def test_command_contract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Command()
