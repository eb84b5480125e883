"""Appliance domain - Command pattern demonstration."""

from .commands import Command, LightOffCommand, LightOnCommand
from .receivers import Light
from .remote_control import RemoteControl

__all__ = ["Command", "Light", "LightOffCommand", "LightOnCommand", "RemoteControl"]
