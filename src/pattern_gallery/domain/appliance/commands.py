"""Command contract and concrete light commands."""
from abc import ABC, abstractmethod

from .receivers import Light


class Command(ABC):
    """A request packaged as an object so an invoker can trigger it later."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the request and describe the effect."""


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> str:
        return self._light.on()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> str:
        return self._light.off()
