"""Command receivers - the appliances that actually do the work."""


class Light:
    """A light that can be switched on and off."""

    def __init__(self):
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def on(self) -> str:
        self._is_on = True
        return "Light is ON"

    def off(self) -> str:
        self._is_on = False
        return "Light is OFF"
