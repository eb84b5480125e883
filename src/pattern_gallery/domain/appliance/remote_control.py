"""Remote control - the command invoker."""
import logging
from typing import Optional

from pattern_gallery.domain.base.exceptions import NoCommandBoundError

from .commands import Command

logger = logging.getLogger(__name__)


class RemoteControl:
    """
    Invoker holding a single command slot.

    The remote knows nothing about appliances: rebinding the slot changes what
    the next button press does without touching this class.
    """

    def __init__(self, command: Optional[Command] = None):
        self._command = command

    @property
    def command(self) -> Optional[Command]:
        return self._command

    def set_command(self, command: Command) -> None:
        self._command = command
        logger.debug(f"Bound {type(command).__name__} to remote control")

    def press_button(self) -> str:
        """
        Execute the bound command.

        Raises:
            NoCommandBoundError: If no command has been set yet
        """
        if self._command is None:
            raise NoCommandBoundError(type(self).__name__)
        return self._command.execute()
