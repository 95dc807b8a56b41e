"""
Command
=======

Requests wrapped as objects, decoupling the invoker (a button) from the
receiver (the thing that does the work).

Components:
    - Command: Protocol with snapshot(), execute() and undo(before)
    - Light + TurnLightOnCommand / TurnLightOffCommand + RemoteControl
    - Document + ActionOpen / ActionSave + MenuOptions

Rules:
    - One press runs exactly one receiver operation
    - undo() reverses only the most recent press, using the snapshot
      the invoker took just before that press
"""

import logging
from typing import Any, List, Optional, Protocol, Tuple

from patternbook.errors import ValidationError


logger = logging.getLogger(__name__)


class Command(Protocol):
    def snapshot(self) -> Any:
        ...

    def execute(self) -> str:
        ...

    def undo(self, before: Any) -> str:
        ...


# =============================================================================
# Light remote
# =============================================================================

class Light:
    """Receiver: a single switchable light."""

    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return "Light is ON"

    def turn_off(self) -> str:
        self.is_on = False
        return "Light is OFF"


class _LightCommand:
    """
    Switches a light. Holds no per-execution state: snapshot() is taken
    by the invoker before each execute() and handed back to undo().
    """

    def __init__(self, light: Light) -> None:
        self.light = light

    def _apply(self) -> str:
        raise NotImplementedError

    def snapshot(self) -> bool:
        return self.light.is_on

    def execute(self) -> str:
        return self._apply()

    def undo(self, previous: bool) -> str:
        return self.light.turn_on() if previous else self.light.turn_off()


class TurnLightOnCommand(_LightCommand):
    def _apply(self) -> str:
        return self.light.turn_on()


class TurnLightOffCommand(_LightCommand):
    def _apply(self) -> str:
        return self.light.turn_off()


class RemoteControl:
    """
    Invoker with one programmable button and an undo history.

    Attributes:
        history: (command, receiver snapshot taken before it ran) for
            every press, most recent last
    """

    def __init__(self) -> None:
        self._command: Optional[Command] = None
        self.history: List[Tuple[Command, Any]] = []

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> str:
        """
        Execute the bound command once.

        Raises:
            ValidationError: If no command is bound.
        """
        if self._command is None:
            raise ValidationError("No command bound to the button")
        before = self._command.snapshot()
        result = self._command.execute()
        self.history.append((self._command, before))
        return result

    def undo(self) -> Optional[str]:
        """Undo the last press; None if nothing to undo."""
        if not self.history:
            logger.info("Nothing to undo")
            return None
        command, before = self.history.pop()
        return command.undo(before)


# =============================================================================
# Document menu
# =============================================================================

class Document:
    """Receiver: a document that can be opened and saved."""

    def __init__(self) -> None:
        self.is_open = False
        self.save_count = 0

    def open(self) -> str:
        self.is_open = True
        return "Document opened"

    def save(self) -> str:
        self.save_count += 1
        return "Document saved"


class ActionOpen:
    def __init__(self, document: Document) -> None:
        self.document = document

    def execute(self) -> str:
        return self.document.open()


class ActionSave:
    def __init__(self, document: Document) -> None:
        self.document = document

    def execute(self) -> str:
        return self.document.save()


class MenuOptions:
    """Invoker: a menu with open and save entries."""

    def __init__(self, open_command: ActionOpen, save_command: ActionSave) -> None:
        self.open_command = open_command
        self.save_command = save_command

    def click_open(self) -> str:
        return self.open_command.execute()

    def click_save(self) -> str:
        return self.save_command.execute()


def main(settings=None) -> None:
    light = Light()
    remote = RemoteControl()

    remote.set_command(TurnLightOnCommand(light))
    print(remote.press_button())

    remote.set_command(TurnLightOffCommand(light))
    print(remote.press_button())

    print(f"Undo -> {remote.undo()}")


def main_document(settings=None) -> None:
    doc = Document()
    menu = MenuOptions(ActionOpen(doc), ActionSave(doc))

    print(menu.click_open())
    print(menu.click_save())


if __name__ == "__main__":
    main()
    main_document()
