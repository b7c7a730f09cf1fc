"""Keyboard shortcuts bound to commands of windows."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import IntEnum


class Modifier(IntEnum):
    """Combination of modifier keys held with a key."""

    NONE = 0
    CTRL = 1
    ALT = 2
    CTRL_ALT = 3
    CTRL_SHIFT = 4
    ALT_SHIFT = 5
    CTRL_SHIFT_ALT = 6


@dataclass(frozen=True, order=True)
class Key:
    """A key code together with its modifiers."""

    modifier: Modifier
    key: int


@dataclass(frozen=True)
class _Command:
    command_id: int
    can_extended: bool
    can_repeated: bool


def get_modifier(ctrl: bool, alt: bool, shift: bool) -> Modifier:
    """Return the modifier for the held keys; shift alone counts as none."""
    if ctrl and shift and alt:
        return Modifier.CTRL_SHIFT_ALT
    if ctrl and shift:
        return Modifier.CTRL_SHIFT
    if ctrl and alt:
        return Modifier.CTRL_ALT
    if ctrl:
        return Modifier.CTRL
    if alt and shift:
        return Modifier.ALT_SHIFT
    if alt:
        return Modifier.ALT
    return Modifier.NONE


def make_key(modifier: Modifier, key: int) -> Key:
    """Return the key *key* held with *modifier*."""
    return Key(Modifier(modifier), key)


class ShortcutKey:
    """Maps keys pressed in a window to command identifiers.

    *post_command*, when given, is called as ``post_command(window, id)``
    whenever a key press resolves to a command.
    """

    def __init__(
        self, post_command: Callable[[Hashable, int], object] | None = None
    ) -> None:
        self._bindings: dict[tuple[Key, Hashable], _Command] = {}
        self._post = post_command

    def add_shortcut(
        self,
        window: Hashable,
        command_id: int,
        key: Key,
        can_extended: bool = True,
        can_repeated: bool = False,
    ) -> None:
        """Bind *key* in *window* to *command_id*.

        Raises ValueError if the key is already bound in that window.
        """
        slot = (key, window)
        if slot in self._bindings:
            raise ValueError(f"{key} is already bound in {window!r}")
        self._bindings[slot] = _Command(command_id, can_extended, can_repeated)

    def modify_shortcut(
        self,
        window: Hashable,
        command_id: int,
        key: Key,
        can_extended: bool = True,
        can_repeated: bool = False,
    ) -> None:
        """Move the binding of *command_id* in *window* to *key*."""
        self.remove_shortcut(window, command_id)
        self.add_shortcut(window, command_id, key, can_extended, can_repeated)

    def remove_shortcut(self, window: Hashable, command_id: int) -> None:
        """Remove the binding of *command_id* in *window* with the lowest key.

        Raises KeyError if the command has no binding in that window.
        """
        matches = [
            slot
            for slot, command in self._bindings.items()
            if slot[1] is window and command.command_id == command_id
        ]
        if not matches:
            raise KeyError(f"command {command_id} has no shortcut in {window!r}")
        del self._bindings[min(matches, key=lambda slot: slot[0])]

    def process_shortcut(
        self, window: Hashable, key: Key, extended: bool, repeated: bool
    ) -> int | None:
        """Return the command bound to *key* in *window*, or None."""
        command = self._bindings.get((key, window))
        if command is None:
            return None
        if (extended and not command.can_extended) or (
            repeated and not command.can_repeated
        ):
            return None
        return command.command_id

    def process_key(
        self,
        window: Hashable,
        ctrl: bool,
        alt: bool,
        shift: bool,
        keycode: int,
        extended: bool,
        repeat: int,
    ) -> bool:
        """Handle a key press; return whether it triggered a command."""
        key = Key(get_modifier(ctrl, alt, shift), keycode)
        command_id = self.process_shortcut(window, key, extended, repeat > 1)
        if command_id is None:
            return False
        if self._post is not None:
            self._post(window, command_id)
        return True