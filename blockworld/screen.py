"""A stack of UI screens with enter and exit hooks."""

from __future__ import annotations


class Screen:
    """Base class for screens; subclasses extend the hooks they need."""

    active: bool = False

    def on_enter(self) -> None:
        """Called when the screen is pushed; marks the screen active."""
        self.active = True

    def on_exit(self) -> None:
        """Called when the screen is popped; marks the screen inactive."""
        self.active = False


class ScreenManager:
    """Holds screens in a stack; the top screen is the active one."""

    def __init__(self) -> None:
        self._stack: list[Screen] = []

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def push(self, screen: Screen | None) -> None:
        """Enter a screen and put it on top; None is ignored."""
        if screen is None:
            return
        screen.on_enter()
        self._stack.append(screen)

    def pop(self) -> Screen:
        """Exit and remove the top screen, returning it."""
        if not self._stack:
            raise IndexError("pop from an empty screen stack")
        self._stack[-1].on_exit()
        return self._stack.pop()

    def top(self) -> Screen | None:
        """The active screen, or None if the stack is empty."""
        return self._stack[-1] if self._stack else None