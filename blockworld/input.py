"""Per-frame keyboard, mouse and scroll state with edge detection."""

from __future__ import annotations

MAX_KEYS = 512
DEFAULT_SENSITIVITY = 1.0


def _valid_key(key: int) -> bool:
    return 0 <= key < MAX_KEYS


class Input:
    """Collects raw input between frames; update() takes a snapshot for queries.

    Feed events with set_key_state(), set_mouse_position() and add_scroll(),
    call update() once per frame, then query the frame's state.
    """

    def __init__(self) -> None:
        self._raw_keys = [False] * MAX_KEYS
        self._current_keys = [False] * MAX_KEYS
        self._previous_keys = [False] * MAX_KEYS
        self._mouse: tuple[float, float] | None = None
        self._delta = (0.0, 0.0)
        self._frame_delta = (0.0, 0.0)
        self._scroll = (0.0, 0.0)
        self._frame_scroll = (0.0, 0.0)
        self.sensitivity = DEFAULT_SENSITIVITY

    def set_key_state(self, key: int, down: bool) -> None:
        """Record a key as down or up; unknown key codes are ignored."""
        if _valid_key(key):
            self._raw_keys[key] = bool(down)

    def set_mouse_position(self, x: float, y: float) -> None:
        """Record the cursor position; the first position produces no delta."""
        if self._mouse is not None:
            last_x, last_y = self._mouse
            dx, dy = self._delta
            self._delta = (dx + x - last_x, dy + y - last_y)
        self._mouse = (x, y)

    def add_scroll(self, x_offset: float, y_offset: float) -> None:
        """Accumulate a scroll wheel offset."""
        sx, sy = self._scroll
        self._scroll = (sx + x_offset, sy + y_offset)

    def update(self) -> None:
        """Start a new frame: snapshot keys and take the accumulated deltas."""
        self._previous_keys = self._current_keys
        self._current_keys = list(self._raw_keys)
        dx, dy = self._delta
        self._frame_delta = (dx * self.sensitivity, dy * self.sensitivity)
        self._delta = (0.0, 0.0)
        self._frame_scroll = self._scroll
        self._scroll = (0.0, 0.0)

    def is_key_pressed(self, key: int) -> bool:
        """True on the frame the key went down."""
        return _valid_key(key) and self._current_keys[key] and not self._previous_keys[key]

    def is_key_held(self, key: int) -> bool:
        """True while the key is down, including the frame it was pressed."""
        return _valid_key(key) and self._current_keys[key]

    def is_key_released(self, key: int) -> bool:
        """True on the frame the key went up."""
        return _valid_key(key) and self._previous_keys[key] and not self._current_keys[key]

    def mouse_delta(self) -> tuple[float, float]:
        """Mouse movement this frame, scaled by sensitivity; +y is down."""
        return self._frame_delta

    def scroll_delta(self) -> tuple[float, float]:
        """Scroll wheel movement this frame."""
        return self._frame_scroll