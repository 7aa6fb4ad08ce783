"""Input state shared by UI widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from quadgfx.canvas import Vec2


class KeyCode(Enum):
    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    BACKSPACE = "backspace"
    TAB = "tab"
    Z = "z"
    Y = "y"
    C = "c"
    X = "x"
    V = "v"
    A = "a"
    ESCAPE = "escape"
    ENTER = "enter"
    CONTROL = "control"


@dataclass(frozen=True)
class InputCharacter:
    """A typed character or a pressed key, with its modifiers."""

    key: str | KeyCode
    modifier_shift: bool = False
    modifier_ctrl: bool = False

    @property
    def is_char(self) -> bool:
        return isinstance(self.key, str)


@dataclass
class Input:
    """Mouse and keyboard state for the current UI frame."""

    mouse_position: Vec2 = field(default_factory=Vec2)
    mouse_wheel: Vec2 = field(default_factory=Vec2)
    is_mouse_down: bool = False
    click_down: bool = False
    click_up: bool = False
    cursor_grabbed: bool = False
    window_active: bool = False
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False
    input_buffer: list[InputCharacter] = field(default_factory=list)

    def reset(self) -> None:
        """Forget the one-frame events while keeping held state."""
        self.click_down = False
        self.click_up = False
        self.mouse_wheel = Vec2()
        self.escape = False
        self.enter = False
        self.input_buffer.clear()


class MemoryClipboard:
    """A clipboard kept in process memory."""

    def __init__(self) -> None:
        self._data: str | None = None

    def get(self) -> str | None:
        return self._data

    def set(self, data: str) -> None:
        self._data = data