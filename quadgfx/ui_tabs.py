"""Tab-key focus cycling between widgets and per-id widget state storage."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from quadgfx.ui_input import Input, KeyCode

T = TypeVar("T")


class TabSelector:
    """Counts selectable widgets each frame and moves focus on Tab or Shift+Tab."""

    def __init__(self) -> None:
        self.counter = 0
        self.wants: int | None = None
        self.to_change: int | None = None

    def new_frame(self) -> None:
        """Turn the last frame's request into the widget to focus, wrapping around."""
        if self.wants == -1:
            self.to_change = self.counter - 1
        elif self.wants is not None and self.wants == self.counter:
            self.to_change = 0
        else:
            self.to_change = self.wants
        self.wants = None
        self.counter = 0

    def register_selectable_widget(self, has_focus: bool, input: Input) -> bool:
        """Register the next widget; True if it should take focus now."""
        if has_focus:
            tab_presses = [
                character
                for character in input.input_buffer
                if character.key == KeyCode.TAB
            ]
            if any(character.modifier_shift for character in tab_presses):
                self.wants = self.counter - 1
            elif tab_presses:
                self.wants = self.counter + 1

        result = self.to_change is not None and self.to_change == self.counter
        if result:
            self.to_change = None

        self.counter += 1
        return result


class AnyStorage:
    """Arbitrary values kept per widget id across frames."""

    def __init__(self) -> None:
        self._storage: dict[int, Any] = {}

    def __contains__(self, id: int) -> bool:
        return id in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def get_or_insert_with(self, id: int, factory: Callable[[], T]) -> T:
        """Return the value stored under `id`, creating it with `factory` if missing."""
        if id not in self._storage:
            self._storage[id] = factory()
        return self._storage[id]

    def get_or_default(self, id: int, factory: type[T]) -> T:
        """Return the value of type `factory` under `id`, creating a default if missing."""
        value = self.get_or_insert_with(id, factory)
        if not isinstance(value, factory):
            raise TypeError(
                f"value stored under {id} is {type(value).__name__}, "
                f"not {factory.__name__}"
            )
        return value

    def set(self, id: int, value: Any) -> None:
        """Store `value` under `id`, replacing what was there."""
        self._storage[id] = value