"""UI window geometry: position, size, title bar and content area."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from quadgfx.canvas import Vec2
from quadgfx.image import Rect


@dataclass(frozen=True)
class RectOffset:
    """Margins on each side of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class LayoutArea:
    """The region widgets are laid out in, with the spacing between them."""

    area: Rect
    margin: float
    next_same_line: float | None = None


@dataclass
class Window:
    """A UI window; child windows have a parent id, top-level ones do not."""

    id: int
    parent: int | None
    position: Vec2
    size: Vec2
    title_height: float
    window_margin: RectOffset
    margin: float
    movable: bool
    force_focus: bool
    active: bool = False
    was_active: bool = False
    vertical_scroll_bar_width: float = 0.0
    want_close: bool = False
    children: list[int] = field(default_factory=list)
    clipping_zone: Rect | None = None
    cursor: LayoutArea = field(init=False)

    def __post_init__(self) -> None:
        self.cursor = self._layout()

    def _layout(self) -> LayoutArea:
        m = self.window_margin
        return LayoutArea(
            Rect(
                self.position.x + m.left,
                self.position.y + self.title_height + m.top,
                self.size.x - m.left - m.right,
                self.size.y - self.title_height - m.top - m.bottom,
            ),
            self.margin,
        )

    def resize(self, size: Vec2) -> None:
        """Change the size and rebuild the layout area."""
        self.size = size
        self.cursor = self._layout()

    def top_level(self) -> bool:
        """True if the window has no parent."""
        return self.parent is None

    def full_rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def content_rect(self) -> Rect:
        """The area below the title bar, excluding the scroll bar."""
        return Rect(
            self.position.x,
            self.position.y + self.title_height,
            self.size.x - self.vertical_scroll_bar_width,
            self.size.y - self.title_height,
        )

    def set_position(self, position: Vec2) -> None:
        """Move the window and the origin of its layout area."""
        self.position = position
        self.cursor.area = replace(
            self.cursor.area, x=position.x, y=position.y + self.title_height
        )

    def title_rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.title_height)

    def same_line(self, x: float) -> None:
        """Place the next widget on the current line at horizontal offset `x`."""
        self.cursor.next_same_line = x