"""2D shape rendering onto a Canvas."""

from __future__ import annotations

import math

from quadgfx.canvas import Canvas, Color, DrawMode, Vec2, Vertex

_F32_EPSILON = 1.1920929e-07
_CIRCLE_SIDES = 20


def _check_sides(sides: int, upper: int) -> None:
    if not 0 <= sides <= upper:
        raise ValueError(f"sides must be between 0 and {upper}, got {sides}")


def _emit(canvas: Canvas, vertices: list[Vertex], indices: list[int]) -> None:
    canvas.texture(None)
    canvas.draw_mode(DrawMode.TRIANGLES)
    canvas.geometry(vertices, indices)


def draw_triangle(canvas: Canvas, v1: Vec2, v2: Vec2, v3: Vec2, color: Color) -> None:
    """Draw a solid triangle between three points."""
    vertices = [Vertex(p.x, p.y, 0.0, 0.0, 0.0, color) for p in (v1, v2, v3)]
    _emit(canvas, vertices, [0, 1, 2])


def draw_triangle_lines(
    canvas: Canvas, v1: Vec2, v2: Vec2, v3: Vec2, thickness: float, color: Color
) -> None:
    """Draw a triangle outline."""
    for a, b in ((v1, v2), (v2, v3), (v3, v1)):
        draw_line(canvas, a.x, a.y, b.x, b.y, thickness, color)


def draw_rectangle(
    canvas: Canvas, x: float, y: float, w: float, h: float, color: Color
) -> None:
    """Draw a solid rectangle with its top-left corner at (x, y)."""
    vertices = [
        Vertex(x, y, 0.0, 0.0, 0.0, color),
        Vertex(x + w, y, 0.0, 1.0, 0.0, color),
        Vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
        Vertex(x, y + h, 0.0, 0.0, 1.0, color),
    ]
    _emit(canvas, vertices, [0, 1, 2, 0, 2, 3])


def draw_rectangle_lines(
    canvas: Canvas,
    x: float,
    y: float,
    w: float,
    h: float,
    thickness: float,
    color: Color,
) -> None:
    """Draw a rectangle outline with the given line thickness."""
    t = thickness / 2.0
    vertices = [
        Vertex(x, y, 0.0, 0.0, 1.0, color),
        Vertex(x + w, y, 0.0, 1.0, 0.0, color),
        Vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
        Vertex(x, y + h, 0.0, 0.0, 0.0, color),
        # inner rectangle
        Vertex(x + t, y + t, 0.0, 0.0, 0.0, color),
        Vertex(x + w - t, y + t, 0.0, 0.0, 0.0, color),
        Vertex(x + w - t, y + h - t, 0.0, 0.0, 0.0, color),
        Vertex(x + t, y + h - t, 0.0, 0.0, 0.0, color),
    ]
    indices = [
        0, 1, 4, 1, 4, 5, 1, 5, 6, 1, 2, 6, 3, 7, 2, 2, 7, 6, 0, 4, 3, 3, 4, 7,
    ]
    _emit(canvas, vertices, indices)


def draw_hexagon(
    canvas: Canvas,
    x: float,
    y: float,
    size: float,
    border: float,
    vertical: bool,
    border_color: Color,
    fill_color: Color,
) -> None:
    """Draw a filled hexagon with an optional outline."""
    rotation = 90.0 if vertical else 0.0
    draw_poly(canvas, x, y, 6, size, rotation, fill_color)
    if border > 0.0:
        draw_poly_lines(canvas, x, y, 6, size, rotation, border, border_color)


def _rim_direction(i: int, sides: int, rot: float) -> tuple[float, float]:
    angle = i / sides * math.pi * 2.0 + rot
    return math.cos(angle), math.sin(angle)


def draw_poly(
    canvas: Canvas,
    x: float,
    y: float,
    sides: int,
    radius: float,
    rotation: float,
    color: Color,
) -> None:
    """Draw a solid regular polygon; rotation is clockwise in degrees."""
    _check_sides(sides, 254)
    if sides == 0:
        raise ValueError("a polygon needs at least one side")
    rot = math.radians(rotation)
    vertices = [Vertex(x, y, 0.0, 0.0, 0.0, color)]
    indices: list[int] = []
    for i in range(sides + 1):
        rx, ry = _rim_direction(i, sides, rot)
        vertices.append(Vertex(x + radius * rx, y + radius * ry, 0.0, rx, ry, color))
        if i != sides:
            indices.extend((0, i + 1, i + 2))
    _emit(canvas, vertices, indices)


def draw_poly_lines(
    canvas: Canvas,
    x: float,
    y: float,
    sides: int,
    radius: float,
    rotation: float,
    thickness: float,
    color: Color,
) -> None:
    """Draw a regular polygon outline; rotation is clockwise in degrees."""
    _check_sides(sides, 255)
    rot = math.radians(rotation)
    for i in range(sides):
        rx0, ry0 = _rim_direction(i, sides, rot)
        rx1, ry1 = _rim_direction(i + 1, sides, rot)
        draw_line(
            canvas,
            x + radius * rx0,
            y + radius * ry0,
            x + radius * rx1,
            y + radius * ry1,
            thickness,
            color,
        )


def draw_circle(canvas: Canvas, x: float, y: float, r: float, color: Color) -> None:
    """Draw a solid circle."""
    draw_poly(canvas, x, y, _CIRCLE_SIDES, r, 0.0, color)


def draw_circle_lines(
    canvas: Canvas, x: float, y: float, r: float, thickness: float, color: Color
) -> None:
    """Draw a circle outline."""
    draw_poly_lines(canvas, x, y, _CIRCLE_SIDES, r, 0.0, thickness, color)


def draw_line(
    canvas: Canvas,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    thickness: float,
    color: Color,
) -> None:
    """Draw a line segment of the given thickness as a quad."""
    dx = x2 - x1
    dy = y2 - y1
    nx, ny = -dy, dx

    length = math.hypot(nx, ny)
    half = thickness * 0.5
    if half == 0.0:
        if length == 0.0:
            return
        tlen = math.inf
    else:
        tlen = length / half
    if tlen < _F32_EPSILON:
        return
    tx = nx / tlen
    ty = ny / tlen

    vertices = [
        Vertex(x1 + tx, y1 + ty, 0.0, 0.0, 0.0, color),
        Vertex(x1 - tx, y1 - ty, 0.0, 0.0, 0.0, color),
        Vertex(x2 + tx, y2 + ty, 0.0, 0.0, 0.0, color),
        Vertex(x2 - tx, y2 - ty, 0.0, 0.0, 0.0, color),
    ]
    _emit(canvas, vertices, [0, 1, 2, 2, 1, 3])