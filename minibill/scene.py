"""Scene of meshes, table frame and shot progress bar, drawn with pygame."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Sequence

import pygame

VIEW_WIDTH = 16.0
VIEW_HEIGHT = 9.0

CIRCLE_TRIANGLES = 16

PROGRESS_BAR_LEFT = -3.0
PROGRESS_BAR_RIGHT = 3.0
PROGRESS_BAR_TOP = -4.0
PROGRESS_BAR_BOTTOM = -4.5

Point = tuple[float, float]
Triangle = tuple[Point, Point, Point]
Rectangle = tuple[float, float, float, float]
ToScreen = Callable[[float, float], Point]


def _rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return (round(r * 255), round(g * 255), round(b * 255))


CLEAR_COLOR = _rgb(0.1, 0.4, 0.2)
BACKGROUND_COLOR = _rgb(0.05, 0.05, 0.05)
PROGRESS_BAR_COLOR = _rgb(1.0, 0.0, 1.0)


class Color(Enum):
    """Mesh colours as 8-bit RGB triples."""

    RED = (255, 0, 0)
    GREEN = (0, 255, 0)
    BLUE = (0, 0, 255)
    BLACK = (0, 0, 0)
    WHITE = (255, 255, 255)


def screen_to_world_x(x: float) -> float:
    """Map a horizontal screen fraction (0 = left, 1 = right) to world units."""
    return 0.5 * VIEW_WIDTH * (2.0 * x - 1.0)


def screen_to_world_y(y: float) -> float:
    """Map a vertical screen fraction (0 = bottom, 1 = top) to world units."""
    return 0.5 * VIEW_HEIGHT * (2.0 * y - 1.0)


class Mesh:
    """A set of triangles in local space, placed in the world by position and angle."""

    def __init__(
        self, triangles: Sequence[Triangle] = (), color: Color = Color.WHITE
    ) -> None:
        self.position_x = 0.0
        self.position_y = 0.0
        self.angle = 0.0
        self.color = color
        self._triangles = tuple(triangles)

    def place(self, x: float, y: float, angle: float) -> None:
        """Set the world position and rotation (radians) of the mesh."""
        self.position_x = x
        self.position_y = y
        self.angle = angle

    def to_world(self, vx: float, vy: float) -> Point:
        """Transform a local-space vertex to world space."""
        c = math.cos(self.angle)
        s = math.sin(self.angle)
        return (
            self.position_x + vx * c - vy * s,
            self.position_y + vx * s + vy * c,
        )

    def draw(self, surface: pygame.Surface, to_screen: ToScreen) -> None:
        """Fill every triangle of the mesh onto the surface."""
        for triangle in self._triangles:
            points = [to_screen(*self.to_world(*vertex)) for vertex in triangle]
            pygame.draw.polygon(surface, self.color.value, points)


class CircleMesh(Mesh):
    """A filled disc made of a fan of triangles around its centre."""

    def __init__(self, radius: float, color: Color) -> None:
        super().__init__(color=color)
        self.radius = radius

    def _rim(self, i: int) -> Point:
        a = i / CIRCLE_TRIANGLES * 2.0 * math.pi
        return (self.radius * math.cos(a), self.radius * math.sin(a))

    def triangles(self) -> list[Triangle]:
        """Return the fan triangles in local space: rim, centre, next rim."""
        return [
            (self._rim(i), (0.0, 0.0), self._rim(i + 1))
            for i in range(CIRCLE_TRIANGLES)
        ]

    def draw(self, surface: pygame.Surface, to_screen: ToScreen) -> None:
        """Fill the disc; the fan's union is the polygon through its rim points."""
        points = [
            to_screen(*self.to_world(*self._rim(i))) for i in range(CIRCLE_TRIANGLES)
        ]
        pygame.draw.polygon(surface, self.color.value, points)


class Scene:
    """Everything that is drawn: meshes, the frame around the table, the progress bar."""

    def __init__(self) -> None:
        self.meshes: list[Mesh] = []
        self.background_width = 0.0
        self.background_height = 0.0
        self.progress = 0.0

    def _add(self, mesh: Mesh) -> Mesh:
        self.meshes.append(mesh)
        return mesh

    def create_ball_mesh(self, radius: float) -> CircleMesh:
        """Create a white disc and add it to the scene."""
        return self._add(CircleMesh(radius, Color.WHITE))

    def create_pocket_mesh(self, radius: float) -> CircleMesh:
        """Create a red disc and add it to the scene."""
        return self._add(CircleMesh(radius, Color.RED))

    def destroy_mesh(self, mesh: Mesh) -> None:
        """Remove a mesh from the scene; raise ValueError if it is not there."""
        for i, existing in enumerate(self.meshes):
            if existing is mesh:
                del self.meshes[i]
                return
        raise ValueError("mesh is not part of the scene")

    def place_mesh(self, mesh: Mesh, x: float, y: float, angle: float) -> None:
        """Move and rotate a mesh."""
        mesh.place(x, y, angle)

    def setup_background(self, width: float, height: float) -> None:
        """Set the size of the table area that the frame leaves uncovered."""
        self.background_width = width
        self.background_height = height

    def update_progress_bar(self, progress: float) -> None:
        """Set the bar's fill fraction, clamped to [0, 1]."""
        self.progress = max(min(progress, 1.0), 0.0)

    def background_rectangles(self) -> list[Rectangle]:
        """Return the four frame rectangles as (left, top, right, bottom)."""
        view_hw = 0.5 * VIEW_WIDTH
        view_hh = 0.5 * VIEW_HEIGHT
        back_hw = 0.5 * self.background_width
        back_hh = 0.5 * self.background_height
        return [
            (-view_hw, view_hh, -back_hw, -view_hh),
            (back_hw, view_hh, view_hw, -view_hh),
            (-back_hw, view_hh, back_hw, back_hh),
            (-back_hw, -back_hh, back_hw, -view_hh),
        ]

    def progress_bar_rectangle(self) -> Rectangle:
        """Return the filled part of the progress bar as (left, top, right, bottom)."""
        right = PROGRESS_BAR_LEFT + self.progress * (
            PROGRESS_BAR_RIGHT - PROGRESS_BAR_LEFT
        )
        return (PROGRESS_BAR_LEFT, PROGRESS_BAR_TOP, right, PROGRESS_BAR_BOTTOM)

    def world_to_screen(self, x: float, y: float, size: tuple[int, int]) -> Point:
        """Map world coordinates to pixel coordinates on a surface of the given size."""
        width, height = size
        fx = (x / (0.5 * VIEW_WIDTH) + 1.0) / 2.0
        fy = (y / (0.5 * VIEW_HEIGHT) + 1.0) / 2.0
        return (fx * width, (1.0 - fy) * height)

    def _fill_rectangle(
        self,
        surface: pygame.Surface,
        to_screen: ToScreen,
        rect: Rectangle,
        color: tuple[int, int, int],
    ) -> None:
        left, top, right, bottom = rect
        if left == right or top == bottom:
            return
        corners = [(left, top), (right, top), (right, bottom), (left, bottom)]
        pygame.draw.polygon(surface, color, [to_screen(*p) for p in corners])

    def draw(self, surface: pygame.Surface) -> None:
        """Render the whole scene onto a surface."""
        size = surface.get_size()

        def to_screen(x: float, y: float) -> Point:
            return self.world_to_screen(x, y, size)

        surface.fill(CLEAR_COLOR)
        for mesh in self.meshes:
            mesh.draw(surface, to_screen)
        for rect in self.background_rectangles():
            self._fill_rectangle(surface, to_screen, rect, BACKGROUND_COLOR)
        self._fill_rectangle(
            surface, to_screen, self.progress_bar_rectangle(), PROGRESS_BAR_COLOR
        )