"""Billiard table state and the rules that move the balls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from minibill.scene import Mesh, Scene
from minibill.vector import Vector2

TARGET_FPS = 60

TABLE_WIDTH = 15.0
TABLE_HEIGHT = 8.0
POCKET_RADIUS = 0.5
BALL_RADIUS = 0.3
SHOT_CHARGE_TIME = 1.0

BALL_COUNT = 7
CUE_BALL = 0

POCKET_POSITIONS: tuple[tuple[float, float], ...] = (
    (-0.5 * TABLE_WIDTH, -0.5 * TABLE_HEIGHT),
    (0.0, -0.5 * TABLE_HEIGHT),
    (0.5 * TABLE_WIDTH, -0.5 * TABLE_HEIGHT),
    (-0.5 * TABLE_WIDTH, 0.5 * TABLE_HEIGHT),
    (0.0, 0.5 * TABLE_HEIGHT),
    (0.5 * TABLE_WIDTH, 0.5 * TABLE_HEIGHT),
)

BALL_POSITIONS: tuple[tuple[float, float], ...] = (
    # the cue ball
    (-0.3 * TABLE_WIDTH, 0.0),
    # the object balls
    (0.2 * TABLE_WIDTH, 0.0),
    (0.25 * TABLE_WIDTH, 0.05 * TABLE_HEIGHT),
    (0.25 * TABLE_WIDTH, -0.05 * TABLE_HEIGHT),
    (0.3 * TABLE_WIDTH, 0.1 * TABLE_HEIGHT),
    (0.3 * TABLE_WIDTH, 0.0),
    (0.3 * TABLE_WIDTH, -0.1 * TABLE_HEIGHT),
)


def _zero_vectors() -> list[Vector2]:
    return [Vector2() for _ in range(BALL_COUNT)]


@dataclass
class Table:
    """Positions, velocities and meshes of the balls and pockets."""

    positions: list[Vector2] = field(default_factory=_zero_vectors)
    speed_direction: list[Vector2] = field(default_factory=_zero_vectors)
    speed_modulus: list[float] = field(default_factory=lambda: [0.0] * BALL_COUNT)
    is_pocketed: list[bool] = field(default_factory=lambda: [False] * BALL_COUNT)
    balls: list[Mesh | None] = field(default_factory=lambda: [None] * BALL_COUNT)
    _pockets: list[Mesh] = field(default_factory=list)

    def init(self, scene: Scene) -> None:
        """Rack the balls and create all meshes in the scene."""
        if self._pockets or any(ball is not None for ball in self.balls):
            raise RuntimeError("table is already initialised")

        self.positions = [Vector2(x, y) for x, y in BALL_POSITIONS]
        self.is_pocketed = [False] * BALL_COUNT

        for x, y in POCKET_POSITIONS:
            pocket = scene.create_pocket_mesh(POCKET_RADIUS)
            scene.place_mesh(pocket, x, y, 0.0)
            self._pockets.append(pocket)

        self.balls = []
        for x, y in BALL_POSITIONS:
            ball = scene.create_ball_mesh(BALL_RADIUS)
            scene.place_mesh(ball, x, y, 0.0)
            self.balls.append(ball)

        self.speed_direction = _zero_vectors()
        self.speed_modulus = [0.0] * BALL_COUNT

    def deinit(self, scene: Scene) -> None:
        """Remove all meshes from the scene and reset the table state."""
        if not self._pockets:
            raise RuntimeError("table is not initialised")
        for pocket in self._pockets:
            scene.destroy_mesh(pocket)
        for ball in self.balls:
            if ball is not None:
                scene.destroy_mesh(ball)

        self.positions = _zero_vectors()
        self.speed_direction = _zero_vectors()
        self.speed_modulus = [0.0] * BALL_COUNT
        self.is_pocketed = [False] * BALL_COUNT
        self._pockets = []
        self.balls = [None] * BALL_COUNT

    def speed_sum(self) -> float:
        """Return the sum of all ball speeds."""
        return sum(self.speed_modulus)


class Game:
    """The billiard game: shot charging, ball motion, borders, collisions, pockets."""

    def __init__(
        self,
        scene: Scene | None = None,
        set_target_fps: Callable[[int], None] | None = None,
    ) -> None:
        self.scene = scene if scene is not None else Scene()
        self.table = Table()
        self.is_charging_shot = False
        self.shot_charge_progress = 0.0
        self.is_balls_moving = False
        self._set_target_fps = set_target_fps

    def init(self) -> None:
        """Set up the frame rate, the table frame and the racked table."""
        if self._set_target_fps is not None:
            self._set_target_fps(TARGET_FPS)
        self.scene.setup_background(TABLE_WIDTH, TABLE_HEIGHT)
        self.table.init(self.scene)

    def deinit(self) -> None:
        """Clear the table."""
        self.table.deinit(self.scene)

    def is_in_pocket(self, ball_idx: int) -> bool:
        """Tell whether the ball's centre lies within any pocket."""
        position = self.table.positions[ball_idx]
        return any(
            Vector2(px - position.x, py - position.y).length() <= POCKET_RADIUS
            for px, py in POCKET_POSITIONS
        )

    def check_borders(self, ball_idx: int) -> None:
        """Bounce the ball off the cushions, losing some of its speed."""
        table = self.table
        position = table.positions[ball_idx]
        direction = table.speed_direction[ball_idx]

        bottom = -0.5 * TABLE_HEIGHT + BALL_RADIUS
        top = 0.5 * TABLE_HEIGHT - BALL_RADIUS
        left = -0.5 * TABLE_WIDTH + BALL_RADIUS
        right = 0.5 * TABLE_WIDTH - BALL_RADIUS

        if position.y < bottom:
            position.y = bottom
            modulus = table.speed_modulus[ball_idx]
            table.speed_modulus[ball_idx] = modulus - 0.15 * modulus * (
                1.0 + abs(direction.y)
            )
            direction.invert_y()

        if position.y > top:
            position.y = top
            modulus = table.speed_modulus[ball_idx]
            table.speed_modulus[ball_idx] = modulus - 0.15 * modulus * (
                1.0 + direction.y
            )
            direction.invert_y()

        if position.x < left:
            position.x = left
            modulus = table.speed_modulus[ball_idx]
            table.speed_modulus[ball_idx] = modulus - 0.15 * modulus * (
                1.0 + abs(direction.x)
            )
            direction.invert_x()

        if position.x > right:
            position.x = right
            modulus = table.speed_modulus[ball_idx]
            table.speed_modulus[ball_idx] = modulus - 0.15 * modulus * (
                1.0 + direction.x
            )
            direction.invert_x()

    def check_ball_collision(self, ball_idx: int) -> None:
        """Separate overlapping balls and exchange their velocities."""
        table = self.table
        position = table.positions[ball_idx]

        for other_idx in range(BALL_COUNT):
            if other_idx == ball_idx:
                continue
            other = table.positions[other_idx]
            distance = Vector2(other.x - position.x, other.y - position.y)
            length = distance.length()
            if length >= 2 * BALL_RADIUS:
                continue

            distance.normalize()
            s = distance.x
            c = distance.y
            position.x -= distance.x * (2 * BALL_RADIUS - length)
            position.y -= distance.y * (2 * BALL_RADIUS - length)

            own_dir = table.speed_direction[ball_idx]
            own_mod = table.speed_modulus[ball_idx]
            other_dir = table.speed_direction[other_idx]
            other_mod = table.speed_modulus[other_idx]

            vn1 = own_dir.x * own_mod * s + own_dir.y * own_mod * c
            vn2 = other_dir.x * other_mod * s + other_dir.y * other_mod * c
            vt1 = -other_dir.x * other_mod * c + other_dir.y * other_mod * s
            vt2 = -own_dir.x * own_mod * c + own_dir.y * own_mod * s

            new_own = Vector2(
                0.85 * (vn2 * s - vt2 * c) + 0.15 * (vn1 * s - vt1 * c),
                0.85 * (vn2 * c + vt2 * s) + 0.15 * (vn1 * c + vt1 * s),
            )
            new_other = Vector2(
                0.85 * (vn1 * s - vt1 * c) + 0.15 * (vn2 * s - vt2 * c),
                0.85 * (vn1 * c + vt1 * s) + 0.15 * (vn2 * c + vt2 * s),
            )

            table.speed_modulus[ball_idx] = 0.95 * new_own.length()
            new_own.normalize()
            table.speed_direction[ball_idx] = new_own

            table.speed_modulus[other_idx] = 0.95 * new_other.length()
            new_other.normalize()
            table.speed_direction[other_idx] = new_other

    def move_ball(self, ball_idx: int, dt: float) -> None:
        """Advance one ball by dt seconds, handling pockets, cushions and collisions."""
        table = self.table

        if self.is_in_pocket(ball_idx):
            if ball_idx == CUE_BALL:
                self.deinit()
                self.init()
                return
            ball = table.balls[ball_idx]
            if ball is not None:
                self.scene.destroy_mesh(ball)
            table.balls[ball_idx] = None
            away = 2 * TABLE_WIDTH
            table.positions[ball_idx] = Vector2(away, away)
            table.speed_modulus[ball_idx] = 0.0
            table.is_pocketed[ball_idx] = True
            return

        self.check_borders(ball_idx)
        self.check_ball_collision(ball_idx)

        position = table.positions[ball_idx]
        direction = table.speed_direction[ball_idx]
        modulus = table.speed_modulus[ball_idx]
        position.x += direction.x * modulus * dt
        position.y += direction.y * modulus * dt

        ball = table.balls[ball_idx]
        if ball is not None:
            self.scene.place_mesh(ball, position.x, position.y, 0.0)
        table.speed_modulus[ball_idx] = max(modulus - 0.05 * TABLE_WIDTH * dt, 0.0)

    def update(self, dt: float) -> None:
        """Advance the game by dt seconds."""
        if self.is_charging_shot:
            self.shot_charge_progress = min(
                self.shot_charge_progress + dt / SHOT_CHARGE_TIME, 1.0
            )
        self.scene.update_progress_bar(self.shot_charge_progress)

        if self.is_balls_moving:
            for ball_idx in range(BALL_COUNT):
                if not self.table.is_pocketed[ball_idx]:
                    self.move_ball(ball_idx, dt)
            if not self.table.speed_sum():
                self.is_balls_moving = False

    def mouse_button_pressed(self, x: float, y: float) -> None:
        """Start charging a shot unless the balls are still rolling."""
        if not self.is_balls_moving:
            self.is_charging_shot = True

    def mouse_button_released(self, x: float, y: float) -> None:
        """Shoot the cue ball towards (x, y) with the charged strength."""
        if self.is_balls_moving:
            return
        cue = self.table.positions[CUE_BALL]
        direction = Vector2(x - cue.x, y - cue.y)
        direction.normalize()
        self.table.speed_direction[CUE_BALL] = direction
        self.table.speed_modulus[CUE_BALL] = self.shot_charge_progress * TABLE_WIDTH

        self.is_balls_moving = True
        self.is_charging_shot = False
        self.shot_charge_progress = 0.0