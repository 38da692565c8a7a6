"""Game rules: the ball, the paddle on one chosen edge, and time survived."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
BALL_RADIUS = 10.0
PADDLE_THICKNESS = 10.0
PADDLE_LENGTH = 100.0
INITIAL_SPEED = 200.0
SPEED_INCREMENT = 10.0
PADDLE_SPEED = 300.0
_FULL_TURN = 2 * 3.14159265


class Side(Enum):
    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 3
    RIGHT = 4


class _RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other: "Rect") -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        inter_left = max(self.left, other.left)
        inter_top = max(self.top, other.top)
        inter_right = min(self.left + self.width, other.left + other.width)
        inter_bottom = min(self.top + self.height, other.top + other.height)
        return inter_left < inter_right and inter_top < inter_bottom


def random_angle(minimum_degree: float, maximum_degree: float, rng: _RandomSource) -> float:
    """Pick an angle in [minimum, maximum) in steps of a thousandth of the range.

    The value is returned as is and used directly as radians by the game.
    """
    span = maximum_degree - minimum_degree
    return minimum_degree + rng.randrange(1000) / 1000.0 * span


_BOUNCE_RANGES = {
    Side.TOP: (90.0, 270.0),
    Side.BOTTOM: (-90.0, 90.0),
    Side.LEFT: (-45.0, 45.0),
    Side.RIGHT: (135.0, 225.0),
}


@dataclass(frozen=True)
class Controls:
    """Arrow keys held during a frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


class GameState:
    """Everything that changes while the game runs."""

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.ball_x = WINDOW_WIDTH / 2
        self.ball_y = WINDOW_HEIGHT / 2
        angle = self.rng.random()
        self.velocity = (math.cos(angle), math.sin(angle))
        self.speed = INITIAL_SPEED
        self.time_survived = 0.0
        self.red = 0
        self.green = 0
        self.blue = 0
        self.chosen_side = Side.TOP
        self.paddle_active = True
        self.paddle_position = WINDOW_WIDTH / 2 + PADDLE_LENGTH / 2

    def choose_side(self, side: Side) -> None:
        """Put the paddle, centred, on the given edge and activate it."""
        if side in (Side.TOP, Side.BOTTOM):
            self.paddle_position = WINDOW_WIDTH / 2 - PADDLE_LENGTH / 2
        elif side in (Side.LEFT, Side.RIGHT):
            self.paddle_position = WINDOW_HEIGHT / 2 - PADDLE_LENGTH / 2
        else:
            raise ValueError(f"cannot place the paddle on side {side!r}")
        self.chosen_side = side
        self.paddle_active = True

    def ball_rect(self) -> Rect:
        """Bounding box of the ball."""
        return Rect(
            self.ball_x - BALL_RADIUS,
            self.ball_y - BALL_RADIUS,
            2 * BALL_RADIUS,
            2 * BALL_RADIUS,
        )

    def paddle_rect(self) -> Optional[Rect]:
        """Bounding box of the paddle, or None when no side is chosen."""
        side = self.chosen_side
        if side is Side.TOP:
            return Rect(self.paddle_position, 0.0, PADDLE_LENGTH, PADDLE_THICKNESS)
        if side is Side.BOTTOM:
            return Rect(
                self.paddle_position,
                WINDOW_HEIGHT - PADDLE_THICKNESS,
                PADDLE_LENGTH,
                PADDLE_THICKNESS,
            )
        if side is Side.LEFT:
            return Rect(0.0, self.paddle_position, PADDLE_THICKNESS, PADDLE_LENGTH)
        if side is Side.RIGHT:
            return Rect(
                WINDOW_WIDTH - PADDLE_THICKNESS,
                self.paddle_position,
                PADDLE_THICKNESS,
                PADDLE_LENGTH,
            )
        return None

    def reset_ball(self) -> None:
        """Start a new round: centred ball, random direction, no paddle."""
        self.ball_x = WINDOW_WIDTH / 2
        self.ball_y = WINDOW_HEIGHT / 2
        angle = self.rng.random() * _FULL_TURN
        self.velocity = (math.cos(angle), math.sin(angle))
        self.speed = INITIAL_SPEED
        self.time_survived = 0.0
        self.paddle_active = False
        self.chosen_side = Side.NONE

    def _move_paddle(self, dt: float, controls: Controls) -> None:
        step = PADDLE_SPEED * dt
        if self.chosen_side in (Side.LEFT, Side.RIGHT):
            backward, forward, limit = controls.up, controls.down, WINDOW_HEIGHT
        else:
            backward, forward, limit = controls.left, controls.right, WINDOW_WIDTH
        if backward:
            self.paddle_position = max(0.0, self.paddle_position - step)
        if forward:
            self.paddle_position = min(limit - PADDLE_LENGTH, self.paddle_position + step)

    def step(self, dt: float, controls: Controls = Controls()) -> Optional[float]:
        """Advance the game by dt seconds.

        Returns the time survived when the ball left the window (the round
        is then reset), otherwise None.
        """
        self.time_survived += dt
        self.speed += SPEED_INCREMENT * dt

        vx, vy = self.velocity
        self.ball_x += vx * self.speed * dt
        self.ball_y += vy * self.speed * dt
        x, y = self.ball_x, self.ball_y

        if self.paddle_active:
            self._move_paddle(dt, controls)
            paddle = self.paddle_rect()
            if paddle is not None and self.ball_rect().intersects(paddle):
                low, high = _BOUNCE_RANGES[self.chosen_side]
                angle = random_angle(low, high, self.rng)
                self.velocity = (math.cos(angle), math.sin(angle))

        finished: Optional[float] = None
        if x < 0 or x > WINDOW_WIDTH or y < 0 or y > WINDOW_HEIGHT:
            finished = self.time_survived
            self.reset_ball()

        self.red = int(self.red + 30 * dt) % 256
        self.green = int(self.green + 60 * dt) % 256
        self.blue = int(self.blue + 90 * dt) % 256
        return finished

    @property
    def background(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)