"""
Air Hockey game entities: puck, paddles, score and timers
"""

import random
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np

from air_hockey.utils.config import GameConfig
from air_hockey.utils.config import game_config

# Slack for elapsed times built from many float frame durations
TIME_EPSILON = 1e-9


class Side(Enum):
    """Side of the rink a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Paddle:
    """Player paddle, a circle sliding on a fixed vertical line"""

    def __init__(self, side: Side, config: GameConfig | None = None):
        config = config if config is not None else game_config
        self.side = side
        self.radius = config.PADDLE_RADIUS
        self.home_x = config.left_paddle_x() if side is Side.LEFT else config.right_paddle_x()
        self.position = Vector2D(self.home_x, 0.0)

        # Vertical limits keep the whole circle inside the rink
        self.max_y = config.RINK_HEIGHT / 2 - self.radius
        self.min_y = -self.max_y

    def reset_position(self) -> None:
        """Puts the paddle back at its default spot on the center line"""
        self.position = Vector2D(self.home_x, 0.0)

    def __repr__(self) -> str:
        return f"Paddle({self.side.value}, y={self.position.y:.1f})"


class Puck:
    """Game puck"""

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.size = size if size is not None else game_config.PUCK_SIZE

    @property
    def radius(self) -> float:
        return self.size / 2

    def reset_to_center(self, direction: int, speed: float) -> None:
        """Resets the puck to the origin, served horizontally in the given direction"""
        self.position = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(direction * speed, 0.0)

    def __repr__(self) -> str:
        return f"Puck(pos={self.position.to_tuple()}, vel={self.velocity.to_tuple()})"


@dataclass
class Score:
    """Goals scored by each side during the current session"""

    left: int = 0
    right: int = 0

    def credit(self, side: Side) -> None:
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class ServeDelayTimer:
    """One-shot timer holding the puck still after play starts or a goal"""

    duration: float
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration - TIME_EPSILON

    @property
    def remaining(self) -> float:
        if self.finished:
            return 0.0
        return self.duration - self.elapsed

    def tick(self, dt: float) -> None:
        self.elapsed = min(self.duration, self.elapsed + dt)

    def rearm(self) -> None:
        self.elapsed = 0.0


@dataclass
class CountdownState:
    """Pre-game countdown: a value decremented on a repeating interval"""

    remaining: int
    interval: float
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.remaining == 0

    def tick(self, dt: float) -> int:
        """Advances the interval clock, returns how many decrements happened"""
        self.elapsed += dt
        steps = 0
        while self.elapsed >= self.interval - TIME_EPSILON and self.remaining > 0:
            self.elapsed -= self.interval
            self.remaining -= 1
            steps += 1
        return steps


@dataclass
class PlayingEntities:
    """The bodies on the rink while a match is being played

    The two paddles and the puck are always created and dropped together.
    """

    left_paddle: Paddle
    right_paddle: Paddle
    puck: Puck

    @classmethod
    def spawn(cls, config: GameConfig | None = None, direction: int = 0) -> "PlayingEntities":
        """Creates paddles at their default spots and a puck served from the origin

        Args:
            config: Game configuration, the global one when omitted
            direction: -1 for left, 1 for right, 0 for random
        """
        config = config if config is not None else game_config
        if direction == 0:
            direction = random.choice([-1, 1])

        return cls(
            left_paddle=Paddle(Side.LEFT, config),
            right_paddle=Paddle(Side.RIGHT, config),
            puck=Puck(0.0, 0.0, direction * config.PUCK_SPEED, 0.0, config.PUCK_SIZE),
        )

    def paddle(self, side: Side) -> Paddle:
        return self.left_paddle if side is Side.LEFT else self.right_paddle

    def paddles(self) -> Iterator[Paddle]:
        yield self.left_paddle
        yield self.right_paddle

    def reset_paddles(self) -> None:
        for paddle in self.paddles():
            paddle.reset_position()

