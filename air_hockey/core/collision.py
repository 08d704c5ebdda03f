"""
Collision detection system for Air Hockey

The module-level functions are pure: they take positions and velocities and
return new ones. CollisionDetector applies them to the game entities.
"""

from air_hockey.core.entities import Paddle, Puck, Side, Vector2D


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def bounce_off_walls(
    position: Vector2D, velocity: Vector2D, boundary: float
) -> tuple[Vector2D, Vector2D, str | None]:
    """
    Keeps a circle between the top and bottom walls.

    A circle beyond ``boundary`` (or below ``-boundary``) is put back on it and
    its vertical velocity is forced to point back into the rink. The velocity is
    not simply flipped, so a circle that stays past the wall for several frames
    never oscillates.

    Returns:
        (position, velocity, wall) where wall is "top", "bottom" or None
    """
    if position.y > boundary:
        return Vector2D(position.x, boundary), Vector2D(velocity.x, -abs(velocity.y)), "top"
    if position.y < -boundary:
        return Vector2D(position.x, -boundary), Vector2D(velocity.x, abs(velocity.y)), "bottom"
    return position.copy(), velocity.copy(), None


def get_collision_normal(
    position: Vector2D, obstacle_position: Vector2D, threshold: float
) -> Vector2D | None:
    """
    Unit vector from the obstacle center to ``position`` when both circles overlap.

    Returns None when the circles don't touch, and also when both centers
    coincide, since no direction can be derived from a zero-length vector.
    """
    offset = position - obstacle_position
    distance = offset.magnitude()
    if distance <= 0.0 or distance >= threshold:
        return None
    return offset / distance


def reflect_velocity(velocity: Vector2D, normal: Vector2D, speed: float) -> Vector2D:
    """Reflects ``velocity`` about ``normal`` (v' = v - 2(v·n)n), rescaled to ``speed``"""
    along_normal = velocity.dot(normal)
    reflected = velocity - normal * (2.0 * along_normal)
    if reflected.magnitude() == 0:
        return reflected
    return reflected.normalize() * speed


def resolve_circle_collision(
    position: Vector2D,
    velocity: Vector2D,
    obstacle_position: Vector2D,
    threshold: float,
    speed: float,
) -> tuple[Vector2D, bool]:
    """
    Bounces a moving circle off a static one.

    The velocity only changes when the circles overlap and the moving circle
    is heading toward the obstacle, so a circle already leaving an overlap is
    not reflected twice. The position is never corrected.

    Returns:
        (velocity, hit)
    """
    normal = get_collision_normal(position, obstacle_position, threshold)
    if normal is None:
        return velocity.copy(), False

    if velocity.dot(normal) >= 0:
        return velocity.copy(), False

    return reflect_velocity(velocity, normal, speed), True


def check_goal(x: float, half_width: float, margin: float) -> Side | None:
    """
    Side credited with a goal for a puck at horizontal position ``x``.

    The goal lines sit ``margin`` beyond the rink edges. Crossing the left line
    scores for the right side and vice versa.
    """
    if x < -half_width - margin:
        return Side.RIGHT
    if x > half_width + margin:
        return Side.LEFT
    return None


class CollisionDetector:
    """Applies the collision rules to the game entities"""

    def __init__(self, rink_width: float, rink_height: float, goal_margin: float):
        self.rink_width = rink_width
        self.rink_height = rink_height
        self.goal_margin = goal_margin

    def check_puck_walls(self, puck: Puck) -> str | None:
        """Bounces the puck off the top and bottom walls, returns the wall hit"""
        boundary = self.rink_height / 2 - puck.size / 2
        puck.position, puck.velocity, wall = bounce_off_walls(
            puck.position, puck.velocity, boundary
        )
        return wall

    def check_puck_paddle(self, puck: Puck, paddle: Paddle, speed: float) -> bool:
        """Reflects the puck off a paddle, returns True on a hit"""
        threshold = paddle.radius + puck.size / 2
        puck.velocity, hit = resolve_circle_collision(
            puck.position, puck.velocity, paddle.position, threshold, speed
        )
        return hit

    def check_goal(self, puck: Puck) -> Side | None:
        """Returns the side credited with a goal, if the puck crossed a goal line"""
        return check_goal(puck.position.x, self.rink_width / 2, self.goal_margin)
