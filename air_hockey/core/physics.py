"""
Physics system for Air Hockey
"""

import logging

from air_hockey.core.collision import CollisionDetector, clamp
from air_hockey.core.entities import PlayingEntities, Score, ServeDelayTimer, Side
from air_hockey.core.events import Action
from air_hockey.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Moves the paddles and the puck, resolves collisions and goals"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        self.collision_detector = CollisionDetector(
            self.config.RINK_WIDTH, self.config.RINK_HEIGHT, self.config.GOAL_MARGIN
        )

    def update(
        self,
        entities: PlayingEntities,
        score: Score,
        serve_timer: ServeDelayTimer,
        left_action: Action,
        right_action: Action,
        dt: float,
    ) -> dict:
        """
        Advances the rink by one frame.

        Paddles move first, then the puck, then puck/paddle collisions and
        finally the goal check. The puck, collisions and goals all wait for the
        serve delay to run out.

        Returns:
            Dictionary with the events of the frame:
            {"wall_bounces": [...], "paddle_hits": [...], "goals": [...]}
        """
        events: dict[str, list] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
        }

        self.move_paddles(entities, left_action, right_action, dt)

        if not serve_timer.finished:
            return events

        wall = self.move_puck(entities, dt)
        if wall is not None:
            events["wall_bounces"].append(wall)

        for side in self.check_paddle_collisions(entities):
            events["paddle_hits"].append({"side": side.value})

        scorer = self.check_score(entities, score, serve_timer)
        if scorer is not None:
            events["goals"].append({"side": scorer.value, "score": score.to_tuple()})

        return events

    def move_paddles(
        self, entities: PlayingEntities, left_action: Action, right_action: Action, dt: float
    ) -> None:
        """Moves both paddles vertically, hard-clamped to the rink"""
        moves = ((entities.left_paddle, left_action), (entities.right_paddle, right_action))
        for paddle, action in moves:
            new_y = paddle.position.y + action.move_y * self.config.PADDLE_SPEED * dt
            paddle.position.y = clamp(new_y, paddle.min_y, paddle.max_y)

    def move_puck(self, entities: PlayingEntities, dt: float) -> str | None:
        """Moves the puck along its velocity, returns the wall it bounced off"""
        puck = entities.puck
        puck.position = puck.position + puck.velocity * dt
        return self.collision_detector.check_puck_walls(puck)

    def check_paddle_collisions(self, entities: PlayingEntities) -> list[Side]:
        """Reflects the puck off any paddle it hits, returns the sides hit"""
        hits = []
        for paddle in entities.paddles():
            if self.collision_detector.check_puck_paddle(
                entities.puck, paddle, self.config.PUCK_SPEED
            ):
                hits.append(paddle.side)
        return hits

    def check_score(
        self, entities: PlayingEntities, score: Score, serve_timer: ServeDelayTimer
    ) -> Side | None:
        """Credits a goal and resets the rink, returns the side that scored"""
        scorer = self.collision_detector.check_goal(entities.puck)
        if scorer is None:
            return None

        score.credit(scorer)

        # Right side scored through the left goal line: serve toward the right, and vice versa
        direction = 1 if scorer is Side.RIGHT else -1
        entities.puck.reset_to_center(direction, self.config.PUCK_SPEED)
        entities.reset_paddles()
        serve_timer.rearm()

        logger.info("Goal for %s side, score %d - %d", scorer.value, score.left, score.right)
        return scorer
