"""
Air Hockey game state machine

The game cycles through three phases: the start screen, a countdown and the
match itself. Pausing is not a phase of its own, it is a flag carried by the
Playing state, so a paused game outside of a match cannot be represented.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from air_hockey.core.entities import CountdownState, PlayingEntities, Score, ServeDelayTimer, Side
from air_hockey.core.events import Button, ButtonClick, HeldKeys, InputEvent, Key, KeyEvent
from air_hockey.core.physics import PhysicsEngine
from air_hockey.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Top-level game mode"""

    START_SCREEN = "start_screen"
    COUNTDOWN = "countdown"
    PLAYING = "playing"


@dataclass
class StartScreen:
    phase: ClassVar[Phase] = Phase.START_SCREEN


@dataclass
class Countdown:
    countdown: CountdownState
    phase: ClassVar[Phase] = Phase.COUNTDOWN


@dataclass
class Playing:
    entities: PlayingEntities
    paused: bool = False
    phase: ClassVar[Phase] = Phase.PLAYING


PhaseState = StartScreen | Countdown | Playing


@dataclass
class GameSnapshot:
    """Read-only view of the game handed to renderers once per frame"""

    phase: Phase
    paused: bool
    score: tuple[int, int]
    countdown_remaining: int | None
    left_paddle_position: tuple[float, float] | None
    right_paddle_position: tuple[float, float] | None
    puck_position: tuple[float, float] | None
    puck_velocity: tuple[float, float] | None
    serve_delay_remaining: float
    rink_size: tuple[int, int]


class GameStateMachine:
    """Owns the game phase and runs one simulation step per frame"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        self.physics = PhysicsEngine(self.config)

        self.state: PhaseState = StartScreen()
        self.score = Score()
        self.serve_timer = ServeDelayTimer(self.config.SERVE_DELAY)
        self.held_keys = HeldKeys()

        # Phase change requested during the frame, applied at its end
        self._next_phase: Phase | None = None

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def paused(self) -> bool:
        return isinstance(self.state, Playing) and self.state.paused

    @property
    def entities(self) -> PlayingEntities | None:
        if isinstance(self.state, Playing):
            return self.state.entities
        return None

    @property
    def countdown_remaining(self) -> int | None:
        if isinstance(self.state, Countdown):
            return self.state.countdown.remaining
        return None

    def handle_event(self, event: InputEvent) -> None:
        """
        Applies one input event.

        Pause and resume take effect immediately. Phase changes (Play, Restart)
        are recorded and applied at the end of the next step. Events that mean
        nothing in the current phase are ignored, as are pause and resume once
        a Restart is pending.
        """
        if isinstance(event, KeyEvent):
            self._handle_key(event)
        elif isinstance(event, ButtonClick):
            self._handle_click(event.button)

    def _handle_key(self, event: KeyEvent) -> None:
        if not event.pressed:
            self.held_keys.release(event.key)
            return

        is_new_press = self.held_keys.press(event.key)
        if event.key is Key.PAUSE and is_new_press and self._pause_editable():
            self.state.paused = not self.state.paused
            logger.debug("Game %s", "paused" if self.state.paused else "resumed")

    def _pause_editable(self) -> bool:
        # A match already leaving the Playing phase stays frozen until the end of the frame
        return isinstance(self.state, Playing) and self._next_phase is None

    def _handle_click(self, button: Button) -> None:
        if button is Button.PLAY and isinstance(self.state, StartScreen):
            self._next_phase = Phase.COUNTDOWN
        elif self._pause_editable() and self.state.paused:
            if button is Button.RESUME:
                self.state.paused = False
                logger.debug("Game resumed")
            elif button is Button.RESTART:
                self._next_phase = Phase.COUNTDOWN

    def step(self, dt: float, events: Iterable[InputEvent] = ()) -> dict:
        """
        Runs one frame.

        Order: input events and the serve-delay tick, paddle motion, puck
        motion, collisions and goals, countdown tick, phase transition.

        Args:
            dt: Elapsed time since the previous frame, in seconds
            events: Input events received since the previous frame

        Returns:
            Dictionary with the events of the frame:
            {"wall_bounces": [...], "paddle_hits": [...], "goals": [...],
             "phase_changes": [...]}
        """
        for event in events:
            self.handle_event(event)

        frame_events: dict[str, list] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "phase_changes": [],
        }

        if isinstance(self.state, Playing) and not self.state.paused:
            # The serve delay only runs while the match runs
            self.serve_timer.tick(dt)
            physics_events = self.physics.update(
                self.state.entities,
                self.score,
                self.serve_timer,
                self.held_keys.action_for(Side.LEFT),
                self.held_keys.action_for(Side.RIGHT),
                dt,
            )
            frame_events.update(physics_events)
        elif isinstance(self.state, Countdown):
            self.state.countdown.tick(dt)
            if self.state.countdown.finished:
                self._next_phase = Phase.PLAYING

        if self._next_phase is not None:
            previous = self.phase
            self._enter(self._next_phase)
            self._next_phase = None
            frame_events["phase_changes"].append((previous.value, self.phase.value))

        return frame_events

    def _enter(self, phase: Phase) -> None:
        """Tears down the current phase and sets up the next one"""
        if phase is Phase.COUNTDOWN:
            if isinstance(self.state, Playing):
                # Restart from the pause menu: fresh match after the countdown
                self.score.reset()
                self.serve_timer.rearm()
            self.state = Countdown(
                CountdownState(self.config.COUNTDOWN_START, self.config.COUNTDOWN_INTERVAL)
            )
        elif phase is Phase.PLAYING:
            self.serve_timer.rearm()
            self.state = Playing(PlayingEntities.spawn(self.config))
        else:
            raise ValueError(f"No transition into the {phase.value} phase")

        logger.info("Entering %s phase", phase.value)

    def snapshot(self) -> GameSnapshot:
        """Returns the state renderers need for the current frame"""
        entities = self.entities
        playing = entities is not None
        return GameSnapshot(
            phase=self.phase,
            paused=self.paused,
            score=self.score.to_tuple(),
            countdown_remaining=self.countdown_remaining,
            left_paddle_position=entities.left_paddle.position.to_tuple() if playing else None,
            right_paddle_position=entities.right_paddle.position.to_tuple() if playing else None,
            puck_position=entities.puck.position.to_tuple() if playing else None,
            puck_velocity=entities.puck.velocity.to_tuple() if playing else None,
            serve_delay_remaining=self.serve_timer.remaining,
            rink_size=(self.config.RINK_WIDTH, self.config.RINK_HEIGHT),
        )
