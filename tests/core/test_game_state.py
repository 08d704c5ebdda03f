"""
Tests for the game state machine

Covers phase transitions, pause handling and per-frame ordering.
"""

import pytest

from air_hockey.core.entities import Vector2D
from air_hockey.core.events import Button, ButtonClick, Key, KeyEvent
from air_hockey.core.game_state import GameStateMachine, Phase
from air_hockey.utils.config import GameConfig

PLAY = ButtonClick(Button.PLAY)
RESUME = ButtonClick(Button.RESUME)
RESTART = ButtonClick(Button.RESTART)


def press(key: Key) -> KeyEvent:
    return KeyEvent(key, pressed=True)


def release(key: Key) -> KeyEvent:
    return KeyEvent(key, pressed=False)


@pytest.fixture
def machine():
    return GameStateMachine(GameConfig())


@pytest.fixture
def playing_machine(machine):
    """A machine that went through the start screen and the countdown"""
    machine.step(0.0, [PLAY])
    for _ in range(3):
        machine.step(1.0)
    assert machine.phase is Phase.PLAYING
    return machine


class TestPhaseTransitions:
    """Test the start screen, countdown and playing phases"""

    def test_starts_on_start_screen(self, machine):
        assert machine.phase is Phase.START_SCREEN
        assert machine.entities is None
        assert machine.countdown_remaining is None
        assert not machine.paused

    def test_play_starts_countdown(self, machine):
        events = machine.step(0.016, [PLAY])

        assert machine.phase is Phase.COUNTDOWN
        assert machine.countdown_remaining == 3
        assert events["phase_changes"] == [("start_screen", "countdown")]

    def test_countdown_reaches_playing(self, machine):
        """Test one decrement per interval, then the match starts"""
        machine.step(0.0, [PLAY])

        machine.step(1.0)
        assert machine.countdown_remaining == 2
        machine.step(1.0)
        assert machine.countdown_remaining == 1
        events = machine.step(1.0)

        assert machine.phase is Phase.PLAYING
        assert machine.countdown_remaining is None
        assert events["phase_changes"] == [("countdown", "playing")]

    def test_short_frames_accumulate(self, machine):
        machine.step(0.0, [PLAY])

        for _ in range(3):
            machine.step(0.25)
        assert machine.countdown_remaining == 3

        machine.step(0.25)
        assert machine.countdown_remaining == 2

    def test_long_frame_finishes_countdown(self, machine):
        """Test a frame longer than the whole countdown still lands on Playing"""
        machine.step(0.0, [PLAY])
        machine.step(10.0)

        assert machine.phase is Phase.PLAYING

    def test_entities_exist_only_while_playing(self, machine):
        assert machine.entities is None
        machine.step(0.0, [PLAY])
        assert machine.entities is None
        for _ in range(3):
            machine.step(1.0)
        assert machine.entities is not None

    def test_match_starts_with_serve_delay_armed(self, playing_machine):
        entities = playing_machine.entities

        assert playing_machine.serve_timer.remaining == 2.0
        assert entities.puck.position == Vector2D(0.0, 0.0)
        assert abs(entities.puck.velocity.x) == 600.0
        assert entities.left_paddle.position.to_tuple() == (-350.0, 0.0)
        assert entities.right_paddle.position.to_tuple() == (350.0, 0.0)

    def test_no_transition_into_start_screen(self, machine):
        with pytest.raises(ValueError):
            machine._enter(Phase.START_SCREEN)


class TestIgnoredEvents:
    """Test events that mean nothing in the current phase"""

    def test_resume_and_restart_ignored_on_start_screen(self, machine):
        machine.step(0.016, [RESUME, RESTART, press(Key.PAUSE)])

        assert machine.phase is Phase.START_SCREEN
        assert not machine.paused

    def test_pause_ignored_during_countdown(self, machine):
        machine.step(0.0, [PLAY])
        machine.step(0.016, [press(Key.PAUSE)])

        assert machine.phase is Phase.COUNTDOWN
        assert not machine.paused

    def test_play_ignored_while_playing(self, playing_machine):
        events = playing_machine.step(0.016, [PLAY])

        assert playing_machine.phase is Phase.PLAYING
        assert events["phase_changes"] == []

    def test_restart_ignored_when_not_paused(self, playing_machine):
        playing_machine.score.left = 2

        playing_machine.step(0.016, [RESTART])

        assert playing_machine.phase is Phase.PLAYING
        assert playing_machine.score.to_tuple() == (2, 0)


class TestPause:
    """Test the pause flag of the playing phase"""

    def test_pause_key_toggles(self, playing_machine):
        playing_machine.step(0.016, [press(Key.PAUSE)])
        assert playing_machine.paused

        playing_machine.step(0.016, [release(Key.PAUSE), press(Key.PAUSE)])
        assert not playing_machine.paused

    def test_held_pause_key_toggles_once(self, playing_machine):
        """Test key repeat while the pause key stays down does not flip it back"""
        playing_machine.step(0.016, [press(Key.PAUSE)])
        playing_machine.step(0.016, [press(Key.PAUSE)])
        playing_machine.step(0.016, [press(Key.PAUSE)])

        assert playing_machine.paused

    def test_pause_blocks_motion(self, playing_machine):
        entities = playing_machine.entities
        playing_machine.step(0.0, [press(Key.PAUSE), press(Key.LEFT_UP)])
        puck_position = entities.puck.position.copy()

        for _ in range(10):
            playing_machine.step(1 / 60)

        assert entities.left_paddle.position.y == 0.0
        assert entities.puck.position == puck_position

    def test_serve_delay_frozen_while_paused(self, playing_machine):
        playing_machine.step(0.0, [press(Key.PAUSE)])

        for _ in range(5):
            playing_machine.step(1.0)
        assert playing_machine.serve_timer.remaining == 2.0

        playing_machine.step(0.5, [RESUME])
        assert playing_machine.serve_timer.remaining == pytest.approx(1.5)

    def test_resume_button(self, playing_machine):
        playing_machine.step(0.0, [press(Key.PAUSE)])
        playing_machine.step(0.1, [RESUME, press(Key.LEFT_UP)])

        assert not playing_machine.paused
        assert playing_machine.entities.left_paddle.position.y == pytest.approx(55.0)

    def test_restart_goes_back_to_countdown(self, playing_machine):
        playing_machine.score.left = 3
        playing_machine.score.right = 1
        playing_machine.serve_timer.tick(2.0)

        playing_machine.step(0.0, [press(Key.PAUSE)])
        events = playing_machine.step(0.016, [RESTART])

        assert playing_machine.phase is Phase.COUNTDOWN
        assert playing_machine.countdown_remaining == 3
        assert not playing_machine.paused
        assert playing_machine.entities is None
        assert playing_machine.score.to_tuple() == (0, 0)
        assert playing_machine.serve_timer.remaining == 2.0
        assert events["phase_changes"] == [("playing", "countdown")]

    @pytest.mark.parametrize(
        "unpause", [RESUME, press(Key.PAUSE)], ids=["resume_button", "pause_key"]
    )
    def test_unpause_after_restart_ignored(self, playing_machine, unpause):
        """Test a match being restarted does not run one more frame"""
        entities = playing_machine.entities
        playing_machine.serve_timer.tick(2.0)
        playing_machine.step(0.0, [press(Key.PAUSE), release(Key.PAUSE), press(Key.LEFT_UP)])
        puck_position = entities.puck.position.copy()

        events = playing_machine.step(0.1, [RESTART, unpause])

        assert entities.left_paddle.position.y == 0.0
        assert entities.puck.position == puck_position
        assert events["paddle_hits"] == [] and events["wall_bounces"] == []
        assert playing_machine.phase is Phase.COUNTDOWN
        assert not playing_machine.paused


class TestMatchFlow:
    """Test a running match driven frame by frame"""

    def test_held_keys_move_paddles(self, playing_machine):
        playing_machine.step(0.1, [press(Key.LEFT_UP), press(Key.RIGHT_DOWN)])

        assert playing_machine.entities.left_paddle.position.y == pytest.approx(55.0)
        assert playing_machine.entities.right_paddle.position.y == pytest.approx(-55.0)

    def test_up_and_down_cancel_out(self, playing_machine):
        playing_machine.step(0.1, [press(Key.LEFT_UP), press(Key.LEFT_DOWN)])
        assert playing_machine.entities.left_paddle.position.y == 0.0

    def test_released_key_stops_paddle(self, playing_machine):
        playing_machine.step(0.1, [press(Key.LEFT_UP)])
        playing_machine.step(0.1, [release(Key.LEFT_UP)])

        assert playing_machine.entities.left_paddle.position.y == pytest.approx(55.0)

    def test_puck_waits_for_serve_delay(self, playing_machine):
        playing_machine.step(1.0)
        assert playing_machine.entities.puck.position == Vector2D(0.0, 0.0)

        playing_machine.step(0.5)
        assert playing_machine.entities.puck.position == Vector2D(0.0, 0.0)

        playing_machine.step(0.5)
        assert playing_machine.entities.puck.position.x != 0.0

    def test_serve_at_exactly_two_seconds_of_frames(self, playing_machine):
        """Test 120 frames at 60 FPS release the puck despite float rounding"""
        for _ in range(119):
            playing_machine.step(1 / 60)
        assert playing_machine.entities.puck.position == Vector2D(0.0, 0.0)

        playing_machine.step(1 / 60)

        assert playing_machine.serve_timer.finished
        assert playing_machine.serve_timer.remaining == 0.0
        assert abs(playing_machine.entities.puck.position.x) == pytest.approx(10.0)

    def test_goal_through_step(self, playing_machine):
        entities = playing_machine.entities
        entities.puck.position = Vector2D(451.0, 0.0)
        entities.puck.velocity = Vector2D(600.0, 0.0)
        playing_machine.serve_timer.tick(2.0)

        events = playing_machine.step(0.0)

        assert events["goals"] == [{"side": "left", "score": (1, 0)}]
        assert entities.puck.velocity == Vector2D(-600.0, 0.0)
        assert playing_machine.serve_timer.remaining == 2.0

        events = playing_machine.step(1 / 60)
        assert events["goals"] == []
        assert playing_machine.score.to_tuple() == (1, 0)


class TestSnapshot:
    """Test the read-only view handed to renderers"""

    def test_start_screen_snapshot(self, machine):
        snapshot = machine.snapshot()

        assert snapshot.phase is Phase.START_SCREEN
        assert snapshot.score == (0, 0)
        assert snapshot.countdown_remaining is None
        assert snapshot.puck_position is None
        assert snapshot.left_paddle_position is None
        assert snapshot.rink_size == (800, 600)

    def test_countdown_snapshot(self, machine):
        machine.step(0.0, [PLAY])
        assert machine.snapshot().countdown_remaining == 3

    def test_playing_snapshot(self, playing_machine):
        playing_machine.step(0.0, [press(Key.PAUSE)])
        snapshot = playing_machine.snapshot()

        assert snapshot.phase is Phase.PLAYING
        assert snapshot.paused
        assert snapshot.left_paddle_position == (-350.0, 0.0)
        assert snapshot.right_paddle_position == (350.0, 0.0)
        assert snapshot.puck_position == (0.0, 0.0)
        assert snapshot.serve_delay_remaining == 2.0
