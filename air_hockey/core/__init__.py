"""
Core module of the Air Hockey game
"""

from air_hockey.core.entities import CountdownState
from air_hockey.core.entities import Paddle
from air_hockey.core.entities import PlayingEntities
from air_hockey.core.entities import Puck
from air_hockey.core.entities import Score
from air_hockey.core.entities import ServeDelayTimer
from air_hockey.core.entities import Side
from air_hockey.core.entities import Vector2D
from air_hockey.core.events import Button
from air_hockey.core.events import ButtonClick
from air_hockey.core.events import Key
from air_hockey.core.events import KeyEvent
from air_hockey.core.game_state import GameSnapshot
from air_hockey.core.game_state import GameStateMachine
from air_hockey.core.game_state import Phase

__all__ = [
    "Button",
    "ButtonClick",
    "CountdownState",
    "GameSnapshot",
    "GameStateMachine",
    "Key",
    "KeyEvent",
    "Paddle",
    "Phase",
    "PlayingEntities",
    "Puck",
    "Score",
    "ServeDelayTimer",
    "Side",
    "Vector2D",
]
