"""
Input events consumed by the Air Hockey core
"""

from dataclasses import dataclass
from enum import Enum

from air_hockey.core.entities import Side


class Key(Enum):
    """Logical keys, independent of the physical keyboard layout"""

    LEFT_UP = "left_up"
    LEFT_DOWN = "left_down"
    RIGHT_UP = "right_up"
    RIGHT_DOWN = "right_down"
    PAUSE = "pause"


class Button(Enum):
    """On-screen buttons"""

    PLAY = "play"
    RESUME = "resume"
    RESTART = "restart"


@dataclass(frozen=True)
class KeyEvent:
    """A key went down (pressed=True) or up (pressed=False)"""

    key: Key
    pressed: bool = True


@dataclass(frozen=True)
class ButtonClick:
    """A button was clicked"""

    button: Button


InputEvent = KeyEvent | ButtonClick

PADDLE_KEYS = {
    Side.LEFT: (Key.LEFT_UP, Key.LEFT_DOWN),
    Side.RIGHT: (Key.RIGHT_UP, Key.RIGHT_DOWN),
}


@dataclass
class Action:
    """Paddle action"""

    move_y: float  # -1.0 (down) to 1.0 (up)

    def __post_init__(self) -> None:
        # Clamp values between -1 and 1
        self.move_y = float(max(-1, min(1, self.move_y)))


class HeldKeys:
    """Tracks which keys are currently held down"""

    def __init__(self) -> None:
        self._held: set[Key] = set()

    def press(self, key: Key) -> bool:
        """Marks a key as held, returns True only on the down edge"""
        if key in self._held:
            return False
        self._held.add(key)
        return True

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def is_held(self, key: Key) -> bool:
        return key in self._held

    def clear(self) -> None:
        self._held.clear()

    def action_for(self, side: Side) -> Action:
        """Net vertical direction for a paddle, up and down together cancel out"""
        up_key, down_key = PADDLE_KEYS[side]
        return Action(float(self.is_held(up_key)) - float(self.is_held(down_key)))
