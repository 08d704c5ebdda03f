"""
Air Hockey game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts

    Keys are stored as pygame key-constant suffixes (``"w"`` for ``pygame.K_w``,
    ``"UP"`` for ``pygame.K_UP``) so the configuration stays importable without
    a display backend.
    """

    name: str
    left_keys: dict[str, str]
    right_keys: dict[str, str]
    pause_key: str
    display_names: dict[str, str]


ARROW_KEYS = {"up": "UP", "down": "DOWN"}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": "w", "down": "s"},
        right_keys=ARROW_KEYS,
        pause_key="ESCAPE",
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": "z", "down": "s"},  # Z instead of W
        right_keys=ARROW_KEYS,
        pause_key="ESCAPE",
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": "w", "down": "s"},
        right_keys=ARROW_KEYS,
        pause_key="ESCAPE",
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Rink dimensions (centered on the origin)
    RINK_WIDTH: int = Field(default=800, gt=0, description="Rink width in pixels")
    RINK_HEIGHT: int = Field(default=600, gt=0, description="Rink height in pixels")

    # Paddles
    PADDLE_RADIUS: float = Field(default=40.0, gt=0, description="Paddle radius in pixels")
    PADDLE_SPEED: float = Field(default=550.0, gt=0, description="Paddle speed")
    PADDLE_OFFSET: float = Field(default=50.0, ge=0, description="Paddle distance from side wall")

    # Puck
    PUCK_SIZE: float = Field(default=65.0, gt=0, description="Puck diameter in pixels")
    PUCK_SPEED: float = Field(default=600.0, gt=0, description="Constant puck speed")

    # Gameplay policy
    GOAL_MARGIN: float = Field(default=50.0, ge=0, description="Goal line set back from the wall")
    SERVE_DELAY: float = Field(default=2.0, ge=0, description="Puck freeze after a goal (s)")
    COUNTDOWN_START: int = Field(default=3, gt=0, description="Countdown start value")
    COUNTDOWN_INTERVAL: float = Field(default=1.0, gt=0, description="Countdown tick (s)")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    RINK_COLOR: tuple[int, int, int] = Field(default=(225, 235, 245), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(200, 60, 60), description="RGB color")
    LEFT_PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 0, 0), description="RGB color")
    RIGHT_PADDLE_COLOR: tuple[int, int, int] = Field(default=(0, 0, 255), description="RGB color")
    PUCK_COLOR: tuple[int, int, int] = Field(default=(20, 20, 20), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_rink_dimensions(self) -> "GameConfig":
        """Validate the rink is large enough for the paddles and the puck"""
        if self.RINK_HEIGHT <= 2 * self.PADDLE_RADIUS:
            raise ValueError(
                f"RINK_HEIGHT ({self.RINK_HEIGHT}) must exceed paddle diameter "
                f"({2 * self.PADDLE_RADIUS})"
            )

        if self.RINK_HEIGHT <= self.PUCK_SIZE:
            raise ValueError(
                f"RINK_HEIGHT ({self.RINK_HEIGHT}) must exceed PUCK_SIZE ({self.PUCK_SIZE})"
            )

        if self.RINK_WIDTH <= 2 * self.PADDLE_OFFSET:
            raise ValueError(
                f"RINK_WIDTH ({self.RINK_WIDTH}) must exceed twice PADDLE_OFFSET "
                f"({2 * self.PADDLE_OFFSET})"
            )

        return self

    def __setattr__(self, name: str, value: Any) -> None:
        # The cross-field check runs after the value is written, so undo a rejected write
        if name not in type(self).model_fields:
            super().__setattr__(name, value)
            return

        old_value = getattr(self, name)
        try:
            super().__setattr__(name, value)
        except ValidationError:
            object.__setattr__(self, name, old_value)
            raise

    def left_paddle_x(self) -> float:
        """Fixed x coordinate of the left paddle"""
        return -self.RINK_WIDTH / 2 + self.PADDLE_OFFSET

    def right_paddle_x(self) -> float:
        """Fixed x coordinate of the right paddle"""
        return self.RINK_WIDTH / 2 - self.PADDLE_OFFSET

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "air_hockey_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "air_hockey_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _copy_fields(GameConfig(), self)


def _copy_fields(source: GameConfig, target: GameConfig) -> None:
    """Copy every field of an already validated config, skipping per-field re-validation"""
    # Field-by-field assignment could trip the cross-field checks halfway through
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(target, field_name, getattr(source, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "air_hockey_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Configuration file not found: %s", filepath)
        return False
    except (OSError, ValueError) as e:
        # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    _copy_fields(loaded_config, game_config)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily

    Either every value is changed or, when one is rejected, none is.
    """
    old_values: dict[str, Any] = {}
    try:
        for name, new_value in kwargs.items():
            old_value = getattr(obj, name)
            setattr(obj, name, new_value)
            old_values[name] = old_value
    except ValidationError:
        _restore_values(obj, old_values)
        raise
    return old_values


def _restore_values(obj: BaseModel, old_values: dict[str, Any]) -> None:
    # Reverse order only goes back through states that already passed validation
    for name, old_value in reversed(list(old_values.items())):
        setattr(obj, name, old_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _restore_values(game_config, old_values)
