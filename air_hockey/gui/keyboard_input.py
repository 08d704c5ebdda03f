"""
Keyboard and mouse input for Air Hockey
"""

import pygame

from air_hockey.core.events import Button, ButtonClick, InputEvent, Key, KeyEvent
from air_hockey.utils.config import KeyboardLayout, game_config


def resolve_key(name: str) -> int:
    """Pygame key constant for a layout key name ("w" -> pygame.K_w)"""
    try:
        return int(getattr(pygame, f"K_{name}"))
    except AttributeError:
        raise ValueError(f"Unknown key name: {name}") from None


class KeyboardInput:
    """Translates pygame events into core input events"""

    def __init__(self, layout: KeyboardLayout | None = None):
        """
        Initialize the key mapping

        Args:
            layout: Keyboard layout, the configured one when omitted
        """
        layout = layout if layout is not None else game_config.get_keyboard_layout()
        self.layout = layout

        self.key_mapping: dict[int, Key] = {
            resolve_key(layout.left_keys["up"]): Key.LEFT_UP,
            resolve_key(layout.left_keys["down"]): Key.LEFT_DOWN,
            resolve_key(layout.right_keys["up"]): Key.RIGHT_UP,
            resolve_key(layout.right_keys["down"]): Key.RIGHT_DOWN,
            resolve_key(layout.pause_key): Key.PAUSE,
        }

        # Buttons currently on screen, refreshed by the renderer every frame
        self.buttons: dict[Button, pygame.Rect] = {}

    def set_buttons(self, buttons: dict[Button, pygame.Rect]) -> None:
        self.buttons = dict(buttons)

    def translate(self, event: pygame.event.Event) -> InputEvent | None:
        """Core event for a pygame event, None when the event is not bound"""
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = self.key_mapping.get(event.key)
            if key is None:
                return None
            return KeyEvent(key, pressed=event.type == pygame.KEYDOWN)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button, rect in self.buttons.items():
                if rect.collidepoint(event.pos):
                    return ButtonClick(button)

        return None

    def translate_all(self, events: list[pygame.event.Event]) -> list[InputEvent]:
        translated = (self.translate(event) for event in events)
        return [event for event in translated if event is not None]

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls for both players"""
        return {
            "left": "/".join(self.layout.display_names[action] for action in ("up", "down")),
            "right": "Arrow Keys",
            "pause": "ESC",
        }
