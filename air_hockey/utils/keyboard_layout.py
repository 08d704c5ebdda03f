"""
Keyboard layout detection for Air Hockey
"""

import locale
import os

from air_hockey.utils.config import KEYBOARD_LAYOUTS
from air_hockey.utils.config import game_config


def _layout_for_language(language: str) -> str:
    if language.startswith("fr"):
        return "azerty"
    if language.startswith("de"):
        return "qwertz"
    return "qwerty"


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0]
    if system_locale:
        return _layout_for_language(system_locale.lower())

    # Fallback to environment variables
    return _layout_for_language(os.environ.get("LANG", "").lower())


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def auto_configure_layout() -> str:
    """
    Automatically configure the best keyboard layout

    Returns:
        The selected layout name
    """
    detected = detect_system_layout()
    game_config.KEYBOARD_LAYOUT = detected
    return detected


def show_layout_help() -> str:
    """Generate help text showing current key mappings"""
    layout = game_config.get_keyboard_layout()

    help_text = f"Current keyboard layout: {layout.name}\n\n"
    help_text += "Left player:\n"
    for action, key_name in layout.display_names.items():
        help_text += f"  {action}: {key_name}\n"

    help_text += "\nRight player:\n"
    help_text += "  up: ↑\n"
    help_text += "  down: ↓\n"
    help_text += "\nESC: Pause\n"

    return help_text
