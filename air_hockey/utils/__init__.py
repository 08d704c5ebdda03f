"""
Air Hockey utility module
"""

from air_hockey.utils.config import GameConfig
from air_hockey.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
