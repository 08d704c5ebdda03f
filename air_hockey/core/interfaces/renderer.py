"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from air_hockey.core.events import InputEvent
from air_hockey.core.game_state import GameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    A renderer owns the window and the input devices. The core never polls
    them: it receives the translated events and hands back a snapshot to draw.
    """

    def render_frame(self, snapshot: GameSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Phase, score, countdown and entity positions of the frame
        """
        ...

    def handle_events(self) -> list[InputEvent]:
        """
        Process pending window and input-device events.

        Returns:
            Key and button events for the core, in the order they happened
        """
        ...

    def tick(self, fps: int) -> float:
        """
        Wait for the next frame.

        Args:
            fps: Target frame rate

        Returns:
            Elapsed time since the previous frame, in seconds
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
