"""
Main game application with PyGame GUI
"""

from air_hockey.core.game_state import GameStateMachine
from air_hockey.core.interfaces.renderer import RendererProtocol
from air_hockey.gui.pygame_renderer import PygameRenderer
from air_hockey.utils.config import game_config


class AirHockeyApp:
    """Main application class for Air Hockey with PyGame GUI"""

    def __init__(self, renderer: RendererProtocol | None = None) -> None:
        """Initialize the application"""
        self.game = GameStateMachine(game_config)
        self.renderer = renderer if renderer is not None else PygameRenderer()

        print("Air Hockey initialized successfully!")

    def run_frame(self, dt: float) -> dict:
        """Feed the frame's input to the game, step it and draw the result"""
        events = self.renderer.handle_events()
        frame_events = self.game.step(dt, events)
        self.renderer.render_frame(self.game.snapshot())

        for goal in frame_events["goals"]:
            score = goal["score"]
            print(f"Goal for the {goal['side']} player! {score[0]} - {score[1]}")

        return frame_events

    def run(self) -> None:
        """Main loop, runs until the window is closed"""
        try:
            dt = 0.0
            while self.renderer.is_active():
                self.run_frame(dt)
                dt = self.renderer.tick(game_config.FPS)
        finally:
            self.renderer.cleanup()


def main() -> None:
    """Main entry point"""
    app = AirHockeyApp()
    app.run()


if __name__ == "__main__":
    main()
