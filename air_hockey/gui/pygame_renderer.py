"""
PyGame renderer for Air Hockey game
"""

import pygame

from air_hockey.core.events import Button, InputEvent
from air_hockey.core.game_state import GameSnapshot, Phase
from air_hockey.gui.keyboard_input import KeyboardInput
from air_hockey.utils.config import game_config

BUTTON_SIZE = (200, 60)

# Idle and hovered background colors per button
BUTTON_COLORS = {
    Button.PLAY: ((51, 51, 204), (64, 64, 217)),
    Button.RESUME: ((51, 153, 51), (64, 166, 64)),
    Button.RESTART: ((204, 51, 51), (217, 64, 64)),
}


class PygameRenderer:
    """PyGame-based renderer for Air Hockey"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.RINK_WIDTH
        self.height = height or game_config.RINK_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Air Hockey")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.input = KeyboardInput()
        self.active = True

        # Colors
        self.rink_color: tuple[int, int, int] = game_config.RINK_COLOR
        self.line_color: tuple[int, int, int] = game_config.LINE_COLOR
        self.left_paddle_color: tuple[int, int, int] = game_config.LEFT_PADDLE_COLOR
        self.right_paddle_color: tuple[int, int, int] = game_config.RIGHT_PADDLE_COLOR
        self.puck_color: tuple[int, int, int] = game_config.PUCK_COLOR
        self.text_color: tuple[int, int, int] = game_config.TEXT_COLOR

        # Font for text rendering
        self.font_huge = pygame.font.Font(None, 128)
        self.font_large = pygame.font.Font(None, 72)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 32)

    def to_screen(self, position: tuple[float, float]) -> tuple[int, int]:
        """Convert rink coordinates (origin at center, y up) to screen pixels"""
        x, y = position
        return (int(x + self.width / 2), int(self.height / 2 - y))

    def clear_screen(self) -> None:
        """Clear the screen with the rink color"""
        self.screen.fill(self.rink_color)

    def draw_rink(self) -> None:
        """Draw the rink markings (center line, center circle)"""
        center_x = self.width // 2
        pygame.draw.line(self.screen, self.line_color, (center_x, 0), (center_x, self.height), 3)
        pygame.draw.circle(self.screen, self.line_color, (center_x, self.height // 2), 60, 3)

    def draw_paddle(self, position: tuple[float, float], color: tuple[int, int, int]) -> None:
        pygame.draw.circle(
            self.screen, color, self.to_screen(position), int(game_config.PADDLE_RADIUS)
        )

    def draw_puck(self, position: tuple[float, float]) -> None:
        pygame.draw.circle(
            self.screen, self.puck_color, self.to_screen(position), int(game_config.PUCK_SIZE / 2)
        )

    def draw_text(
        self,
        text: str,
        font: pygame.font.Font,
        center: tuple[int, int],
        color: tuple[int, int, int] | None = None,
    ) -> None:
        surface = font.render(text, True, color or self.text_color)
        rect = surface.get_rect()
        rect.center = center
        self.screen.blit(surface, rect)

    def draw_button(self, button: Button, label: str, center: tuple[int, int]) -> pygame.Rect:
        """Draw a button and return its clickable area"""
        rect = pygame.Rect((0, 0), BUTTON_SIZE)
        rect.center = center

        idle_color, hover_color = BUTTON_COLORS[button]
        hovered = rect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(self.screen, hover_color if hovered else idle_color, rect)

        self.draw_text(label, self.font_small, rect.center, (255, 255, 255))
        return rect

    def draw_start_screen(self) -> dict[Button, pygame.Rect]:
        """Draw the title, the play button and the controls"""
        center_x = self.width // 2
        self.draw_text("AIR HOCKEY", self.font_large, (center_x, self.height // 2 - 110))
        play = self.draw_button(Button.PLAY, "PLAY", (center_x, self.height // 2))

        controls = self.input.get_control_info()
        help_lines = [
            f"Left Player: {controls['left']}",
            f"Right Player: {controls['right']}",
            f"{controls['pause']}: Pause",
        ]
        for i, line in enumerate(help_lines):
            self.draw_text(line, self.font_small, (center_x, self.height // 2 + 90 + i * 30))

        return {Button.PLAY: play}

    def draw_countdown(self, remaining: int) -> None:
        self.draw_text(str(remaining), self.font_huge, (self.width // 2, self.height // 2))

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the current score"""
        self.draw_text(f"{score[0]} - {score[1]}", self.font_medium, (self.width // 2, 40))

    def draw_pause_screen(self) -> dict[Button, pygame.Rect]:
        """Draw the pause overlay with its resume and restart buttons"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        center_x = self.width // 2
        white = (255, 255, 255)
        self.draw_text("PAUSED", self.font_large, (center_x, self.height // 2 - 100), white)
        resume = self.draw_button(Button.RESUME, "RESUME", (center_x, self.height // 2))
        restart = self.draw_button(Button.RESTART, "RESTART", (center_x, self.height // 2 + 80))
        return {Button.RESUME: resume, Button.RESTART: restart}

    def render_frame(self, snapshot: GameSnapshot) -> None:
        """Render a single frame of the game"""
        self.clear_screen()
        buttons: dict[Button, pygame.Rect] = {}

        if snapshot.phase is Phase.START_SCREEN:
            buttons = self.draw_start_screen()
        elif snapshot.phase is Phase.COUNTDOWN:
            self.draw_rink()
            if snapshot.countdown_remaining is not None:
                self.draw_countdown(snapshot.countdown_remaining)
        else:
            self.draw_rink()
            if snapshot.left_paddle_position is not None:
                self.draw_paddle(snapshot.left_paddle_position, self.left_paddle_color)
            if snapshot.right_paddle_position is not None:
                self.draw_paddle(snapshot.right_paddle_position, self.right_paddle_color)
            if snapshot.puck_position is not None:
                self.draw_puck(snapshot.puck_position)
            self.draw_score(snapshot.score)
            if snapshot.paused:
                buttons = self.draw_pause_screen()

        # Only the buttons drawn this frame can be clicked
        self.input.set_buttons(buttons)
        pygame.display.flip()

    def handle_events(self) -> list[InputEvent]:
        """Process window events and translate input for the core"""
        pending = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.active = False
            else:
                pending.append(event)
        return self.input.translate_all(pending)

    def tick(self, fps: int) -> float:
        """Wait for the next frame, returns the elapsed time in seconds"""
        return self.clock.tick(fps) / 1000.0

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.quit()

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        return self.active
