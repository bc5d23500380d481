"""
PyGame renderer for Classic Pong game
"""

import pygame

from classic_pong.core.interfaces.renderer import Color
from classic_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Classic Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer

        Raises:
            pygame.error: if the display cannot be created
        """
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: Color = game_config.BACKGROUND_COLOR
        self.font = pygame.font.Font(None, game_config.FONT_SIZE)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_circle(self, center: tuple[float, float], radius: float, color: Color) -> None:
        pos = (int(center[0]), int(center[1]))
        pygame.draw.circle(self.screen, color, pos, int(radius))

    def draw_rect(self, rect: tuple[float, float, float, float], color: Color) -> None:
        x, y, width, height = rect
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_text(self, text: str, position: tuple[float, float], color: Color) -> None:
        text_surface = self.font.render(text, True, color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = int(position[0])
        text_rect.top = int(position[1])
        self.screen.blit(text_surface, text_rect)

    def present(self) -> None:
        """Flip the display buffer"""
        pygame.display.flip()

    def tick(self, fps: int | None = None) -> None:
        """Wait for the next frame"""
        self.clock.tick(fps or game_config.FPS)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
