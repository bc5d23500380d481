"""
Renderer protocol - defines the drawing capability handed to the simulation
"""

from dataclasses import dataclass
from typing import Protocol

Color = tuple[int, int, int]


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The simulation only needs three filled primitives. Implementations
    decide how (and whether) to display them: pygame window, recorder, etc.
    """

    def draw_circle(self, center: tuple[float, float], radius: float, color: Color) -> None:
        """
        Draw a filled circle.

        Args:
            center: Circle center in field coordinates
            radius: Radius in pixels
            color: RGB color
        """
        ...

    def draw_rect(self, rect: tuple[float, float, float, float], color: Color) -> None:
        """
        Draw a filled rectangle.

        Args:
            rect: (x, y, width, height) with (x, y) the top-left corner
            color: RGB color
        """
        ...

    def draw_text(self, text: str, position: tuple[float, float], color: Color) -> None:
        """
        Draw a text string.

        Args:
            text: Text to display
            position: Anchor point (horizontal center, top) in field coordinates
            color: RGB color
        """
        ...


@dataclass(frozen=True)
class DrawCommand:
    """One recorded draw request"""

    kind: str
    args: tuple


class DrawRecorder:
    """Headless renderer that records draw requests instead of displaying them"""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw_circle(self, center: tuple[float, float], radius: float, color: Color) -> None:
        self.commands.append(DrawCommand("circle", (center, radius, color)))

    def draw_rect(self, rect: tuple[float, float, float, float], color: Color) -> None:
        self.commands.append(DrawCommand("rect", (rect, color)))

    def draw_text(self, text: str, position: tuple[float, float], color: Color) -> None:
        self.commands.append(DrawCommand("text", (text, position, color)))

    def clear(self) -> None:
        self.commands.clear()
