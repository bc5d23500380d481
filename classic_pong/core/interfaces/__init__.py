"""
Interfaces between the simulation and its presentation layer
"""

from classic_pong.core.interfaces.renderer import DrawCommand
from classic_pong.core.interfaces.renderer import DrawRecorder
from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol", "DrawCommand", "DrawRecorder"]
