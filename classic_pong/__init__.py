"""
Classic Pong: a two-player Pong game on top of pygame
"""

__version__ = "0.1.0"
