"""
Core abstractions for Robots.

Provides abstract interfaces that the game, renderers and input sources implement.
"""

from .game_interface import GameInterface, GameMetadata
from .input_interface import InputInterface
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'InputInterface',
    'RendererInterface',
]
