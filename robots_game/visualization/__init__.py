"""
Visualization module for Robots.

Components:
- TerminalDisplay: Rich-based terminal renderer for the board, splash
  screen and highscore table
"""

from .terminal_display import TerminalDisplay

__all__ = [
    'TerminalDisplay',
]
