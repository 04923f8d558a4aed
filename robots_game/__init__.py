# Robots Source Package
"""
Robots - turn-based terminal game of dodging pursuing robots.

Modules:
- core: Abstract interfaces for the game, renderers and input sources
- game: Simulation engine (board, entities, level generation, movement, ticks),
  the game state machine, the session loop and highscores
- controls: Keyboard input
- visualization: Rich-based terminal display
- utils: Configuration and logging
"""
