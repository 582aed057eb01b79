"""
Utilities Package

Contains utility helpers such as the structured game logger.
"""

from .game_logger import GameLogger, game_logger

__all__ = ['GameLogger', 'game_logger']
