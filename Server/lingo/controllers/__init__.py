"""
Controllers Package

HTTP blueprints for the match front end.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
