"""Domain interfaces."""
from .repository import IMatchRepository, IPlayerRepository

__all__ = [
    'IMatchRepository',
    'IPlayerRepository',
]
