"""Repository implementations."""
from .match_repository import MatchRepository
from .player_repository import PlayerRepository

__all__ = [
    'MatchRepository',
    'PlayerRepository',
]
