"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType
from .tier import Tier
from .lane import Lane, Role
from .strength import CounterStrength
from .champion_tag import ChampionTag

__all__ = [
    'Region',
    'QueueType',
    'Tier',
    'Lane',
    'Role',
    'CounterStrength',
    'ChampionTag',
]
