"""Queue type enumeration for ranked matches."""
from enum import Enum


class QueueType(Enum):
    """Ranked queues; ``value`` is the numeric match-v5 ``queueId``."""

    RANKED_SOLO_5x5 = 420

    @property
    def queue_id(self) -> int:
        return self.value

    @property
    def api_queue_name(self) -> str:
        """Queue name string used by the league-v4 endpoints."""
        return self.name
