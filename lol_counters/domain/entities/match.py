"""Match and participant records as fetched from match-v5."""
from dataclasses import dataclass, field

from ..enums import Lane


def _section(data: dict, name: str) -> dict:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"match-v5 '{name}' is not an object: {value!r}")
    return value


@dataclass(frozen=True)
class ParticipantRecord:
    """The slice of a match-v5 participant the counter pipeline needs."""

    champion_id: int
    team_id: int
    win: bool
    position: str = ""
    role: str = ""
    champion_name: str = ""
    puuid: str = ""

    @property
    def lane(self) -> Lane:
        return Lane.classify(self.position, self.role)

    @classmethod
    def from_api(cls, data: dict) -> 'ParticipantRecord':
        return cls(
            champion_id=int(data['championId']),
            team_id=int(data.get('teamId', 0)),
            win=bool(data.get('win', False)),
            position=data.get('teamPosition') or '',
            role=data.get('role') or '',
            champion_name=data.get('championName', ''),
            puuid=data.get('puuid', ''),
        )


@dataclass(frozen=True)
class MatchRecord:
    """A complete match. Never mutated after parsing."""

    match_id: str
    duration_seconds: int
    queue_id: int
    game_mode: str
    participants: tuple[ParticipantRecord, ...] = field(default_factory=tuple)
    game_version: str = ""

    @property
    def patch_version(self) -> str:
        """``"15.12.693.4321"`` -> ``"15.12"``."""
        parts = self.game_version.split('.')
        if len(parts) >= 2:
            return f"{parts[0]}.{parts[1]}"
        return self.game_version

    @classmethod
    def from_api(cls, data: dict) -> 'MatchRecord':
        """Parse a raw match-v5 document; raises ``KeyError``/``ValueError`` on malformed input."""
        if not isinstance(data, dict):
            raise ValueError(f"match-v5 document is not an object: {type(data).__name__}")
        metadata = _section(data, 'metadata')
        info = _section(data, 'info')
        if not info:
            raise KeyError('info')
        participants = info.get('participants') or []
        if not isinstance(participants, list):
            raise ValueError("match-v5 'participants' is not a list")
        return cls(
            match_id=metadata.get('matchId', ''),
            duration_seconds=int(info.get('gameDuration', 0)),
            queue_id=int(info.get('queueId', 0)),
            game_mode=info.get('gameMode', ''),
            participants=tuple(ParticipantRecord.from_api(p) for p in participants),
            game_version=info.get('gameVersion', ''),
        )
