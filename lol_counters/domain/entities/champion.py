"""Static champion catalogue entry (Data Dragon)."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Champion:
    """``id`` is the numeric Data Dragon ``key``, which equals match-v5 ``championId``."""

    id: int
    key: str
    name: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_ddragon(cls, data: dict) -> 'Champion':
        return cls(
            id=int(data['key']),
            key=data['id'],
            name=data.get('name', data['id']),
            tags=tuple(data.get('tags', [])),
        )
