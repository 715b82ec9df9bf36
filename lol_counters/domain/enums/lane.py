"""Lane and legacy role enumerations."""
from enum import Enum
from typing import Optional


class Lane(Enum):
    """Positional lane a participant played."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"  # Support
    UNKNOWN = "UNKNOWN"

    @property
    def is_known(self) -> bool:
        return self is not Lane.UNKNOWN

    @classmethod
    def known_lanes(cls) -> list['Lane']:
        return [lane for lane in cls if lane.is_known]

    @classmethod
    def from_position(cls, position: Optional[str]) -> 'Lane':
        """Map a match-v5 ``teamPosition`` string; blanks and ``"Invalid"`` give UNKNOWN."""
        if not position:
            return cls.UNKNOWN
        try:
            return cls(position.upper())
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def classify(cls, position: Optional[str], role: Optional[str]) -> 'Lane':
        """Prefer the explicit position; fall back to the legacy role field."""
        lane = cls.from_position(position)
        if lane.is_known:
            return lane
        legacy = Role.from_string(role)
        if legacy is None:
            return cls.UNKNOWN
        return legacy.lane


class Role(Enum):
    """Legacy match-v5 ``role`` values."""

    SOLO = "SOLO"
    DUO = "DUO"
    DUO_CARRY = "DUO_CARRY"
    DUO_SUPPORT = "DUO_SUPPORT"
    NONE = "NONE"

    @property
    def lane(self) -> Lane:
        return _ROLE_LANES[self]

    @classmethod
    def from_string(cls, role: Optional[str]) -> Optional['Role']:
        if not role:
            return None
        try:
            return cls(role.upper())
        except ValueError:
            return None


_ROLE_LANES = {
    Role.SOLO: Lane.TOP,
    Role.DUO: Lane.MIDDLE,
    Role.DUO_CARRY: Lane.BOTTOM,
    Role.DUO_SUPPORT: Lane.UTILITY,
    Role.NONE: Lane.JUNGLE,
}

if set(_ROLE_LANES) != set(Role):
    raise RuntimeError("every Role must map to a Lane")
