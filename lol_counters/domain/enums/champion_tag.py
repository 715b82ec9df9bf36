"""Data Dragon champion class tags and their archetype counter tables."""
from enum import Enum
from typing import Optional


class ChampionTag(Enum):
    """Class tag as listed in a Data Dragon champion's ``tags``."""

    ASSASSIN = "Assassin"
    FIGHTER = "Fighter"
    MAGE = "Mage"
    MARKSMAN = "Marksman"
    SUPPORT = "Support"
    TANK = "Tank"

    @property
    def countered_by(self) -> tuple[str, ...]:
        """Champion keys (Data Dragon ``id``) that usually beat this archetype."""
        return _COUNTERED_BY[self]

    @property
    def strong_against(self) -> tuple['ChampionTag', ...]:
        """Archetypes this one usually beats."""
        return _STRONG_AGAINST[self]

    @classmethod
    def from_string(cls, tag: Optional[str]) -> Optional['ChampionTag']:
        if not tag:
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


_COUNTERED_BY = {
    ChampionTag.ASSASSIN: ("Malphite", "Rammus", "TahmKench", "Janna", "Lulu"),
    ChampionTag.FIGHTER: ("Vayne", "Fiora", "Jax", "Gnar", "Quinn"),
    ChampionTag.MAGE: ("Kassadin", "Yasuo", "Katarina", "Fizz", "Zed"),
    ChampionTag.MARKSMAN: ("Hecarim", "Zed", "Talon", "Nocturne", "Rengar"),
    ChampionTag.SUPPORT: ("Brand", "Xerath", "Velkoz", "Zyra", "Pyke"),
    ChampionTag.TANK: ("Vayne", "KogMaw", "Kaisa", "Cassiopeia", "Azir"),
}

_STRONG_AGAINST = {
    ChampionTag.ASSASSIN: (ChampionTag.MAGE, ChampionTag.MARKSMAN),
    ChampionTag.FIGHTER: (ChampionTag.TANK, ChampionTag.ASSASSIN),
    ChampionTag.MAGE: (ChampionTag.FIGHTER, ChampionTag.TANK),
    ChampionTag.MARKSMAN: (ChampionTag.TANK, ChampionTag.FIGHTER),
    ChampionTag.SUPPORT: (ChampionTag.ASSASSIN,),
    ChampionTag.TANK: (ChampionTag.ASSASSIN, ChampionTag.MAGE),
}

for _table in (_COUNTERED_BY, _STRONG_AGAINST):
    if set(_table) != set(ChampionTag):
        raise RuntimeError("every ChampionTag must have an entry in each counter table")
