"""Region enumeration for League of Legends servers."""
from enum import Enum

# platform host -> regional routing host used by the match-v5 API
_REGIONAL_ROUTES = {
    "na1": "americas", "br1": "americas", "la1": "americas", "la2": "americas",
    "euw1": "europe", "eun1": "europe", "tr1": "europe", "ru": "europe", "me1": "europe",
    "kr": "asia", "jp1": "asia",
    "oc1": "sea", "ph2": "sea", "sg2": "sea", "th2": "sea", "tw2": "sea", "vn2": "sea",
}


class Region(Enum):
    """Platform servers; ``value`` is the platform host prefix."""

    NA1 = "na1"
    BR1 = "br1"
    LA1 = "la1"
    LA2 = "la2"
    EUW1 = "euw1"
    EUN1 = "eun1"
    TR1 = "tr1"
    RU = "ru"
    ME1 = "me1"
    KR = "kr"
    JP1 = "jp1"
    OC1 = "oc1"
    PH2 = "ph2"
    SG2 = "sg2"
    TH2 = "th2"
    TW2 = "tw2"
    VN2 = "vn2"

    @property
    def platform_route(self) -> str:
        return self.value

    @property
    def regional_route(self) -> str:
        return _REGIONAL_ROUTES[self.value]

    @property
    def platform_url(self) -> str:
        return f"https://{self.platform_route}.api.riotgames.com"

    @property
    def regional_url(self) -> str:
        return f"https://{self.regional_route}.api.riotgames.com"

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Accept ``"jp1"``, ``"JP1"`` or a member name; unknown values raise ``ValueError``."""
        normalized = value.strip().lower()
        for region in cls:
            if region.value == normalized:
                return region
        raise ValueError(f"Unknown region: {value!r}")
