"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _optional_int(name: str, default: int) -> int | None:
    raw = os.getenv(name, str(default)).strip().lower()
    if raw in ('', 'none', 'unbounded'):
        return None
    return int(raw)


class Settings:
    """
    Tunables for one batch run.

    Rate limits are Riot's personal-key limits: 20 requests / 1 second and
    100 requests / 120 seconds. The limiter sleeps a short cool-down when the
    1-second quota is used up and the whole 2-minute window when the long
    quota is used up.
    """

    RIOT_API_KEY:  str = os.getenv('RIOT_API_KEY', '')
    TARGET_REGION: str = os.getenv('TARGET_REGION', 'jp1')

    # ── Rate limits ───────────────────────────────────────────────────────
    RATE_LIMIT_PER_1_SEC:       int   = _int('RATE_LIMIT_PER_1_SEC', 20)
    RATE_LIMIT_PER_2_MIN:       int   = _int('RATE_LIMIT_PER_2_MIN', 100)
    RATE_LIMIT_COOLDOWN_SEC:    float = _float('RATE_LIMIT_COOLDOWN_SEC', 1.1)
    RATE_LIMIT_LONG_WINDOW_SEC: float = _float('RATE_LIMIT_LONG_WINDOW_SEC', 120.0)

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT:        int        = _int('REQUEST_TIMEOUT', 30)
    # "none" keeps retrying 429s forever
    MAX_RATE_LIMIT_RETRIES: int | None = _optional_int('MAX_RATE_LIMIT_RETRIES', 5)
    DEFAULT_RETRY_AFTER:    float      = 1.0
    USER_AGENT:             str        = 'lol-counters/1.0.0'

    # ── Player discovery ───────────────────────────────────────────────────
    CHALLENGER_LIMIT:  int = _int('CHALLENGER_LIMIT', 100)
    GRANDMASTER_LIMIT: int = _int('GRANDMASTER_LIMIT', 60)
    MASTER_LIMIT:      int = _int('MASTER_LIMIT', 40)

    # ── Match collection ───────────────────────────────────────────────────
    MATCHES_PER_PLAYER: int = _int('MATCHES_PER_PLAYER', 40)
    TARGET_MATCHES:     int = _int('TARGET_MATCHES', 1000)
    # target shrinks to players x this on a thin ladder; "none" disables
    TARGET_MATCHES_PER_PLAYER: int | None = _optional_int('TARGET_MATCHES_PER_PLAYER', 10)
    MIN_GAME_DURATION:  int = 900
    MAX_GAME_DURATION:  int = 3600

    # ── Counter statistics ─────────────────────────────────────────────────
    MIN_SAMPLE_SIZE:         int   = _int('MIN_SAMPLE_SIZE', 30)
    SIGNIFICANCE_LEVEL:      float = _float('SIGNIFICANCE_LEVEL', 0.05)
    STRONG_COUNTER_WIN_RATE: float = _float('STRONG_COUNTER_WIN_RATE', 0.65)
    COUNTER_WIN_RATE:        float = _float('COUNTER_WIN_RATE', 0.56)
    HARD_COUNTER_MARGIN:     float = 0.15
    STRONG_COUNTER_MARGIN:   float = 0.10
    SOFT_COUNTER_MARGIN:     float = 0.06

    # ── Sample mode (no API key) ───────────────────────────────────────────
    SAMPLE_COUNTERS_PER_LIST: int = _int('SAMPLE_COUNTERS_PER_LIST', 2)

    # ── Static data (Data Dragon) ──────────────────────────────────────────
    DDRAGON_BASE_URL:         str = 'https://ddragon.leagueoflegends.com'
    DDRAGON_LOCALE:           str = os.getenv('DDRAGON_LOCALE', 'ja_JP')
    DDRAGON_FALLBACK_VERSION: str = os.getenv('DDRAGON_FALLBACK_VERSION', '15.12.1')
    DDRAGON_BATCH_SIZE:       int = _int('DDRAGON_BATCH_SIZE', 5)

    # ── Paths / logging ────────────────────────────────────────────────────
    # relative to the working directory of the run
    LOG_DIR:   Path = Path(os.getenv('LOG_DIR', 'data/logs'))
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in the environment or config/.env")


settings = Settings()
