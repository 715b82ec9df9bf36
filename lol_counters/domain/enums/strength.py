"""Counter relationship strength classes."""
from enum import Enum


class CounterStrength(Enum):
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    NEUTRAL = "NEUTRAL"
    SOFT_COUNTER = "SOFT_COUNTER"
    STRONG_COUNTER = "STRONG_COUNTER"
    HARD_COUNTER = "HARD_COUNTER"
