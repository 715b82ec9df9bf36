"""Win-rate significance test against a coin flip."""
import math
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class SignificanceResult:
    p_value: float
    z_score: float
    is_significant: bool


def normal_cdf(x: float) -> float:
    """Pólya's closed-form approximation of the standard normal CDF."""
    return (1.0 + math.copysign(1.0, x) * math.sqrt(1.0 - math.exp(-2.0 * x * x / math.pi))) / 2.0


def significance_test(
    win_rate: float,
    sample_size: int,
    *,
    baseline: float = 0.5,
    alpha: float = 0.05,
) -> SignificanceResult:
    """
    Two-sided z-test of ``win_rate`` against ``baseline``.

    Uses the normal approximation to the binomial:
    ``SE = sqrt(p0 (1 - p0) / n)``, ``z = (rate - p0) / SE`` and
    ``p = 2 (1 - Φ(|z|))``.
    """
    if sample_size <= 0:
        return SignificanceResult(p_value=1.0, z_score=0.0, is_significant=False)
    standard_error = math.sqrt(baseline * (1.0 - baseline) / sample_size)
    z_score = (win_rate - baseline) / standard_error
    p_value = min(1.0, max(0.0, 2.0 * (1.0 - normal_cdf(abs(z_score)))))
    return SignificanceResult(p_value=p_value, z_score=z_score, is_significant=p_value < alpha)


SignificanceTest = Callable[..., SignificanceResult]
