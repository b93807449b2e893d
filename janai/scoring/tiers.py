from janai.models.risk_tier import RiskTier
from janai.scoring.thresholds import CRITICAL_MIN, HIGH_MIN, MEDIUM_MIN, FLAG_THRESHOLD


def score_to_tier(total_score: float) -> RiskTier:
    """
    Map a total score to a risk tier. First match wins, descending.
    """
    if total_score >= CRITICAL_MIN:
        return RiskTier.CRITICAL
    if total_score >= HIGH_MIN:
        return RiskTier.HIGH
    if total_score >= MEDIUM_MIN:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def is_flagged(total_score: float) -> bool:
    return total_score >= FLAG_THRESHOLD


def confidence_percent(total_score: float) -> float:
    return min(total_score * 100, 100.0)
