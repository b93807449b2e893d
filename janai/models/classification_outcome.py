from dataclasses import dataclass
from typing import Tuple
from .risk_tier import RiskTier


@dataclass(frozen=True)
class ClassificationOutcome:
    """
    Read-only verdict for a single scanned message.
    Computed synchronously and discarded after use.
    """

    is_flagged: bool
    confidence_percent: float
    risk_tier: RiskTier
    indicators: Tuple[str, ...]
    explanation: str
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "is_flagged": self.is_flagged,
            "confidence_percent": self.confidence_percent,
            "risk_tier": self.risk_tier.value,
            "indicators": list(self.indicators),
            "explanation": self.explanation,
            "recommendation": self.recommendation,
        }
