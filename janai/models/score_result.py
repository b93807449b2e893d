from dataclasses import dataclass
from typing import Tuple
from .keyword_rule import MatchedCategory
from .risk_tier import RiskTier


@dataclass(frozen=True)
class ScoreResult:
    total_score: float
    matched_categories: Tuple[MatchedCategory, ...]
    indicators: Tuple[str, ...]
    risk_tier: RiskTier
