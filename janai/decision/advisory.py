from typing import Sequence, Tuple

from janai.models.keyword_rule import MatchedCategory
from janai.models.risk_tier import RiskTier
from janai.rules.scam_patterns import GOVERNMENT_MARKER

GOVERNMENT_WARNING = "Government agencies NEVER send verification SMS. "

FLAGGED_RECOMMENDATION = (
    "DO NOT click any links. DO NOT call the number. "
    "DO NOT share any personal information. Delete this message immediately."
)
CAUTION_EXPLANATION = "This message has some suspicious characteristics. Be cautious."
CAUTION_RECOMMENDATION = "Verify through the official website before clicking any links."
LEGITIMATE_EXPLANATION = "This message appears legitimate."
LEGITIMATE_RECOMMENDATION = "Safe to follow official instructions."


def mentions_government(matched: Sequence[MatchedCategory]) -> bool:
    return any(GOVERNMENT_MARKER in m.category for m in matched)


def compose_advisory(
    flagged: bool,
    risk_tier: RiskTier,
    indicator_count: int,
    matched: Sequence[MatchedCategory],
) -> Tuple[str, str]:
    """
    Returns (explanation, recommendation).
    Wording branches only on flagged, tier and the government marker.
    """
    if flagged:
        explanation = (
            f"This message shows {indicator_count} suspicious patterns "
            "characteristic of scams. "
        )
        if mentions_government(matched):
            explanation += GOVERNMENT_WARNING
        explanation += "This is likely a phishing attempt targeting vulnerable citizens."
        return explanation, FLAGGED_RECOMMENDATION

    if risk_tier == RiskTier.MEDIUM:
        return CAUTION_EXPLANATION, CAUTION_RECOMMENDATION

    return LEGITIMATE_EXPLANATION, LEGITIMATE_RECOMMENDATION
