import logging
from typing import Optional, Sequence

from janai.models.classification_outcome import ClassificationOutcome
from janai.models.keyword_rule import KeywordRule
from janai.models.score_result import ScoreResult
from janai.rules.scam_patterns import DEFAULT_SCAM_RULES
from janai.scoring.scorer import score_text
from janai.scoring.tiers import is_flagged, confidence_percent
from janai.decision.advisory import compose_advisory

logger = logging.getLogger("janai.decision")


class RiskScoringClassifier:
    """
    Rule-based scam classifier for SMS text and caller descriptions.

    The rule table is fixed at construction and never mutated, so the
    same text always yields the same outcome.
    """

    def __init__(self, rules: Optional[Sequence[KeywordRule]] = None):
        self.rules = tuple(rules) if rules is not None else DEFAULT_SCAM_RULES

    def score(self, text: str) -> ScoreResult:
        return score_text(text, self.rules)

    def classify(self, text: str) -> ClassificationOutcome:
        result = self.score(text)
        flagged = is_flagged(result.total_score)

        explanation, recommendation = compose_advisory(
            flagged=flagged,
            risk_tier=result.risk_tier,
            indicator_count=len(result.indicators),
            matched=result.matched_categories,
        )

        # Scores only; message text stays out of the logs
        logger.debug(
            "classified score=%.2f tier=%s indicators=%d",
            result.total_score, result.risk_tier.value, len(result.indicators),
        )

        return ClassificationOutcome(
            is_flagged=flagged,
            confidence_percent=confidence_percent(result.total_score),
            risk_tier=result.risk_tier,
            indicators=result.indicators,
            explanation=explanation,
            recommendation=recommendation,
        )

    def check_caller(self, caller_info: str) -> ClassificationOutcome:
        """Classify a caller description the way the call checker frames it."""
        caller_info = caller_info or ""
        return self.classify(f"Call from {caller_info}: {caller_info}")


# Global variable to hold the default instance
_default_classifier: Optional[RiskScoringClassifier] = None


def get_classifier() -> RiskScoringClassifier:
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = RiskScoringClassifier()
    return _default_classifier


def classify(text: str) -> ClassificationOutcome:
    return get_classifier().classify(text)
