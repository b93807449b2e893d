# janai/scoring/scorer.py

from typing import List, Sequence

from janai.models.keyword_rule import KeywordRule, MatchedCategory
from janai.models.score_result import ScoreResult
from janai.rules.structural import STRUCTURAL_HEURISTICS, StructuralHeuristic
from janai.scoring.tiers import score_to_tier


def score_text(
    text: str,
    rules: Sequence[KeywordRule],
    heuristics: Sequence[StructuralHeuristic] = STRUCTURAL_HEURISTICS,
) -> ScoreResult:
    """
    Single pass over the rule table, then the structural heuristics.
    Weights are summed in table order so float results are reproducible.
    """
    text = text or ""
    lowered = text.lower()

    total_score = 0.0
    matched: List[MatchedCategory] = []
    indicators: List[str] = []

    for rule in rules:
        if rule.matches(lowered):
            matched.append(MatchedCategory(rule.category, rule.explanation))
            indicators.append(f"{rule.category}: {rule.explanation}")
            total_score += rule.weight

    for heuristic in heuristics:
        if heuristic.check(text, lowered):
            indicators.append(heuristic.indicator)
            total_score += heuristic.weight

    return ScoreResult(
        total_score=total_score,
        matched_categories=tuple(matched),
        indicators=tuple(indicators),
        risk_tier=score_to_tier(total_score),
    )
