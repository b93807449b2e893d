import pytest
from janai.models.risk_tier import RiskTier
from janai.scoring.tiers import score_to_tier, is_flagged, confidence_percent


@pytest.mark.parametrize("score, tier", [
    (0.0, RiskTier.LOW),
    (0.2, RiskTier.LOW),
    (0.29, RiskTier.LOW),
    (0.3, RiskTier.MEDIUM),
    (0.5, RiskTier.MEDIUM),
    (0.6, RiskTier.HIGH),
    (0.99, RiskTier.HIGH),
    (1.0, RiskTier.CRITICAL),
    (3.4, RiskTier.CRITICAL),
])
def test_score_to_tier_breakpoints(score, tier):
    assert score_to_tier(score) == tier


def test_flag_threshold():
    assert is_flagged(0.59) is False
    assert is_flagged(0.6) is True


def test_confidence_is_capped_and_monotone():
    scores = [0.0, 0.2, 0.5, 0.9, 1.0, 1.7, 5.0]
    values = [confidence_percent(s) for s in scores]

    assert values == sorted(values)
    assert confidence_percent(1.7) == 100
    assert confidence_percent(0.5) == 50


@pytest.mark.parametrize("score", [0.0, 0.45, 1.0, 2.3])
def test_confidence_is_always_a_float(score):
    assert isinstance(confidence_percent(score), float)
