from datetime import datetime, timezone
import pytest
from janai.decision.classifier import RiskScoringClassifier
from janai.history.scan_history import ScanHistory


@pytest.fixture
def outcome():
    return RiskScoringClassifier().classify("Your order has been shipped and will arrive Monday.")


def test_records_are_kept_oldest_first(outcome):
    history = ScanHistory()
    history.record("sms", "first", outcome)
    history.record("call", "second", outcome)

    entries = history.entries()
    assert [e.text for e in entries] == ["first", "second"]
    assert entries[1].scan_type == "call"
    assert len(history) == 2


def test_max_entries_drops_oldest(outcome):
    history = ScanHistory(max_entries=2)
    for text in ("a", "b", "c"):
        history.record("sms", text, outcome)

    assert [e.text for e in history.entries()] == ["b", "c"]


def test_record_serializes(outcome):
    history = ScanHistory()
    ts = datetime(2025, 1, 1, tzinfo=timezone.utc)
    entry = history.record("sms", "hello", outcome, timestamp=ts)

    data = entry.to_dict()
    assert data["type"] == "sms"
    assert data["timestamp"] == "2025-01-01T00:00:00+00:00"
    assert data["result"]["risk_tier"] == "low"


def test_invalid_input_is_rejected(outcome):
    with pytest.raises(ValueError):
        ScanHistory(max_entries=0)
    with pytest.raises(ValueError):
        ScanHistory().record("email", "x", outcome)


def test_clear(outcome):
    history = ScanHistory()
    history.record("sms", "x", outcome)
    history.clear()
    assert history.entries() == []
