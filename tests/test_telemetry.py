import pytest
from janai.telemetry import (
    emit_classification_telemetry,
    emit_llm_telemetry,
    emit_exception_telemetry,
    scrub_exception_for_telemetry,
    init_telemetry,
)


def test_init_telemetry_is_noop_without_connection_string(monkeypatch):
    monkeypatch.delenv("AZURE_APPINSIGHTS_CONNECTION_STRING", raising=False)
    init_telemetry()


def test_emitters_do_not_crash_without_active_span():
    """
    Telemetry must be safe when disabled (local / tests).
    """
    emit_classification_telemetry(
        confidence_percent=100.0,
        risk_tier="critical",
        indicator_count=5,
        source="sms",
    )
    emit_classification_telemetry(
        confidence_percent=0.0,
        risk_tier="low",
        indicator_count=0,
        source="call",
    )
    emit_llm_telemetry(provider="groq", outcome="success", attempts=1)
    emit_exception_telemetry(RuntimeError("secret caller details"))


def test_classification_attributes_are_locked():
    with pytest.raises(AssertionError):
        emit_classification_telemetry(
            confidence_percent=10.0,
            risk_tier="severe",
            indicator_count=1,
            source="sms",
        )
    with pytest.raises(AssertionError):
        emit_classification_telemetry(
            confidence_percent=10,
            risk_tier="low",
            indicator_count=1,
            source="sms",
        )


def test_exception_scrubbing_keeps_only_class_name():
    assert scrub_exception_for_telemetry(ValueError("Aadhaar 1234 5678 9012")) == "ValueError"
