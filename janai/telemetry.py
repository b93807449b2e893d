"""
Telemetry for classification and LLM calls.

Categorical and numeric attributes only. Message text, caller details
and prompts are never attached to spans.
"""
import os
import logging
from typing import Literal

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.trace import get_current_span

logger = logging.getLogger("janai.telemetry")

ScanSource = Literal["sms", "call", "api"]
TIERS = ("low", "medium", "high", "critical")


def init_telemetry():
    """
    Initialize Azure Application Insights via OpenTelemetry.
    No-op when no connection string is configured (local / tests).
    """
    connection_string = os.getenv("AZURE_APPINSIGHTS_CONNECTION_STRING")

    if not connection_string:
        return

    configure_azure_monitor(connection_string=connection_string)
    logger.info("Telemetry initialized")


def emit_classification_telemetry(
    confidence_percent: float,
    risk_tier: str,
    indicator_count: int,
    source: ScanSource,
):
    """
    Emit a single span event for a scam classification.
    Attributes are locked; no kwargs, no payloads.
    """
    assert isinstance(confidence_percent, float), "confidence_percent must be float"
    assert risk_tier in TIERS, f"risk_tier must be one of {TIERS}, got {risk_tier}"
    assert isinstance(indicator_count, int), "indicator_count must be int"
    assert source in ("sms", "call", "api"), f"source must be one of ('sms', 'call', 'api'), got {source}"

    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="janai.classification",
        attributes={
            "confidence_percent": confidence_percent,
            "risk_tier": risk_tier,
            "indicator_count": indicator_count,
            "source": source,
        },
    )


def emit_llm_telemetry(provider: str, outcome: str, attempts: int):
    """
    Emit provider, outcome kind and attempt count for one LLM call.
    """
    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="janai.llm_call",
        attributes={
            "provider": provider,
            "outcome": outcome,
            "attempts": attempts,
        },
    )


def scrub_exception_for_telemetry(exception: Exception) -> str:
    """
    Never log str(e) from user-facing paths; only the exception class name.
    """
    return type(exception).__name__


def emit_exception_telemetry(exception: Exception):
    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="janai.exception",
        attributes={
            "exception_type": scrub_exception_for_telemetry(exception)
        },
    )
