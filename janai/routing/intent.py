from dataclasses import dataclass
from typing import Sequence, Tuple

from janai.routing.mappings import map_first_match


@dataclass(frozen=True)
class CivicIntent:
    type: str
    service: str
    action: str
    details: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "service": self.service,
            "action": self.action,
            "details": self.details,
        }


SERVICE_TABLE = (
    (("pension",), "pension"),
    (("ration",), "ration"),
    (("health", "card"), "health_card"),
    (("certificate", "cert"), "certificate"),
    (("bill",), "bill"),
)

# keywords -> intent type, first match wins
INTENT_TABLE = (
    (("status", "check", "pending"), "status_check"),
    (("form", "how to", "explain"), "form_help"),
    (("apply", "how do i get"), "application_guidance"),
    (("complaint", "problem", "issue"), "auto_complaint"),
    (("scam", "fraud", "fake"), "scam_detection"),
)

INTENT_ACTIONS = {
    "status_check": "check",
    "form_help": "guide",
    "application_guidance": "apply",
    "auto_complaint": "complain",
    "scam_detection": "detect",
    "general": "chat",
}

# Every keyword group must hit for the row to match.
CONJUNCTIVE_CONCERNS: Sequence[Tuple[Tuple[Tuple[str, ...], ...], str]] = (
    ((("pension",), ("delay", "late")), "pension_delayed"),
    ((("ration",), ("not working", "issue")), "ration_card_issue"),
)

CONCERN_TABLE = (
    (("water", "supply"), "water_issue"),
    (("electricity", "power"), "electricity_issue"),
    (("certificate", "document"), "document_issue"),
)


def extract_service(message: str) -> str:
    return map_first_match(message, SERVICE_TABLE, "other")


def detect_intent(message: str) -> CivicIntent:
    message = message or ""
    intent_type = map_first_match(message, INTENT_TABLE, "general")

    if intent_type in ("scam_detection", "general"):
        service = "other"
    else:
        service = extract_service(message)

    return CivicIntent(
        type=intent_type,
        service=service,
        action=INTENT_ACTIONS[intent_type],
        details=message,
    )


def detect_concern_type(message: str) -> str:
    lowered = (message or "").lower()
    for groups, label in CONJUNCTIVE_CONCERNS:
        if all(any(k in lowered for k in group) for group in groups):
            return label
    return map_first_match(lowered, CONCERN_TABLE, "general_concern")
