import re
from dataclasses import dataclass
from typing import Callable, Tuple

# \d restricted to ASCII so "digits" means 0-9 only
PHONE_RUN_REGEX = re.compile(r"\b\d{10,15}\b", re.ASCII)
CAPS_RUN_REGEX = re.compile(r"[A-Z]{3,}")

SHORT_MESSAGE_MAX_LEN = 50
ACTION_WORDS = ("click", "call")


@dataclass(frozen=True)
class StructuralHeuristic:
    """
    Non-keyword signal. `check` receives (original_text, lowered_text).
    """
    name: str
    weight: float
    explanation: str
    check: Callable[[str, str], bool]

    @property
    def indicator(self) -> str:
        return f"{self.name}: {self.explanation}"


def _is_short_action_message(text: str, lowered: str) -> bool:
    return len(text) < SHORT_MESSAGE_MAX_LEN and any(w in lowered for w in ACTION_WORDS)


def _has_caps_run(text: str, lowered: str) -> bool:
    return CAPS_RUN_REGEX.search(text) is not None


def _has_phone_with_call(text: str, lowered: str) -> bool:
    return PHONE_RUN_REGEX.search(text) is not None and "call" in lowered


STRUCTURAL_HEURISTICS: Tuple[StructuralHeuristic, ...] = (
    StructuralHeuristic(
        name="short_message",
        weight=0.2,
        explanation="Too brief with action prompts",
        check=_is_short_action_message,
    ),
    StructuralHeuristic(
        name="all_caps",
        weight=0.2,
        explanation="Excessive use of capital letters",
        check=_has_caps_run,
    ),
    StructuralHeuristic(
        name="phone_number",
        weight=0.3,
        explanation="Contains phone number urging call",
        check=_has_phone_with_call,
    ),
)
