from dataclasses import dataclass
from typing import Literal, Union

FailureKind = Literal[
    "configuration",
    "rate_limited",
    "http_error",
    "empty_response",
    "unavailable",
]


@dataclass(frozen=True)
class LLMSuccess:
    text: str
    model: str
    provider: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class LLMFailure:
    kind: FailureKind
    message: str
    provider: str

    @property
    def ok(self) -> bool:
        return False


LLMResult = Union[LLMSuccess, LLMFailure]
