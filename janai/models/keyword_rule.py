from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class KeywordRule:
    """
    A weighted keyword category.
    The rule fires when ANY keyword is a substring of the lower-cased text,
    so keywords are stored lower-cased.
    """
    category: str
    keywords: FrozenSet[str]
    weight: float
    explanation: str

    def __post_init__(self):
        if isinstance(self.keywords, str):
            raise ValueError(f"Rule '{self.category}' keywords must be a collection, not a string")
        if not self.keywords:
            raise ValueError(f"Rule '{self.category}' has no keywords")
        if not all(isinstance(k, str) and k for k in self.keywords):
            raise ValueError(f"Rule '{self.category}' keywords must be non-empty strings")
        if not 0.0 < self.weight <= 1.0:
            raise ValueError(f"Rule '{self.category}' weight {self.weight} outside (0, 1]")

        object.__setattr__(self, "keywords", frozenset(k.lower() for k in self.keywords))

    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)


@dataclass(frozen=True)
class MatchedCategory:
    category: str
    explanation: str
