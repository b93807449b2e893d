from typing import Iterable, Sequence, Set, Tuple

# (keywords, label); keywords are matched as lower-case substrings
LabelTable = Sequence[Tuple[Iterable[str], str]]


def _hits(lowered: str, keywords: Iterable[str]) -> bool:
    return any(keyword in lowered for keyword in keywords)


def map_first_match(text: str, table: LabelTable, default: str) -> str:
    """
    Label of the first table entry with any keyword in `text`, else `default`.
    """
    lowered = (text or "").lower()
    for keywords, label in table:
        if _hits(lowered, keywords):
            return label
    return default


def map_all_matches(text: str, table: LabelTable) -> Set[str]:
    lowered = (text or "").lower()
    return {label for keywords, label in table if _hits(lowered, keywords)}
