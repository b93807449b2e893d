import json
from pathlib import Path
from typing import Tuple, Union

from janai.models.keyword_rule import KeywordRule


SNAPSHOT_DIR = Path(__file__).parent / "snapshots"
DEFAULT_SNAPSHOT = "scam_rules_v1.json"


class RuleTableError(ValueError):
    """Raised when a rule snapshot is structurally invalid."""


def _parse_rule(raw: dict) -> KeywordRule:
    if not isinstance(raw, dict):
        raise RuleTableError(f"Invalid rule entry: {raw!r}")

    try:
        category = raw["category"]
        keywords = raw["keywords"]
        weight = float(raw["weight"])
    except (KeyError, TypeError, ValueError) as e:
        raise RuleTableError(f"Invalid rule entry: {raw!r}") from e

    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise RuleTableError(f"Rule '{category}' keywords must be a list of strings")

    try:
        return KeywordRule(
            category=category,
            keywords=frozenset(keywords),
            weight=weight,
            explanation=raw.get("explanation", category),
        )
    except ValueError as e:
        raise RuleTableError(str(e)) from e


def load_rule_table(path: Union[str, Path, None] = None) -> Tuple[KeywordRule, ...]:
    """
    Load a versioned keyword rule table from disk.
    Relative names resolve against the bundled snapshots directory.
    """
    if path is None:
        path = DEFAULT_SNAPSHOT

    snapshot_path = Path(path)
    if not snapshot_path.is_absolute() and not snapshot_path.exists():
        snapshot_path = SNAPSHOT_DIR / snapshot_path

    if not snapshot_path.exists():
        raise FileNotFoundError(f"Rule snapshot not found: {path}")

    with open(snapshot_path, "r", encoding="utf-8") as f:
        snapshot = json.load(f)

    if not isinstance(snapshot, dict):
        raise RuleTableError("Invalid snapshot: expected a JSON object")
    if "snapshot_version" not in snapshot:
        raise RuleTableError("Invalid snapshot: missing snapshot_version")
    if not isinstance(snapshot.get("rules"), list):
        raise RuleTableError("Invalid snapshot: 'rules' must be a list")

    return tuple(_parse_rule(raw) for raw in snapshot["rules"])
