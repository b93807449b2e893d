import re
from typing import Any, Mapping, Optional

SENIOR_AGE = 60
STUDENT_AGE_RANGE = (18, 30)
BPL_INCOME_LIMIT = 300000

LEADING_INT_REGEX = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def _as_int(value: Any) -> int:
    # Leading digits only, so "60.5" and "25 years" still parse
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return 0
    match = LEADING_INT_REGEX.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else 0


def check_eligibility(
    scheme: Mapping[str, Any],
    profile: Optional[Mapping[str, Any]],
) -> bool:
    """
    Coarse rule-based eligibility. Any single matching rule qualifies.
    """
    if not profile:
        return False

    age = _as_int(profile.get("age"))
    income = _as_int(profile.get("income"))
    occupation = str(profile.get("occupation") or "").lower()

    category = scheme.get("category")
    target_group = str(scheme.get("targetGroup") or scheme.get("target_group") or "")

    if category == "Social Security" and age >= SENIOR_AGE:
        return True
    if category == "Agriculture" and "farm" in occupation:
        return True
    low, high = STUDENT_AGE_RANGE
    if category == "Education" and low <= age <= high:
        return True
    if "Below Poverty Line" in target_group and income < BPL_INCOME_LIMIT:
        return True

    return False
