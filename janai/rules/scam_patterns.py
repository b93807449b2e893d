"""
Default scam keyword table, read from the bundled v1 snapshot.

Order is significant: matched categories and indicators are reported
in table order. Weights are empirical and kept as-is for parity with
the deployed ScamShield screen.
"""

from typing import Tuple

from janai.models.keyword_rule import KeywordRule
from janai.rules.loader import load_rule_table

DEFAULT_SCAM_RULES: Tuple[KeywordRule, ...] = load_rule_table()

# Category label that marks government impersonation in explanations.
GOVERNMENT_MARKER = "government"
