# Deterministic tier breakpoints for scam scoring.
# Empirical values from the deployed screens; keep them unchanged.

CRITICAL_MIN = 1.0
HIGH_MIN = 0.6
MEDIUM_MIN = 0.3

# A message is flagged as a likely scam from HIGH upwards.
FLAG_THRESHOLD = HIGH_MIN

# Interpretation:
# 0.0 - <0.3  -> low
# 0.3 - <0.6  -> medium
# 0.6 - <1.0  -> high (flagged)
# 1.0+        -> critical (flagged)
