import logging
import time
from dataclasses import dataclass
from typing import Callable, Tuple

from janai.models.llm_result import LLMFailure, LLMResult

logger = logging.getLogger("janai.llm")


class RateLimitedError(Exception):
    """Provider answered 429 / quota exhausted. The only retryable failure."""


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded retry schedule. `backoff_seconds[i]` is the wait after attempt i+1;
    the last entry repeats when there are more attempts than entries.
    """
    max_attempts: int = 3
    backoff_seconds: Tuple[float, ...] = (6.0,)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not self.backoff_seconds or any(d < 0 for d in self.backoff_seconds):
            raise ValueError("backoff_seconds must be non-empty and non-negative")

    @classmethod
    def fixed(cls, max_attempts: int, delay: float) -> "RetryPolicy":
        return cls(max_attempts=max_attempts, backoff_seconds=(delay,))

    def delay_for(self, attempt: int) -> float:
        index = min(attempt - 1, len(self.backoff_seconds) - 1)
        return self.backoff_seconds[max(index, 0)]


def call_with_retry(
    fn: Callable[[], LLMResult],
    policy: RetryPolicy,
    provider: str,
    sleep: Callable[[float], None] = time.sleep,
) -> Tuple[LLMResult, int]:
    """
    Run `fn` until it returns a result or attempts run out.
    Returns (result, attempts_used).
    """
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return fn(), attempt
        except RateLimitedError as e:
            if attempt == policy.max_attempts:
                logger.warning(f"{provider} rate limited; giving up after {attempt} attempts")
                return LLMFailure(kind="rate_limited", message=str(e), provider=provider), attempt

            delay = policy.delay_for(attempt)
            logger.warning(
                f"{provider} rate limited; retrying in {delay}s "
                f"({attempt}/{policy.max_attempts})"
            )
            sleep(delay)

    # unreachable: loop always returns
    raise AssertionError("retry loop exited without a result")
