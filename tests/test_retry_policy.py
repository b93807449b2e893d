import pytest
from janai.llm.retry import RetryPolicy, RateLimitedError, call_with_retry
from janai.models.llm_result import LLMSuccess, LLMFailure


class FakeClock:
    def __init__(self):
        self.sleeps = []

    def sleep(self, seconds):
        self.sleeps.append(seconds)


def _flaky(failures, result):
    calls = {"n": 0}

    def fn():
        calls["n"] += 1
        if calls["n"] <= failures:
            raise RateLimitedError("429")
        return result

    return fn, calls


def test_success_on_first_attempt_does_not_sleep():
    clock = FakeClock()
    ok = LLMSuccess(text="hi", model="m", provider="groq")

    result, attempts = call_with_retry(lambda: ok, RetryPolicy(), "groq", sleep=clock.sleep)

    assert result is ok
    assert attempts == 1
    assert clock.sleeps == []


def test_retries_until_success():
    clock = FakeClock()
    ok = LLMSuccess(text="hi", model="m", provider="groq")
    fn, calls = _flaky(2, ok)

    result, attempts = call_with_retry(fn, RetryPolicy.fixed(3, 6.0), "groq", sleep=clock.sleep)

    assert result is ok
    assert attempts == 3
    assert calls["n"] == 3
    assert clock.sleeps == [6.0, 6.0]


def test_gives_up_with_typed_failure():
    clock = FakeClock()
    fn, calls = _flaky(10, None)

    result, attempts = call_with_retry(fn, RetryPolicy(max_attempts=3, backoff_seconds=(1.0, 2.0)), "gemini", sleep=clock.sleep)

    assert isinstance(result, LLMFailure)
    assert result.kind == "rate_limited"
    assert result.provider == "gemini"
    assert attempts == 3
    assert calls["n"] == 3
    assert clock.sleeps == [1.0, 2.0]


def test_non_rate_limit_failures_are_not_retried():
    clock = FakeClock()
    failure = LLMFailure(kind="http_error", message="500", provider="openai")

    result, attempts = call_with_retry(lambda: failure, RetryPolicy(), "openai", sleep=clock.sleep)

    assert result is failure
    assert attempts == 1
    assert clock.sleeps == []


def test_backoff_schedule_repeats_last_entry():
    policy = RetryPolicy(max_attempts=6, backoff_seconds=(1.0, 2.0, 4.0))

    assert [policy.delay_for(a) for a in range(1, 6)] == [1.0, 2.0, 4.0, 4.0, 4.0]


@pytest.mark.parametrize("kwargs", [
    {"max_attempts": 0},
    {"backoff_seconds": ()},
    {"backoff_seconds": (-1.0,)},
])
def test_invalid_policy(kwargs):
    with pytest.raises(ValueError):
        RetryPolicy(**kwargs)
