from janai.llm.companion import CivicCompanion, CONTEXT_TURNS, HISTORY_TURNS
from janai.models.llm_result import LLMSuccess, LLMFailure


class StubProvider:
    name = "stub"

    def __init__(self, results):
        self.results = list(results)
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        return self.results.pop(0)


def _ok(text):
    return LLMSuccess(text=text, model="stub-model", provider="stub")


def test_reply_is_recorded_in_history():
    provider = StubProvider([_ok("Visit the UIDAI portal.")])
    companion = CivicCompanion(provider, system_prompt="SYSTEM")

    result = companion.send_message("How do I update Aadhaar?")

    assert result.text == "Visit the UIDAI portal."
    assert companion.history[-1] == {"role": "assistant", "content": "Visit the UIDAI portal."}
    assert provider.prompts[0] == "SYSTEM\n\nUser: How do I update Aadhaar?"


def test_only_recent_turns_are_sent():
    provider = StubProvider([_ok(f"answer {i}") for i in range(4)])
    companion = CivicCompanion(provider, system_prompt="SYSTEM")

    for i in range(4):
        companion.send_message(f"question {i}")

    last_prompt = provider.prompts[-1]
    turns = last_prompt.split("\n\n")[1:]
    assert len(turns) == CONTEXT_TURNS
    assert turns[-1] == "User: question 3"
    assert "question 0" not in last_prompt


def test_failure_does_not_record_assistant_turn():
    failure = LLMFailure(kind="rate_limited", message="429", provider="stub")
    companion = CivicCompanion(StubProvider([failure]))

    result = companion.send_message("hello")

    assert result is failure
    assert list(companion.history) == [{"role": "user", "content": "hello"}]

    companion.reset()
    assert len(companion.history) == 0


def test_history_is_capped():
    provider = StubProvider([_ok(f"answer {i}") for i in range(HISTORY_TURNS)])
    companion = CivicCompanion(provider, system_prompt="SYSTEM")

    for i in range(HISTORY_TURNS):
        companion.send_message(f"question {i}")

    assert len(companion.history) == HISTORY_TURNS
    assert companion.history[-1] == {"role": "assistant", "content": f"answer {HISTORY_TURNS - 1}"}
    assert provider.prompts[-1].endswith(f"User: question {HISTORY_TURNS - 1}")


def test_sessions_are_isolated_and_bounded():
    from janai.llm.sessions import CompanionSessions

    sessions = CompanionSessions(lambda: CivicCompanion(StubProvider([])), max_sessions=2)

    first = sessions.get("a")
    assert sessions.get("a") is first
    assert sessions.get("b") is not first

    sessions.get("c")

    assert len(sessions) == 2
    assert "a" not in sessions
    assert "c" in sessions
