import logging
from collections import deque
from typing import Deque, Dict

from janai.llm.providers import LLMProvider
from janai.models.llm_result import LLMResult

logger = logging.getLogger("janai.llm")

COMPANION_SYSTEM_PROMPT = """
You are JanAI - India's civic-tech assistant.
Your goal is to respond clearly, briefly, and empathetically.
Use plain, simple English or the user's language.
Never exceed 120 words.
Summarize and guide users through steps when explaining.
"""

CONTEXT_TURNS = 5
HISTORY_TURNS = 50


class CivicCompanion:
    """
    Conversation wrapper for a single session. Only the last CONTEXT_TURNS
    turns are sent, to keep prompts under provider token limits; at most
    HISTORY_TURNS turns are kept.
    """

    def __init__(self, provider: LLMProvider, system_prompt: str = COMPANION_SYSTEM_PROMPT):
        self.provider = provider
        self.system_prompt = system_prompt
        self.history: Deque[Dict[str, str]] = deque(maxlen=HISTORY_TURNS)

    def build_prompt(self) -> str:
        context = "\n\n".join(
            f"{'User' if turn['role'] == 'user' else 'Assistant'}: {turn['content']}"
            for turn in list(self.history)[-CONTEXT_TURNS:]
        )
        return f"{self.system_prompt}\n\n{context}"

    def send_message(self, user_message: str) -> LLMResult:
        self.history.append({"role": "user", "content": user_message})
        result = self.provider.generate(self.build_prompt())

        if result.ok:
            self.history.append({"role": "assistant", "content": result.text})
        else:
            logger.warning(f"Companion reply failed ({result.kind})")
        return result

    def reset(self) -> None:
        self.history.clear()
