import logging
import math
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from groq import Groq
import groq
import openai
from openai import OpenAI

from janai.llm.config import LLMSettings, ConfigurationError
from janai.llm.retry import RetryPolicy, RateLimitedError, call_with_retry
from janai.models.llm_result import LLMFailure, LLMResult, LLMSuccess
from janai.telemetry import emit_llm_telemetry

logger = logging.getLogger("janai.llm")

CIVIC_SYSTEM_PROMPT = (
    "You are JanAI - India's civic-tech assistant.\n"
    "You help citizens understand government documents, find schemes, and file complaints.\n"
    "Use clear, simple, and empathetic language.\n"
    "If explaining complex forms or laws, break them into steps or plain English."
)


def estimate_tokens(text: str) -> int:
    # Rough estimation: 1 token ~ 4 chars in English
    return math.ceil(len(text) / 4)


def trim_prompt(prompt: str, max_tokens: int) -> str:
    token_count = estimate_tokens(prompt)
    if token_count > max_tokens:
        logger.warning(f"Trimming long prompt ({token_count} tokens > {max_tokens})")
        return prompt[: max_tokens * 4]
    return prompt


class LLMProvider(ABC):
    """
    Thin client around one hosted model API.

    Every call returns LLMSuccess or LLMFailure; SDK objects and SDK
    exceptions never cross this boundary.
    """

    name: str = ""

    def __init__(
        self,
        settings: LLMSettings,
        policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings
        self.policy = policy or RetryPolicy.fixed(settings.max_attempts, settings.backoff_seconds)
        self.sleep = sleep

    @abstractmethod
    def _attempt(self, prompt: str) -> LLMResult:
        """One request. Raise RateLimitedError on 429, return a result otherwise."""

    def generate(self, prompt: str) -> LLMResult:
        if not prompt or not prompt.strip():
            return LLMFailure(kind="empty_response", message="Prompt is required", provider=self.name)

        try:
            self.settings.require(self.name)
        except ConfigurationError as e:
            return LLMFailure(kind="configuration", message=str(e), provider=self.name)

        prompt = trim_prompt(prompt, self.settings.max_prompt_tokens)
        result, attempts = call_with_retry(
            lambda: self._attempt(prompt), self.policy, self.name, sleep=self.sleep
        )

        emit_llm_telemetry(
            provider=self.name,
            outcome="success" if result.ok else result.kind,
            attempts=attempts,
        )
        if result.ok:
            logger.info(f"{self.name} answered with model {result.model}")
        else:
            logger.error(f"{self.name} failed: {result.kind}")
        return result


class GeminiProvider(LLMProvider):
    """Tries each configured Gemini model in order until one answers."""

    name = "gemini"

    def _attempt(self, prompt: str) -> LLMResult:
        genai.configure(api_key=self.settings.require(self.name))

        rate_limited = False
        for model_name in self.settings.gemini_models:
            try:
                model = genai.GenerativeModel(model_name)
                response = model.generate_content(prompt)
                text = (response.text or "").strip()
            except google_exceptions.ResourceExhausted as e:
                logger.warning(f"Gemini model {model_name} rate limited: {type(e).__name__}")
                rate_limited = True
                continue
            except Exception as e:
                # blocked responses raise ValueError on .text
                logger.warning(f"Gemini model {model_name} failed: {type(e).__name__}")
                continue

            if not text:
                continue
            return LLMSuccess(text=text, model=model_name, provider=self.name)

        if rate_limited:
            raise RateLimitedError("All Gemini models rate limited")
        return LLMFailure(
            kind="unavailable",
            message="All Gemini models unavailable",
            provider=self.name,
        )


class GroqProvider(LLMProvider):
    name = "groq"

    def __init__(self, settings: LLMSettings, client: Optional[Groq] = None, **kwargs):
        super().__init__(settings, **kwargs)
        self._client = client

    @property
    def client(self) -> Groq:
        if self._client is None:
            self._client = Groq(api_key=self.settings.require(self.name))
        return self._client

    def _attempt(self, prompt: str) -> LLMResult:
        model = self.settings.groq_model
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        except groq.RateLimitError as e:
            raise RateLimitedError(str(e)) from e
        except groq.APIError as e:
            return LLMFailure(kind="http_error", message=str(e), provider=self.name)

        text = (response.choices[0].message.content or "").strip() if response.choices else ""
        if not text:
            return LLMFailure(kind="empty_response", message="No text in response from AI", provider=self.name)
        return LLMSuccess(text=text, model=model, provider=self.name)


class OpenAIProvider(LLMProvider):
    name = "openai"

    def __init__(
        self,
        settings: LLMSettings,
        client: Optional[OpenAI] = None,
        system_prompt: str = CIVIC_SYSTEM_PROMPT,
        **kwargs,
    ):
        super().__init__(settings, **kwargs)
        self._client = client
        self.system_prompt = system_prompt

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.settings.require(self.name))
        return self._client

    def _attempt(self, prompt: str) -> LLMResult:
        model = self.settings.openai_model
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.settings.temperature,
                max_tokens=1024,
            )
        except openai.RateLimitError as e:
            raise RateLimitedError(str(e)) from e
        except openai.APIError as e:
            return LLMFailure(kind="http_error", message=str(e), provider=self.name)

        text = (response.choices[0].message.content or "").strip() if response.choices else ""
        if not text:
            return LLMFailure(kind="empty_response", message="No response from OpenAI", provider=self.name)
        return LLMSuccess(text=text, model=model, provider=self.name)


PROVIDER_CLASSES = {
    "gemini": GeminiProvider,
    "groq": GroqProvider,
    "openai": OpenAIProvider,
}


def build_provider(settings: LLMSettings, name: Optional[str] = None, **kwargs) -> LLMProvider:
    name = name or settings.default_provider
    if name not in PROVIDER_CLASSES:
        raise ConfigurationError(f"Unknown provider: {name}")
    return PROVIDER_CLASSES[name](settings, **kwargs)
