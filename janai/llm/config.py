import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

PROVIDERS = ("gemini", "groq", "openai")

DEFAULT_GEMINI_MODELS = ("gemini-2.5-flash", "gemini-2.0-flash", "gemini-1.5-flash")
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"


class ConfigurationError(Exception):
    """Raised when a provider is used without valid credentials."""


@dataclass(frozen=True)
class LLMSettings:
    """
    Explicit provider configuration, resolved once at startup.
    Providers receive this object; nothing reads API keys lazily.
    """
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    gemini_models: Tuple[str, ...] = DEFAULT_GEMINI_MODELS
    groq_model: str = DEFAULT_GROQ_MODEL
    openai_model: str = DEFAULT_OPENAI_MODEL
    max_attempts: int = 3
    backoff_seconds: float = 6.0
    max_prompt_tokens: int = 3500
    temperature: float = 0.7
    max_tokens: int = 512
    default_provider: str = "groq"

    def require(self, provider: str) -> str:
        """Return the provider's API key or fail fast."""
        if provider not in PROVIDERS:
            raise ConfigurationError(f"Unknown provider: {provider}")

        key = getattr(self, f"{provider}_api_key")
        if not key:
            raise ConfigurationError(
                f"{provider.upper()}_API_KEY is not configured"
            )
        if provider == "groq" and not key.startswith("gsk_"):
            raise ConfigurationError("Invalid Groq API key format. Key should start with gsk_")
        return key

    def is_configured(self, provider: str) -> bool:
        try:
            self.require(provider)
        except ConfigurationError:
            return False
        return True


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def load_settings(dotenv: bool = True) -> LLMSettings:
    """
    Build settings from the environment (and .env when present).
    """
    if dotenv:
        load_dotenv()

    gemini_models = _clean(os.getenv("GEMINI_MODELS"))
    max_attempts = _int_env("LLM_MAX_ATTEMPTS", 3)
    if max_attempts < 1:
        raise ConfigurationError("LLM_MAX_ATTEMPTS must be at least 1")

    default_provider = (_clean(os.getenv("LLM_PROVIDER")) or "groq").lower()
    if default_provider not in PROVIDERS:
        raise ConfigurationError(f"Unknown LLM_PROVIDER: {default_provider}")

    return LLMSettings(
        gemini_api_key=_clean(os.getenv("GEMINI_API_KEY")),
        groq_api_key=_clean(os.getenv("GROQ_API_KEY")),
        openai_api_key=_clean(os.getenv("OPENAI_API_KEY")),
        gemini_models=(
            tuple(m.strip() for m in gemini_models.split(",") if m.strip())
            if gemini_models else DEFAULT_GEMINI_MODELS
        ),
        groq_model=_clean(os.getenv("GROQ_MODEL")) or DEFAULT_GROQ_MODEL,
        openai_model=_clean(os.getenv("OPENAI_MODEL")) or DEFAULT_OPENAI_MODEL,
        max_attempts=max_attempts,
        backoff_seconds=_float_env("LLM_BACKOFF_SECONDS", 6.0),
        max_prompt_tokens=_int_env("LLM_MAX_PROMPT_TOKENS", 3500),
        default_provider=default_provider,
    )
