from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_ENDPOINT_URL = "https://api.openai.com/v1/engines/text-davinci-001/completions"
DEFAULT_PREAMBLE = "Generate a Sql code for the given statement."
DEFAULT_MAX_TOKENS = 1000

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised when the environment cannot produce a usable configuration."""


@dataclass(frozen=True)
class CompletionConfig:
    api_token: str
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    preamble: str = DEFAULT_PREAMBLE
    max_tokens: int = DEFAULT_MAX_TOKENS
    provider: str = "http"
    model: str = "gpt-3.5-turbo-instruct"
    base_url: str | None = None
    request_timeout: float | None = None
    continue_on_error: bool = False
    log_level: str = "WARNING"
    log_file: str | None = None

    @property
    def auth_header(self) -> str:
        return f"Bearer {self.api_token}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CompletionConfig:
        env = os.environ if environ is None else environ

        token = env.get("OAI_TOKEN", "").strip()
        if not token:
            raise ConfigError(
                "OAI_TOKEN is not set. Export it or add it to a .env file."
            )

        timeout_raw = env.get("LLM_REQUEST_TIMEOUT", "").strip()
        return cls(
            api_token=token,
            endpoint_url=env.get("COMPLETION_URL", DEFAULT_ENDPOINT_URL),
            preamble=env.get("PROMPT_PREAMBLE", DEFAULT_PREAMBLE),
            max_tokens=_positive(env, "MAX_TOKENS", str(DEFAULT_MAX_TOKENS), int),
            provider=env.get("LLM_PROVIDER", "http").lower(),
            model=env.get("LLM_MODEL", "gpt-3.5-turbo-instruct"),
            base_url=env.get("LLM_BASE_URL") or None,
            request_timeout=(
                _positive(env, "LLM_REQUEST_TIMEOUT", timeout_raw, float)
                if timeout_raw
                else None
            ),
            continue_on_error=env.get("CONTINUE_ON_ERROR", "").lower() in _TRUTHY,
            log_level=env.get("LOG_LEVEL", "WARNING").upper(),
            log_file=env.get("LOG_FILE") or None,
        )


def _positive(env: Mapping[str, str], key: str, default: str, kind: type):
    raw = env.get(key, default)
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{key} must be a positive finite number, got {raw!r}")
    return value
