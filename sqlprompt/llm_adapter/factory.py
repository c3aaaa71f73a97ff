"""
Provider factory -- single entry point for building a completion backend.

Selects the backend from ``CompletionConfig.provider``:

  http    Raw HTTPS POST to COMPLETION_URL with a bearer token (default)
  openai  Official openai SDK, legacy completions API, model LLM_MODEL
  mock    Built-in deterministic mock, never touches the network
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlprompt.config import CompletionConfig
from sqlprompt.llm_adapter.base import CompletionProvider
from sqlprompt.llm_adapter.http_provider import HTTPCompletionProvider
from sqlprompt.llm_adapter.mock_provider import MockProvider

logger = logging.getLogger(__name__)


def _build_http(cfg: CompletionConfig) -> CompletionProvider:
    return HTTPCompletionProvider(
        endpoint_url=cfg.endpoint_url,
        auth_header=cfg.auth_header,
        timeout=cfg.request_timeout,
    )


def _build_openai(cfg: CompletionConfig) -> CompletionProvider:
    from sqlprompt.llm_adapter.openai_provider import OpenAICompletionProvider

    return OpenAICompletionProvider(
        api_key=cfg.api_token,
        model=cfg.model,
        base_url=cfg.base_url,
        timeout=cfg.request_timeout,
    )


def _build_mock(cfg: CompletionConfig) -> CompletionProvider:
    return MockProvider()


_PROVIDERS: dict[str, Callable[[CompletionConfig], CompletionProvider]] = {
    "http": _build_http,
    "openai": _build_openai,
    "mock": _build_mock,
}


def build_provider(cfg: CompletionConfig) -> CompletionProvider:
    """Return a fresh provider for the configured backend."""
    name = cfg.provider.lower()
    builder = _PROVIDERS.get(name)
    if builder is None:
        raise ValueError(
            f"Unknown LLM provider '{name}'. "
            f"Available: {', '.join(sorted(_PROVIDERS))}"
        )

    provider = builder(cfg)
    logger.info(
        "Completion provider initialized: %s (endpoint=%s, max_tokens=%d)",
        name,
        cfg.endpoint_url if name == "http" else cfg.model,
        cfg.max_tokens,
    )
    return provider
