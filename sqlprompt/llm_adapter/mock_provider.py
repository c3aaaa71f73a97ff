"""
Deterministic mock completion provider for offline use and tests.

Always returns the same text for the same prompt, so a session can be
exercised end to end without network calls.
"""

from __future__ import annotations

import hashlib
import time

from sqlprompt.llm_adapter.base import CompletionProvider
from sqlprompt.llm_adapter.models import (
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
)

_MOCK_PREFIX = "-- [MOCK] "


class MockProvider(CompletionProvider):

    def __init__(self) -> None:
        self._call_count = 0

    @property
    def call_count(self) -> int:
        return self._call_count

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        self._call_count += 1
        prompt_hash = hashlib.sha256(request.prompt.encode()).hexdigest()

        text = (
            f"{_MOCK_PREFIX}prompt hash {prompt_hash[:12]}\n"
            f"SELECT 1 AS mock_{self._call_count};"
        )

        return CompletionResponse(
            id=f"cmpl-mock-{prompt_hash[:12]}",
            object="text_completion",
            created=int(time.time()),
            model="mock-deterministic",
            choices=[
                CompletionChoice(text=text, index=0, finish_reason="stop"),
            ],
        )
