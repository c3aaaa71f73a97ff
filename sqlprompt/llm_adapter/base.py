"""Abstract base class that all completion providers must implement."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlprompt.llm_adapter.models import CompletionRequest, CompletionResponse


class CompletionProvider(ABC):
    """
    Contract for completion providers.

    Every implementation MUST:
    - Send only the prompt and the token limit as generation parameters
    - Read the full response before returning (no partial results)
    - Raise a CompletionError subclass on failure, never return None
    """

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        """Send a prompt and return the decoded completion."""

    async def aclose(self) -> None:
        """Release any transport resources. No-op by default."""
