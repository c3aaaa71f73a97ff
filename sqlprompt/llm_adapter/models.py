"""Wire models for the text-completion endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sqlprompt.llm_adapter.errors import EmptyChoicesError


class CompletionRequest(BaseModel):
    prompt: str
    max_tokens: int = Field(default=1000, ge=1)

    @classmethod
    def build(cls, preamble: str, text: str, max_tokens: int) -> CompletionRequest:
        """Join the preamble and the operator text with a single space."""
        return cls(prompt=f"{preamble} {text}", max_tokens=max_tokens)


class CompletionChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str
    index: int
    logprobs: Any | None = None
    finish_reason: str | None = None


class CompletionResponse(BaseModel):
    """
    Subset of the completion endpoint's reply.

    Only ``choices`` is required; the identifying metadata is kept for
    logging but never drives a decision.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[CompletionChoice]

    def first_text(self) -> str:
        if not self.choices:
            raise EmptyChoicesError(
                f"Completion {self.id or '<no id>'} returned no choices"
            )
        return self.choices[0].text
