"""
OpenAI SDK completion provider.

Same exchange as the plain HTTP provider, but routed through the official
``openai`` client against the legacy completions endpoint. Only the model,
the prompt and the token limit are sent.
"""

from __future__ import annotations

from pydantic import ValidationError

from sqlprompt.llm_adapter.base import CompletionProvider
from sqlprompt.llm_adapter.errors import CompletionDecodeError, CompletionTransportError
from sqlprompt.llm_adapter.models import CompletionRequest, CompletionResponse


class OpenAICompletionProvider(CompletionProvider):
    """
    Reads nothing from env itself; the factory passes CompletionConfig fields:
      api_key  -- the bearer token (the SDK adds the "Bearer " prefix)
      model    -- completions model, e.g. gpt-3.5-turbo-instruct
      base_url -- LLM_BASE_URL, for OpenAI-compatible servers (SDK default if None)
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        try:
            import openai
        except ImportError as exc:
            raise ImportError(
                "openai package is required. Install it with: pip install openai"
            ) from exc

        self._openai = openai
        self._model = model
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        try:
            response = await self._client.completions.create(
                model=self._model,
                prompt=request.prompt,
                max_tokens=request.max_tokens,
            )
        except self._openai.APIStatusError as exc:
            raise CompletionTransportError(
                f"Completion endpoint answered {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except self._openai.APIError as exc:
            raise CompletionTransportError(f"Completion request failed: {exc}") from exc

        try:
            return CompletionResponse.model_validate(response.model_dump())
        except ValidationError as exc:
            raise CompletionDecodeError(
                f"Could not decode completion response: {exc}"
            ) from exc

    async def aclose(self) -> None:
        await self._client.close()
