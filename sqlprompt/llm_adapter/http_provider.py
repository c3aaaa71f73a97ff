"""
Plain HTTP completion provider.

POSTs the request JSON straight to a fixed completions URL with a bearer
token and decodes the whole body once it has arrived. One httpx client is
reused for every exchange of a session.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from sqlprompt.llm_adapter.base import CompletionProvider
from sqlprompt.llm_adapter.errors import CompletionDecodeError, CompletionTransportError
from sqlprompt.llm_adapter.models import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)

_BODY_PREVIEW_CHARS = 200


class HTTPCompletionProvider(CompletionProvider):
    def __init__(
        self,
        endpoint_url: str,
        auth_header: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": auth_header,
        }
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        try:
            response = await self._client.post(
                self._endpoint_url,
                content=request.model_dump_json().encode(),
                headers=self._headers,
            )
        except httpx.HTTPError as exc:
            raise CompletionTransportError(
                f"Request to {self._endpoint_url} failed: {exc}"
            ) from exc

        body = response.content
        if response.is_error:
            raise CompletionTransportError(
                f"Completion endpoint answered {response.status_code}: "
                f"{body[:_BODY_PREVIEW_CHARS].decode(errors='replace')}",
                status_code=response.status_code,
            )

        try:
            completion = CompletionResponse.model_validate_json(body)
        except ValidationError as exc:
            raise CompletionDecodeError(
                f"Could not decode completion response: {exc}"
            ) from exc

        logger.debug(
            "Completion %s received (model=%s, choices=%d)",
            completion.id,
            completion.model,
            len(completion.choices),
        )
        return completion

    async def aclose(self) -> None:
        await self._client.aclose()
