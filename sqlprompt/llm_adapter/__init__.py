from sqlprompt.llm_adapter.base import CompletionProvider
from sqlprompt.llm_adapter.errors import (
    CompletionDecodeError,
    CompletionError,
    CompletionTransportError,
    EmptyChoicesError,
)
from sqlprompt.llm_adapter.factory import build_provider
from sqlprompt.llm_adapter.http_provider import HTTPCompletionProvider
from sqlprompt.llm_adapter.mock_provider import MockProvider
from sqlprompt.llm_adapter.models import (
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
)

__all__ = [
    "CompletionProvider",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionChoice",
    "CompletionError",
    "CompletionTransportError",
    "CompletionDecodeError",
    "EmptyChoicesError",
    "HTTPCompletionProvider",
    "MockProvider",
    "build_provider",
]
