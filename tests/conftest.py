"""Pytest configuration and fixtures."""

import asyncio
import io

import pytest
from rich.console import Console

from sqlprompt.config import CompletionConfig
from sqlprompt.llm_adapter import (
    CompletionChoice,
    CompletionProvider,
    CompletionRequest,
    CompletionResponse,
)
from sqlprompt.terminal import Terminal


class ScriptedProvider(CompletionProvider):
    """Returns queued responses (or raises queued errors) and records calls."""

    def __init__(self, *outcomes, delay: float = 0.0):
        self._outcomes = list(outcomes)
        self._delay = delay
        self.requests: list[CompletionRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    async def complete(self, request):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            self.requests.append(request)
            if self._delay:
                await asyncio.sleep(self._delay)
            outcome = self._outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        finally:
            self.in_flight -= 1

    async def aclose(self):
        self.closed = True


def make_response(*texts):
    return CompletionResponse(
        id="cmpl-test",
        object="text_completion",
        created=1700000000,
        model="text-davinci-001",
        choices=[
            CompletionChoice(text=text, index=i, finish_reason="stop")
            for i, text in enumerate(texts)
        ],
    )


def make_terminal(*lines):
    stdout = io.StringIO()
    console = Console(file=stdout, width=200, highlight=False)
    stdin = io.StringIO("".join(lines))
    return Terminal(console=console, stdin=stdin), stdout


@pytest.fixture
def cfg():
    return CompletionConfig(api_token="sk-test")


@pytest.fixture
def scripted_provider():
    return ScriptedProvider


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def terminal_factory():
    return make_terminal
