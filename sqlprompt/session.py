"""
Completion session loop.

Each iteration reads one line, wraps it with the preamble, sends it to the
provider and prints the first choice. Exactly one request is in flight at
a time; the provider call is the only await in the loop.
"""

from __future__ import annotations

import logging

from sqlprompt.config import CompletionConfig
from sqlprompt.llm_adapter import CompletionError, CompletionProvider, CompletionRequest
from sqlprompt.terminal import Terminal

logger = logging.getLogger(__name__)


class CompletionSession:
    def __init__(
        self,
        cfg: CompletionConfig,
        provider: CompletionProvider,
        terminal: Terminal,
    ) -> None:
        self._cfg = cfg
        self._provider = provider
        self._terminal = terminal
        self._iterations = 0

    @property
    def iterations(self) -> int:
        return self._iterations

    def build_request(self, text: str) -> CompletionRequest:
        return CompletionRequest.build(self._cfg.preamble, text, self._cfg.max_tokens)

    async def run_once(self) -> str:
        """Run a single prompt/response exchange and return the printed text."""
        self._terminal.prompt()
        user_text = self._terminal.read_line()
        self._terminal.blank_line()

        request = self.build_request(user_text)
        self._iterations += 1
        logger.info(
            "Sending prompt #%d",
            self._iterations,
            extra={"_extra": {"prompt_chars": len(request.prompt)}},
        )

        with self._terminal.thinking():
            response = await self._provider.complete(request)
        text = response.first_text()

        self._terminal.blank_line()
        self._terminal.show(text)
        return text

    async def run(self) -> None:
        """
        Repeat run_once until something stops it.

        InputClosedError always propagates. CompletionError propagates
        unless continue_on_error is set, in which case it is reported and
        the next prompt is shown.
        """
        while True:
            try:
                await self.run_once()
            except CompletionError as exc:
                if not self._cfg.continue_on_error:
                    raise
                logger.warning("Exchange #%d failed: %s", self._iterations, exc)
                self._terminal.error(str(exc))
