"""
sqlprompt entry point.

Loads configuration (optionally from .env), clears the screen and runs the
completion session until input closes or an exchange fails.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from sqlprompt.config import CompletionConfig, ConfigError
from sqlprompt.llm_adapter import CompletionError, CompletionProvider, build_provider
from sqlprompt.logging.logger import setup_logging
from sqlprompt.session import CompletionSession
from sqlprompt.terminal import InputClosedError, Terminal

SERVICE_NAME = "sqlprompt"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

logger = logging.getLogger(SERVICE_NAME)


async def run_session(
    cfg: CompletionConfig,
    provider: CompletionProvider,
    terminal: Terminal,
) -> int:
    session = CompletionSession(cfg, provider, terminal)
    try:
        await session.run()
    except InputClosedError as exc:
        logger.info("Session closed after %d prompts: %s", session.iterations, exc)
        return EXIT_OK
    except CompletionError as exc:
        logger.error("Session aborted: %s", exc, exc_info=True)
        _report(f"{type(exc).__name__}: {exc}")
        return EXIT_FAILURE
    finally:
        await provider.aclose()


def main(terminal: Terminal | None = None) -> int:
    load_dotenv()

    try:
        cfg = CompletionConfig.from_env()
    except ConfigError as exc:
        setup_logging(SERVICE_NAME)
        logger.error("Configuration error: %s", exc)
        _report(str(exc))
        return EXIT_FAILURE

    setup_logging(SERVICE_NAME, cfg.log_level, cfg.log_file)

    try:
        provider = build_provider(cfg)
    except ValueError as exc:
        _report(str(exc))
        return EXIT_FAILURE

    terminal = terminal or Terminal()
    terminal.clear()
    try:
        return asyncio.run(run_session(cfg, provider, terminal))
    except KeyboardInterrupt:
        logger.info("Interrupted by operator")
        return EXIT_INTERRUPTED


def _report(message: str) -> None:
    Console(stderr=True, highlight=False).print(
        f"[bold red]sqlprompt:[/bold red] {escape(message)}"
    )


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
