"""Tests for CompletionConfig.from_env."""

import pytest

from sqlprompt.config import (
    DEFAULT_ENDPOINT_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_PREAMBLE,
    CompletionConfig,
    ConfigError,
)


class TestFromEnv:
    def test_defaults(self):
        cfg = CompletionConfig.from_env({"OAI_TOKEN": "sk-abc"})

        assert cfg.api_token == "sk-abc"
        assert cfg.endpoint_url == DEFAULT_ENDPOINT_URL
        assert cfg.preamble == DEFAULT_PREAMBLE
        assert cfg.max_tokens == DEFAULT_MAX_TOKENS == 1000
        assert cfg.provider == "http"
        assert cfg.request_timeout is None
        assert cfg.continue_on_error is False
        assert cfg.log_file is None

    def test_missing_token_raises(self):
        with pytest.raises(ConfigError, match="OAI_TOKEN"):
            CompletionConfig.from_env({})

    def test_blank_token_raises(self):
        with pytest.raises(ConfigError):
            CompletionConfig.from_env({"OAI_TOKEN": "   "})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("OAI_TOKEN", "sk-from-env")
        monkeypatch.setenv("LLM_PROVIDER", "MOCK")

        cfg = CompletionConfig.from_env()

        assert cfg.api_token == "sk-from-env"
        assert cfg.provider == "mock"

    def test_overrides(self):
        cfg = CompletionConfig.from_env(
            {
                "OAI_TOKEN": "sk-abc",
                "COMPLETION_URL": "https://example.test/v1/completions",
                "MAX_TOKENS": "64",
                "LLM_REQUEST_TIMEOUT": "2.5",
                "CONTINUE_ON_ERROR": "yes",
                "LOG_LEVEL": "debug",
                "LOG_FILE": "/tmp/sqlprompt.log",
            }
        )

        assert cfg.endpoint_url == "https://example.test/v1/completions"
        assert cfg.max_tokens == 64
        assert cfg.request_timeout == 2.5
        assert cfg.continue_on_error is True
        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == "/tmp/sqlprompt.log"

    @pytest.mark.parametrize("raw", ["abc", "0", "-5"])
    def test_bad_max_tokens(self, raw):
        with pytest.raises(ConfigError, match="MAX_TOKENS"):
            CompletionConfig.from_env({"OAI_TOKEN": "sk-abc", "MAX_TOKENS": raw})

    @pytest.mark.parametrize("raw", ["soon", "nan", "inf", "-inf", "0"])
    def test_bad_timeout(self, raw):
        with pytest.raises(ConfigError, match="LLM_REQUEST_TIMEOUT"):
            CompletionConfig.from_env({"OAI_TOKEN": "sk-abc", "LLM_REQUEST_TIMEOUT": raw})

    def test_base_url(self):
        cfg = CompletionConfig.from_env(
            {"OAI_TOKEN": "sk-abc", "LLM_BASE_URL": "http://localhost:11434/v1"}
        )
        assert cfg.base_url == "http://localhost:11434/v1"
        assert CompletionConfig.from_env({"OAI_TOKEN": "sk-abc"}).base_url is None


class TestAuthHeader:
    def test_exact_bearer_form(self):
        cfg = CompletionConfig(api_token="sk-abc123")
        assert cfg.auth_header == "Bearer sk-abc123"

    def test_token_whitespace_is_stripped_from_env(self):
        cfg = CompletionConfig.from_env({"OAI_TOKEN": "  sk-abc123\n"})
        assert cfg.auth_header == "Bearer sk-abc123"
