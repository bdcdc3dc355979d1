"""Tests for env parsing in config."""
import logging

import pytest

from token_cache import config


def test_timeout_default_when_unset(monkeypatch):
    monkeypatch.delenv("TOKEN_CACHE_HTTP_TIMEOUT", raising=False)
    assert config.float_from_env("TOKEN_CACHE_HTTP_TIMEOUT", 10.0) == 10.0


def test_timeout_parsed(monkeypatch):
    monkeypatch.setenv("TOKEN_CACHE_HTTP_TIMEOUT", " 2.5 ")
    assert config.float_from_env("TOKEN_CACHE_HTTP_TIMEOUT", 10.0) == 2.5


@pytest.mark.parametrize("raw", ["ten", "0", "-3", "nan"])
def test_bad_timeout_falls_back_with_warning(monkeypatch, caplog, raw):
    monkeypatch.setenv("TOKEN_CACHE_HTTP_TIMEOUT", raw)
    with caplog.at_level(logging.WARNING, logger="token_cache.config"):
        assert config.float_from_env("TOKEN_CACHE_HTTP_TIMEOUT", 10.0) == 10.0
    assert "TOKEN_CACHE_HTTP_TIMEOUT" in caplog.text
