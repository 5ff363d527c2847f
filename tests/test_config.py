import logging

from cronfields.config import LOG_LEVEL_ENV, get_log_level


def test_default_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert get_log_level() == logging.WARNING


def test_env_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    assert get_log_level() == logging.INFO


def test_invalid_env_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert get_log_level() == logging.WARNING


def test_verbose_wins(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert get_log_level(verbose=True) == logging.DEBUG
