import logging

import pytest

import accname.config as accname_config
from accname.config import AccNameConfig, configure_logging, load_config

ENV_VARS = ("ACCNAME_REGISTRY_DIR", "ACCNAME_HTML_PARSER", "ACCNAME_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so teardown restores whatever load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(accname_config, "_ENV_LOADED", True)


@pytest.fixture
def restore_logger_level():
    logger = logging.getLogger("accname")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_defaults():
    cfg = load_config()
    assert cfg == AccNameConfig()
    assert cfg.registry_dir is None
    assert cfg.html_parser == "html.parser"
    assert cfg.log_level == "WARNING"


def test_loads_from_env(monkeypatch):
    monkeypatch.setenv("ACCNAME_REGISTRY_DIR", " /srv/roles ")
    monkeypatch.setenv("ACCNAME_HTML_PARSER", "lxml")
    monkeypatch.setenv("ACCNAME_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.registry_dir == "/srv/roles"
    assert cfg.html_parser == "lxml"
    assert cfg.log_level == "DEBUG"


def test_blank_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("ACCNAME_REGISTRY_DIR", "   ")
    monkeypatch.setenv("ACCNAME_HTML_PARSER", "")
    cfg = load_config()
    assert cfg.registry_dir is None
    assert cfg.html_parser == "html.parser"


def test_overrides_precedence(monkeypatch):
    monkeypatch.setenv("ACCNAME_HTML_PARSER", "lxml")
    cfg = load_config(html_parser="html5lib", log_level="info")
    assert cfg.html_parser == "html5lib"
    assert cfg.log_level == "INFO"
    updated = cfg.with_overrides(registry_dir="/tmp/roles")
    assert isinstance(updated, AccNameConfig)
    assert updated.registry_dir == "/tmp/roles"
    assert updated.html_parser == "html5lib"


def test_with_overrides_empty_registry_dir_resets():
    cfg = AccNameConfig(registry_dir="/tmp/roles")
    assert cfg.with_overrides(registry_dir="").registry_dir is None
    assert cfg.with_overrides().registry_dir == "/tmp/roles"
    assert cfg.with_overrides(log_level="error").log_level == "ERROR"


def test_loads_from_dotenv(tmp_path, monkeypatch):
    env_path = tmp_path / ".env"
    env_path.write_text("ACCNAME_LOG_LEVEL=error\nACCNAME_REGISTRY_DIR=/data/roles\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(accname_config, "_ENV_LOADED", False)
    cfg = load_config()
    assert cfg.log_level == "ERROR"
    assert cfg.registry_dir == "/data/roles"


def test_dotenv_is_read_once(monkeypatch):
    calls = []
    monkeypatch.setattr(accname_config, "_ENV_LOADED", False)
    monkeypatch.setattr(accname_config, "load_dotenv", lambda *a, **k: calls.append(k) or False)
    load_config()
    load_config()
    assert len(calls) == 1


def test_configure_logging_sets_level(restore_logger_level):
    logger = configure_logging(AccNameConfig(log_level="DEBUG"))
    assert logger is restore_logger_level
    assert logger.level == logging.DEBUG


def test_configure_logging_unknown_level(restore_logger_level, caplog):
    with caplog.at_level(logging.WARNING, logger="accname"):
        logger = configure_logging(AccNameConfig(log_level="LOUD"))
        assert logger.level == logging.WARNING
    assert "Unknown ACCNAME_LOG_LEVEL 'LOUD'" in caplog.text


def test_configure_logging_reads_env(monkeypatch, restore_logger_level):
    monkeypatch.setenv("ACCNAME_LOG_LEVEL", "info")
    assert configure_logging().level == logging.INFO
