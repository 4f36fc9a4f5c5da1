"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from resolve_path import Resolver, ResolverConfig
from resolve_path.utils.logging import get_logger, setup_logging


def test_get_logger_namespaces_module_names():
    assert get_logger("resolve_path.resolver").name == "resolve_path.resolver"
    assert get_logger("plugins").name == "resolve_path.plugins"
    assert get_logger().name == "resolve_path"


def test_setup_logging_only_once(tmp_path):
    log_file = tmp_path / "logs" / "resolve.log"
    logger = setup_logging(logging.DEBUG, log_file=log_file, module_name="resolve_path.test_once")
    again = setup_logging(module_name="resolve_path.test_once")

    assert again is logger
    assert len(logger.handlers) == 2
    assert any(isinstance(h, RichHandler) for h in logger.handlers)
    assert log_file.parent.is_dir()

    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


@pytest.mark.posix
def test_absorbed_stat_error_is_logged(caplog):
    def query(path):
        raise PermissionError(13, "Permission denied", str(path))

    resolver = Resolver(ResolverConfig.from_home("/home/test", stat=query))
    with caplog.at_level(logging.DEBUG, logger="resolve_path"):
        resolver.resolve_in("x", "/root/secret")

    assert any("/root/secret" in r.getMessage() for r in caplog.records)


def test_setup_logging_accepts_str_path_and_level_name(tmp_path):
    log_file = tmp_path / "nested" / "debug.log"
    logger = setup_logging("debug", log_file=str(log_file), module_name="str_inputs")

    assert logger.name == "resolve_path.str_inputs"
    assert logger.level == logging.DEBUG
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("chatty", module_name="bad_level")
