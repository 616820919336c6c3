"""
Unit tests for pytspl/__init__.py.

Tests package metadata, logging setup and the public API.
"""

import logging
import logging.handlers
import os
import re
import sys
from pathlib import Path
from unittest import mock

import pytest

import pytspl


class TestVersionMetadata:
    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", pytspl.__version__)

    def test_version_components(self) -> None:
        expected = f"{pytspl.VERSION_MAJOR}.{pytspl.VERSION_MINOR}.{pytspl.VERSION_PATCH}"
        assert pytspl.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for attr in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(pytspl, attr)
            assert isinstance(value, str) and value


class TestPublicAPI:
    def test_all_exports_exist(self) -> None:
        for name in pytspl.__all__:
            assert hasattr(pytspl, name), f"{name} listed in __all__ but missing"

    def test_core_exports(self) -> None:
        for name in ("Label", "ValidationError", "load_config", "get_logger", "bitmap_from_image"):
            assert name in pytspl.__all__


class TestGetLogger:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("pytspl", "pytspl"),
            ("pytspl.label", "pytspl.label"),
            ("__main__", "pytspl.main"),
            ("app.printing", "pytspl.app.printing"),
            (".relative", "pytspl.relative"),
            ("pytspl_other", "pytspl.pytspl_other"),
        ],
    )
    def test_namespacing(self, name: str, expected: str) -> None:
        assert pytspl.get_logger(name).name == expected

    def test_returns_logger(self) -> None:
        assert isinstance(pytspl.get_logger(__name__), logging.Logger)


def _run_setup_logging(env: dict) -> tuple[list[logging.Handler], int]:
    """
    Run _setup_logging() against an empty "pytspl" logger.

    Handlers are swapped out inside the call itself, so anything attached
    to the logger beforehand (including pytest's capture handlers) does not
    short-circuit the setup. Returns the installed handlers and level; the
    logger is restored afterwards.
    """
    root = logging.getLogger("pytspl")
    environ = {k: v for k, v in os.environ.items() if not k.startswith("TSPL_")}
    environ.update(env)
    with (
        mock.patch.dict(os.environ, environ, clear=True),
        mock.patch.object(root, "handlers", []),
        mock.patch.object(root, "level", root.level),
        mock.patch.object(root, "propagate", root.propagate),
    ):
        pytspl._setup_logging()
        handlers = list(root.handlers)
        level = root.level
    for handler in handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    return handlers, level


class TestSetupLogging:
    def test_package_logger_configured_on_import(self) -> None:
        root = logging.getLogger("pytspl")
        assert root.handlers
        assert root.propagate is False

    def test_idempotent(self) -> None:
        root = logging.getLogger("pytspl")
        before = len(root.handlers)
        pytspl._setup_logging()
        pytspl._setup_logging()
        assert len(root.handlers) == before

    def test_level_from_env(self) -> None:
        _, level = _run_setup_logging({"TSPL_LOG_LEVEL": "debug"})
        assert level == logging.DEBUG

    def test_default_level_is_warning(self) -> None:
        _, level = _run_setup_logging({})
        assert level == logging.WARNING

    def test_unknown_level_defaults_to_warning(self) -> None:
        _, level = _run_setup_logging({"TSPL_LOG_LEVEL": "chatty"})
        assert level == logging.WARNING

    def test_console_handler_uses_stderr(self) -> None:
        handlers, _ = _run_setup_logging({})
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_file_handler_when_requested(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "pytspl.log"
        handlers, _ = _run_setup_logging({"TSPL_LOG_FILE": str(log_file)})

        file_handlers = [h for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == log_file
        assert log_file.parent.is_dir()

    def test_setup_leaves_logger_untouched_after_restore(self) -> None:
        root = logging.getLogger("pytspl")
        before = list(root.handlers)
        _run_setup_logging({"TSPL_LOG_LEVEL": "DEBUG"})
        assert root.handlers == before
