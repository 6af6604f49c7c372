from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path

from user_directory_api.app.core.logging_config import quiet_server_access_log, setup_logging


@contextmanager
def bare_root_logger():
    # Used inside the test body: pytest attaches its capture handlers to the
    # root logger only once the call phase has started.
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_installs_handlers_once(tmp_path: Path) -> None:
    logfile = tmp_path / "usuarios.log"

    with bare_root_logger() as root:
        assert setup_logging("debug", str(logfile)) is True
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        assert setup_logging("error") is False
        assert root.level == logging.DEBUG

        logging.getLogger("usuarios.prueba").info("hola")
        for handler in root.handlers:
            handler.flush()

    assert "[INFO] usuarios.prueba: hola" in logfile.read_text(encoding="utf-8")


def test_setup_logging_skips_configured_root() -> None:
    root = logging.getLogger()
    before = root.handlers[:]

    assert root.handlers
    assert setup_logging("debug") is False
    assert root.handlers == before


def test_unknown_level_falls_back_to_info() -> None:
    with bare_root_logger() as root:
        setup_logging("verbose")
        assert root.level == logging.INFO


def test_quiet_server_access_log() -> None:
    access = logging.getLogger("uvicorn.access")
    previous = access.level
    try:
        quiet_server_access_log()
        assert access.level == logging.WARNING
    finally:
        access.setLevel(previous)
