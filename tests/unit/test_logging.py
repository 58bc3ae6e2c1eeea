"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest

from refine_client.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_verbose_enables_debug():
    configure_logging(verbose=True)
    assert logging.getLogger("refine_client").level == logging.DEBUG


def test_default_is_warning():
    configure_logging()
    assert logging.getLogger("refine_client").level == logging.WARNING


def test_json_lines(capsys: pytest.CaptureFixture[str]):
    configure_logging(verbose=True, log_json=True)
    logging.getLogger("refine_client.client.refine").debug("GET %s", "http://localhost:3333/x")
    err = capsys.readouterr().err
    assert '"event": "GET http://localhost:3333/x"' in err
    assert '"level": "debug"' in err


def test_extra_fields_become_keys(capsys: pytest.CaptureFixture[str]):
    configure_logging(verbose=True, log_json=True)
    logging.getLogger("refine_client.client.refine").debug(
        "refine.response", extra={"url": "http://localhost:3333/x", "status": 200},
    )
    err = capsys.readouterr().err
    assert '"event": "refine.response"' in err
    assert '"status": 200' in err
