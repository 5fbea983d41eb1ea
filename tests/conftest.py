from __future__ import annotations

import io
import logging
from unittest.mock import MagicMock

import pytest
from rich.console import Console


def _make_response(*, status_code: int = 200, payload=None, json_error: Exception | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def plain_console(console_buffer: io.StringIO) -> Console:
    return Console(file=console_buffer, width=300, color_system=None, force_terminal=False)


@pytest.fixture
def log_buffer():
    buffer = io.StringIO()
    logger = logging.getLogger("tests.presenter")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    handler = logging.StreamHandler(buffer)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    yield logger, buffer
    logger.removeHandler(handler)


@pytest.fixture
def make_response():
    return _make_response
