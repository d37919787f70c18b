import logging
from unittest.mock import MagicMock

import pytest
import requests


def make_response(text, status_code=200):
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    return response


@pytest.fixture
def session():
    mock_session = MagicMock(spec=requests.Session)
    mock_session.post.return_value = make_response("https://pastebin.com/abc123")
    return mock_session


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("PASTEBIN_API_KEY", "PASTEBIN_USERNAME", "PASTEBIN_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PASTEBININIT_CONFIG", str(tmp_path / "missing.json"))


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
