import io
import json
from datetime import datetime, timezone

import pytest

from pastebininit.handlers.output_handler import (
    format_error_message,
    format_success_message,
    render_result,
)
from pastebininit.utils.models import UploadFailure, UploadSuccess

TIMESTAMP = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def success():
    return UploadSuccess(
        paste_url="https://pastebin.com/abc123",
        paste_key="abc123",
        raw_url="https://pastebin.com/raw/abc123",
        status_code=200,
        duration_seconds=0.1234,
        timestamp=TIMESTAMP,
        paste_name="t",
        paste_format="text",
        paste_privacy="Public",
        paste_expiration="Never",
        size_bytes=5,
        authenticated=False,
    )


@pytest.fixture
def failure():
    return UploadFailure(
        error="Bad API request, invalid api_dev_key",
        error_type="api",
        status_code=200,
        duration_seconds=0.5,
        timestamp=TIMESTAMP,
    )


def test_success_message_lists_urls(success):
    message = format_success_message(success)

    assert "PASTE UPLOADED SUCCESSFULLY" in message
    assert "https://pastebin.com/abc123" in message
    assert "https://pastebin.com/raw/abc123" in message
    assert "5 bytes" in message
    assert "0.123 seconds" in message


def test_error_message_has_api_key_hint(failure):
    message = format_error_message(failure)

    assert "UPLOAD FAILED" in message
    assert "invalid api_dev_key" in message
    assert "https://pastebin.com/doc_api" in message


def test_transport_error_hint():
    result = UploadFailure(
        error="Request timed out after 30.0s",
        error_type="transport",
        duration_seconds=30.0,
        timestamp=TIMESTAMP,
    )

    message = format_error_message(result)

    assert "Status Code:   N/A" in message
    assert "internet connection" in message


def test_quiet_mode_prints_only_url(success):
    out, err = io.StringIO(), io.StringIO()

    code = render_result(success, "quiet", out=out, err=err)

    assert code == 0
    assert out.getvalue() == "https://pastebin.com/abc123\n"
    assert err.getvalue() == ""


def test_quiet_mode_failure_goes_to_stderr(failure):
    out, err = io.StringIO(), io.StringIO()

    code = render_result(failure, "quiet", out=out, err=err)

    assert code == 1
    assert out.getvalue() == ""
    assert "invalid api_dev_key" in err.getvalue()


def test_json_mode(success):
    out = io.StringIO()

    code = render_result(success, "json", out=out)

    payload = json.loads(out.getvalue())
    assert code == 0
    assert payload["paste_key"] == "abc123"
    assert payload["raw_url"] == "https://pastebin.com/raw/abc123"
    assert payload["size_bytes"] == 5


def test_json_mode_failure_exit_code(failure):
    out = io.StringIO()

    assert render_result(failure, "json", out=out) == 1
    assert json.loads(out.getvalue())["success"] is False
