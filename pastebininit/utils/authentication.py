# pastebininit/utils/authentication.py

import os
import re
import logging
import time
from datetime import datetime, timezone

import requests

from pastebininit.utils.errors import (
    APIError,
    ConfigurationError,
    TransportError,
    UnexpectedResponseError,
)
from pastebininit.utils.models import AuthResult

logger = logging.getLogger(__name__)

LOGIN_URL = "https://pastebin.com/api/api_login.php"
BAD_REQUEST_MARKER = "Bad API request"

# Session keys are opaque alphanumeric tokens
USER_KEY_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


def credentials_from_env():
    """Reads the Pastebin credentials from the environment."""
    return {
        "api_dev_key": os.getenv("PASTEBIN_API_KEY"),
        "username": os.getenv("PASTEBIN_USERNAME"),
        "password": os.getenv("PASTEBIN_PASSWORD"),
    }


def request_user_key(session, api_dev_key, username, password, timeout):
    """Posts the login form and returns the session key, raising on any failure."""
    payload = {
        'api_dev_key': api_dev_key,
        'api_user_name': username,
        'api_user_password': password
    }
    try:
        response = session.post(LOGIN_URL, data=payload, timeout=timeout)
    except requests.exceptions.Timeout as e:
        raise TransportError(f"Request timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Request failed: {e}") from e

    body = response.text.strip()
    if response.status_code != 200 or body.startswith(BAD_REQUEST_MARKER):
        raise APIError(body or f"HTTP {response.status_code}", response.status_code)
    if not USER_KEY_PATTERN.match(body):
        raise UnexpectedResponseError(
            f"Unexpected login response: {body[:80]!r}", response.status_code
        )
    return body


def login_to_pastebin(session, api_dev_key, username, password, timeout=30):
    """Logs in to Pastebin and wraps the outcome in an AuthResult."""
    if not username or not password:
        raise ConfigurationError("Both username and password are required to log in.")

    start = time.perf_counter()
    try:
        user_key = request_user_key(session, api_dev_key, username, password, timeout)
    except (TransportError, APIError, UnexpectedResponseError) as e:
        logger.error(f"Failed to log in to Pastebin as {username}: {e}")
        return AuthResult(
            success=False,
            error=str(e),
            duration_seconds=time.perf_counter() - start,
            timestamp=datetime.now(timezone.utc),
        )

    logger.info(f"Logged in to Pastebin as {username}.")
    return AuthResult(
        success=True,
        user_key=user_key,
        duration_seconds=time.perf_counter() - start,
        timestamp=datetime.now(timezone.utc),
    )
