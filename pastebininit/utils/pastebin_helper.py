# pastebininit/utils/pastebin_helper.py

import re
import logging
import time
from datetime import datetime, timezone

import requests
from pydantic import ValidationError

from pastebininit.utils.authentication import BAD_REQUEST_MARKER, login_to_pastebin
from pastebininit.utils.errors import (
    APIError,
    ConfigurationError,
    TransportError,
    UnexpectedResponseError,
)
from pastebininit.utils.models import (
    Credentials,
    Privacy,
    UploadFailure,
    UploadSuccess,
)

logger = logging.getLogger(__name__)

POST_URL = "https://pastebin.com/api/api_post.php"
RAW_URL_TEMPLATE = "https://pastebin.com/raw/{paste_key}"
DEFAULT_TIMEOUT = 30

PASTE_URL_PATTERN = re.compile(r"^https?://\S+/([A-Za-z0-9]+)$")

FORMAT_MAP = {
    'text': '0', 'python': '1', 'bash': '2', 'c': '3', 'cpp': '4',
    'javascript': '5', 'java': '6', 'php': '7', 'html': '8', 'sql': '9',
    'css': '10', 'json': '11', 'yaml': '12', 'xml': '13', 'markdown': '14',
    'ruby': '15', 'go': '16', 'rust': '17', 'typescript': '18', 'lua': '19',
    'kotlin': '20', 'swift': '21', 'csharp': '22', 'r': '23', 'perl': '24',
}


def resolve_format(format_name):
    """Maps a language name to its API format code; unknown names pass through."""
    return FORMAT_MAP.get(format_name.lower(), format_name)


class PasteUploader:
    """Uploads pastes to Pastebin, optionally on behalf of a logged-in user."""

    def __init__(self, api_dev_key, session=None, timeout=DEFAULT_TIMEOUT):
        """
        Args:
            api_dev_key: Pastebin developer key, or a ready-made Credentials value.
            session: requests.Session used for every call. A new one is created if omitted.
            timeout: Seconds to wait for each HTTP call.
        """
        if isinstance(api_dev_key, Credentials):
            credentials = api_dev_key
        else:
            try:
                credentials = Credentials(api_dev_key=api_dev_key or "")
            except ValidationError as e:
                raise ConfigurationError(f"Invalid API developer key: {api_dev_key!r}") from e
        if not credentials.api_dev_key:
            raise ConfigurationError(
                "API developer key is required. Get one from https://pastebin.com/doc_api"
            )

        self.credentials = credentials
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def authenticated(self):
        return self.credentials.authenticated

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def login(self, username, password):
        """Obtains a session key so later pastes are owned by the user."""
        result = login_to_pastebin(
            self.session, self.credentials.api_dev_key, username, password, self.timeout
        )
        if result.success:
            self.credentials = self.credentials.model_copy(update={"user_key": result.user_key})
        return result

    def build_payload(self, request):
        """Builds the form fields for an api_option=paste call."""
        data = {
            'api_option': 'paste',
            'api_dev_key': self.credentials.api_dev_key,
            'api_paste_code': request.content,
            'api_paste_private': request.privacy.value,
            'api_paste_expire_date': request.expiration.value,
            'api_paste_format': resolve_format(request.syntax_format),
        }
        if request.title:
            data['api_paste_name'] = request.title
        if self.credentials.user_key:
            data['api_user_key'] = self.credentials.user_key
        return data

    def _post_paste(self, data):
        """Sends the paste form and returns (status_code, paste_url)."""
        try:
            response = self.session.post(POST_URL, data=data, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        body = response.text.strip()
        if response.status_code != 200 or body.startswith(BAD_REQUEST_MARKER):
            raise APIError(body or f"HTTP {response.status_code}", response.status_code)
        if not PASTE_URL_PATTERN.match(body):
            raise UnexpectedResponseError(
                f"Unexpected response from Pastebin: {body[:80]!r}", response.status_code
            )
        return response.status_code, body

    def create_paste(self, request):
        """Creates a paste and returns an UploadSuccess or UploadFailure."""
        if not request.content.strip():
            raise ConfigurationError("Paste content is empty.")
        if request.privacy is Privacy.PRIVATE and not self.authenticated:
            raise ConfigurationError(
                "Private pastes require logging in with a Pastebin username and password."
            )

        data = self.build_payload(request)
        logger.debug(
            f"Uploading {request.size_bytes} bytes "
            f"(format={data['api_paste_format']}, privacy={request.privacy.label}, "
            f"expiration={request.expiration.value})"
        )

        start = time.perf_counter()
        try:
            status_code, paste_url = self._post_paste(data)
        except TransportError as e:
            logger.error(f"Could not reach Pastebin: {e}")
            return self._failure(str(e), "transport", None, start)
        except APIError as e:
            logger.error(f"Pastebin rejected the paste: {e}")
            return self._failure(str(e), "api", e.status_code, start)
        except UnexpectedResponseError as e:
            logger.error(str(e))
            return self._failure(str(e), "unexpected_response", e.status_code, start)

        paste_key = paste_url.rsplit('/', 1)[-1]
        logger.info(f"Paste uploaded: {paste_url}")
        return UploadSuccess(
            paste_url=paste_url,
            paste_key=paste_key,
            raw_url=RAW_URL_TEMPLATE.format(paste_key=paste_key),
            status_code=status_code,
            duration_seconds=time.perf_counter() - start,
            timestamp=datetime.now(timezone.utc),
            paste_name=request.title or 'Untitled',
            paste_format=request.syntax_format,
            paste_privacy=request.privacy.label,
            paste_expiration=request.expiration.label,
            size_bytes=request.size_bytes,
            authenticated=self.authenticated,
        )

    @staticmethod
    def _failure(message, error_type, status_code, start):
        return UploadFailure(
            error=message,
            error_type=error_type,
            status_code=status_code,
            duration_seconds=time.perf_counter() - start,
            timestamp=datetime.now(timezone.utc),
        )
