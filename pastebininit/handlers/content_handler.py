# pastebininit/handlers/content_handler.py

import os
import sys
import logging

from pastebininit.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"


def read_paste_content(source, literal_allowed=True, stdin=None):
    """Reads paste content from a file, from stdin ("-"), or takes the text as-is."""
    if source == STDIN_SOURCE:
        logger.debug("Reading paste content from standard input.")
        try:
            return (stdin or sys.stdin).read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Error reading standard input: {e}") from e

    if os.path.isfile(source):
        logger.debug(f"Reading paste content from {source}")
        try:
            with open(source, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Error reading file '{source}': {e}") from e

    if not literal_allowed:
        raise ConfigurationError(f"File not found: {source}")
    return source


def source_title(source):
    """File name to use as the paste title when none is given."""
    if source != STDIN_SOURCE and os.path.isfile(source):
        return os.path.basename(source)
    return None
