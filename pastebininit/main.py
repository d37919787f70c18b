# pastebininit/main.py

import sys
import argparse
import logging
from logging.handlers import RotatingFileHandler

from pydantic import ValidationError

from pastebininit.config.config import load_config
from pastebininit.handlers.content_handler import read_paste_content, source_title
from pastebininit.handlers.output_handler import render_result
from pastebininit.utils.authentication import credentials_from_env
from pastebininit.utils.errors import ConfigurationError
from pastebininit.utils.models import Expiration, Privacy, UploadRequest
from pastebininit.utils.pastebin_helper import PasteUploader

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

EPILOG = '''
API key:
  Get your free API key from: https://pastebin.com/doc_api
  It can also be set with the PASTEBIN_API_KEY environment variable.

Examples:
  %(prog)s -f myfile.txt
  %(prog)s --content "Hello World" --name "Test" --format python
  %(prog)s -f file.txt -u myuser --password mypass -p 2
  %(prog)s -f data.txt -e 1H
  some_command | %(prog)s -f - --quiet

Formats: text, python, javascript, java, bash, json, sql, html, css, markdown,
yaml, xml, c, cpp, php, ruby, go, rust, and more

Privacy: 0=Public, 1=Unlisted, 2=Private (requires authentication)

Expiration: N=Never, 10M, 1H, 1D, 1W, 2W, 1M, 6M, 1Y
'''


def configure_logging(verbose=False, log_file=None):
    """Sends log records to stderr and, if requested, to a rotating log file."""
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(formatter)
    handlers = [console]

    log_file_error = None
    if log_file:
        try:
            file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
        except (OSError, TypeError) as e:
            log_file_error = e
        else:
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

    # force replaces handlers left over from an earlier call in the same process
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    if log_file_error:
        logger.warning(f"Cannot write log file {log_file}: {log_file_error}. Logging to stderr only.")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pastebininit',
        description='Upload pastes to Pastebin.com using the official API',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-c', '--content', help='File path or direct text to paste ("-" for stdin)')
    source.add_argument('-f', '--file', help='File to paste ("-" for stdin)')

    parser.add_argument('-a', '--api-key', help='Pastebin API developer key')
    parser.add_argument('-n', '--name', help='Paste title/name')
    parser.add_argument('-l', '--format', help='Syntax highlighting format (default: text)')
    parser.add_argument(
        '-p', '--privacy',
        choices=[p.value for p in Privacy],
        help='Privacy level: 0=Public, 1=Unlisted, 2=Private (default: 0)'
    )
    parser.add_argument(
        '-e', '--expiration',
        choices=[e.value for e in Expiration],
        help='Expiration time (default: N for Never)'
    )

    parser.add_argument('-u', '--username', help='Pastebin username (for private pastes)')
    parser.add_argument('--password', help='Pastebin password (for private pastes)')

    parser.add_argument('--timeout', type=float, help='Seconds to wait for Pastebin (default: 30)')
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--log-file', help='Write a rotating debug log to this file')

    output = parser.add_mutually_exclusive_group()
    output.add_argument('--json', action='store_true', help='Output result as JSON')
    output.add_argument('-q', '--quiet', action='store_true', help='Minimal output (URL only on success)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging')
    return parser


def read_timeout(flag_value, config_value):
    value = flag_value if flag_value is not None else config_value
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid timeout: {value!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")
    return timeout


def build_request(args, config):
    """Turns parsed arguments and config defaults into a single UploadRequest."""
    if args.file is not None:
        source = args.file
        content = read_paste_content(source, literal_allowed=False)
    else:
        source = args.content
        content = read_paste_content(source)

    if not content.strip():
        raise ConfigurationError("Paste content is empty")

    try:
        privacy = Privacy(str(args.privacy or config["privacy"]))
        expiration = Expiration(str(args.expiration or config["expiration"]))
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration value: {e}") from e

    try:
        return UploadRequest(
            content=content,
            title=args.name or source_title(source),
            syntax_format=args.format or config["format"],
            privacy=privacy,
            expiration=expiration,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration value: {e}") from e


def main(argv=None):
    """Runs the CLI and returns the process exit code."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(args.verbose, args.log_file or config["log_file"])
    env = credentials_from_env()

    def status(message):
        if not (args.quiet or args.json):
            print(f"ℹ {message}", file=sys.stderr)

    try:
        timeout = read_timeout(args.timeout, config["timeout"])
        api_key = args.api_key or env["api_dev_key"] or config["api_dev_key"]
        request = build_request(args, config)
        uploader = PasteUploader(api_key, timeout=timeout)
    except ConfigurationError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    with uploader:
        status("Preparing upload...")
        username = args.username or env["username"]
        password = args.password or env["password"]
        if username and password:
            status("Authenticating...")
            auth_result = uploader.login(username, password)
            if not auth_result.success and not args.quiet:
                print(f"⚠ Authentication failed: {auth_result.error}", file=sys.stderr)
        elif username or password:
            logger.warning("Both username and password are needed to log in; continuing anonymously.")

        status("Uploading to Pastebin...")
        try:
            result = uploader.create_paste(request)
        except ConfigurationError as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            return 1

    if args.json:
        mode = "json"
    elif args.quiet:
        mode = "quiet"
    else:
        mode = "plain"
    return render_result(result, mode)


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
