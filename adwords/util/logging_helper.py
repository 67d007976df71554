"""
Logger setup for the SOAP client and the adwords-client command.

The transport logs every request and reply envelope at INFO under
CLIENT_LOGGER; format_payload() keeps those lines readable when an envelope
carries a large base64 media upload.
"""

import logging
import sys
from typing import Optional, TextIO

# Name of the logger the SOAP transport writes envelopes to
CLIENT_LOGGER = 'adwords.soap.client'

# Envelopes longer than this many characters are cut in log lines
PAYLOAD_LOG_LIMIT = 16384

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return the named logger, applying ``level`` when one is given."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def parse_level(name: str, default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant."""
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else default


def format_payload(data: bytes, limit: int = PAYLOAD_LOG_LIMIT) -> str:
    """
    Render a SOAP payload for a log line.

    Bytes that are not UTF-8 are replaced; text past ``limit`` characters is
    dropped and the original size noted.
    """
    text = data.decode('utf-8', errors='replace')
    if len(text) <= limit:
        return text
    return f'{text[:limit]}... [{len(data)} bytes]'


def setup_logging(
    level: int = logging.INFO,
    debug_loggers: Optional[list[str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Send every record at ``level`` or above to one stream handler.

    Args:
        level: Root logger level
        debug_loggers: Logger names lowered to DEBUG, e.g. [CLIENT_LOGGER]
        stream: Handler stream; stderr by default so stdout stays free for
            command output
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Replace rather than add, so repeated calls do not duplicate lines
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name in debug_loggers or ():
        logging.getLogger(name).setLevel(logging.DEBUG)
