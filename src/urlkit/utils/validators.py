"""src/urlkit/utils/validators.py

Sanitization and validation utilities for urlkit.
"""

import logging
import re
import string
from typing import Union
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

ALLOWED_CHARACTERS = frozenset(
    string.ascii_letters + string.digits + "$-_.+!*'(),{}|\\^~[]`<>#%\";/?:@&="
)
MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63
MAX_PORT = 65535

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_LABEL_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?$")
_IPV4_RE = re.compile(r"^\d{1,3}(?:\.\d{1,3}){3}$")


def sanitize_url(url: Union[str, bytes]) -> str:
    """
    Remove every character that is not allowed in a URL.

    Bytes are decoded as ASCII and any byte outside that range is dropped.
    Never raises.
    """
    if isinstance(url, (bytes, bytearray)):
        url = bytes(url).decode("ascii", errors="ignore")

    sanitized = "".join(ch for ch in url if ch in ALLOWED_CHARACTERS)
    if len(sanitized) != len(url):
        logger.debug(
            "Removed %d disallowed character(s) from url", len(url) - len(sanitized)
        )
    return sanitized


def validate_hostname(host: str) -> bool:
    """Check a host against hostname or dotted IPv4 syntax."""
    if not host or len(host) > MAX_HOSTNAME_LENGTH:
        return False

    if _IPV4_RE.match(host):
        return all(int(octet) <= 255 for octet in host.split("."))

    # A single trailing dot marks a fully qualified name
    labels = host[:-1].split(".") if host.endswith(".") else host.split(".")
    return all(
        len(label) <= MAX_LABEL_LENGTH and _LABEL_RE.match(label) for label in labels
    )


def validate_url(url: str) -> bool:
    """
    Check that a URL is well formed.

    A valid URL has a scheme followed by ``://``, a hostname, an optional
    numeric port and no whitespace. IPv6 literals are not supported.
    """
    if not url or any(ch.isspace() for ch in url):
        return False

    if not _SCHEME_RE.match(url):
        return False

    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return False

    if port is not None and not 0 <= port <= MAX_PORT:
        return False

    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        return False
    host = host.partition(":")[0]

    return validate_hostname(host)
