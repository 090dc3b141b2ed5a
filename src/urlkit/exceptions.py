"""src/urlkit/exceptions.py

urlkit Exceptions hierarchy.
"""


class UrlKitError(Exception):
    """Base exception for all urlkit errors."""


class InvalidUrlError(UrlKitError, ValueError):
    """
    Raised when a URL string is not well formed.
    Carries the original, unsanitized input in ``url``.
    """

    def __init__(self, url: object):
        self.url = url
        if isinstance(url, (bytes, bytearray)):
            url = bytes(url).decode("ascii", errors="replace")
        super().__init__(f"Invalid url: {url}")
