"""src/urlkit/__init__.py

urlkit - A small URL value object for Python.

urlkit parses a URL into its components, lets you read them and change query
parameters, and rebuilds a canonical URL string. It is built entirely on
Python's standard library.

Key Features:
    - Zero external dependencies
    - Lenient sanitization followed by strict validation
    - Ordered, last-write-wins query parameters
    - Fluent parameter updates
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Basic usage::

        from urlkit import Url

        url = Url('https://www.example.com/search?q=python')
        url.param('page', '2').param('q', 'urls')
        print(url.url)  # https://www.example.com/search?q=urls&page=2

    Error handling::

        from urlkit import InvalidUrlError, Url

        try:
            Url('foobar')
        except InvalidUrlError as exc:
            print(exc)  # Invalid url: foobar
"""

import logging

from urlkit.exceptions import InvalidUrlError, UrlKitError
from urlkit.url import Url
from urlkit.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Url",
    "InvalidUrlError",
    "UrlKitError",
    "__version__",
]
