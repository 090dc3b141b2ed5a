"""src/urlkit/utils/__init__.py

Helpers shared by urlkit modules.
"""

from .string_buffer import StringBuffer
from .validators import sanitize_url, validate_hostname, validate_url

__all__ = ["StringBuffer", "sanitize_url", "validate_hostname", "validate_url"]
