"""src/urlkit/query.py

Query string decoding and encoding for the flat ``key=value`` form.
"""

from typing import Dict, Mapping
from urllib.parse import parse_qsl, urlencode

__all__ = ["parse_query", "build_query"]


def parse_query(query: str) -> Dict[str, str]:
    """
    Decode a query string into an ordered mapping.

    Keys and values are URL-decoded (``+`` means space). Escapes that are not
    valid UTF-8 decode to U+FFFD. A repeated key keeps its first position but
    takes the value of its last occurrence. Pairs without ``=`` map to an
    empty string.

    Args:
        query: Raw query string, without the leading ``?``.

    Returns:
        Dict of decoded parameters in first-seen order.
    """
    params: Dict[str, str] = {}
    if not query:
        return params

    for key, value in parse_qsl(query, keep_blank_values=True):
        params[key] = value
    return params


def build_query(params: Mapping[str, str]) -> str:
    """Encode parameters as ``key=value`` pairs joined by ``&``, in order."""
    return urlencode([(str(key), str(value)) for key, value in params.items()])
