"""src/urlkit/url.py

URL value object: parse, read, change query parameters and rebuild.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlsplit

from urlkit.exceptions import InvalidUrlError
from urlkit.query import build_query, parse_query
from urlkit.utils.string_buffer import StringBuffer
from urlkit.utils.validators import sanitize_url, validate_url

__all__ = [
    "Url",
    "PROTOCOL_HTTP",
    "PROTOCOL_HTTPS",
    "COMPONENT_PROTOCOL",
    "COMPONENT_HOST",
    "COMPONENT_PORT",
    "COMPONENT_USER",
    "COMPONENT_PASS",
    "COMPONENT_PATH",
    "COMPONENT_QUERY",
    "COMPONENT_FRAGMENT",
]

logger = logging.getLogger(__name__)

PROTOCOL_HTTP = "http"
PROTOCOL_HTTPS = "https"

COMPONENT_PROTOCOL = "scheme"
COMPONENT_HOST = "host"
COMPONENT_PORT = "port"
COMPONENT_USER = "user"
COMPONENT_PASS = "pass"
COMPONENT_PATH = "path"
COMPONENT_QUERY = "query"
COMPONENT_FRAGMENT = "fragment"

_COMPONENT_ATTRS = {
    COMPONENT_PROTOCOL: "_protocol",
    COMPONENT_HOST: "_host",
    COMPONENT_PORT: "_port",
    COMPONENT_USER: "_user",
    COMPONENT_PASS: "_pass",
    COMPONENT_PATH: "_path",
    COMPONENT_QUERY: "_query",
    COMPONENT_FRAGMENT: "_fragment",
}


class Url:
    """
    A parsed URL whose query parameters can be changed.

    Constructed without input the Url is empty and every component is
    ``None``. Constructed with input it is sanitized, validated and split into
    components; an invalid URL raises :class:`InvalidUrlError` and no object
    is produced.

    :meth:`param` is the only mutating operation. It rewrites ``query`` from
    the ordered parameters and rebuilds ``url`` from all components.
    """

    PROTOCOL_HTTP = PROTOCOL_HTTP
    PROTOCOL_HTTPS = PROTOCOL_HTTPS

    __slots__ = (
        "_url",
        "_protocol",
        "_host",
        "_port",
        "_user",
        "_pass",
        "_path",
        "_query",
        "_fragment",
        "_params",
    )

    def __init__(self, url: Optional[Union[str, bytes]] = None):
        self._url: Optional[str] = None
        self._protocol: Optional[str] = None
        self._host: Optional[str] = None
        self._port: Optional[int] = None
        self._user: Optional[str] = None
        self._pass: Optional[str] = None
        self._path: Optional[str] = None
        self._query: Optional[str] = None
        self._fragment: Optional[str] = None
        self._params: Dict[str, str] = {}

        if url is not None:
            sanitized = sanitize_url(url)
            if not validate_url(sanitized):
                raise InvalidUrlError(url)
            self._parse(sanitized)
            self._url = sanitized

    @classmethod
    def create(cls, url: Optional[Union[str, bytes]] = None) -> "Url":
        """Build a Url; same as calling the class."""
        return cls(url)

    def _parse(self, url: str) -> None:
        parts = urlsplit(url)

        # urlsplit reports absent and empty components alike as ""
        head, hash_mark, fragment = url.partition("#")
        _, question_mark, query = head.partition("?")

        userinfo, at_sign, hostport = parts.netloc.rpartition("@")
        if at_sign:
            user, colon, password = userinfo.partition(":")
            self._user = user
            self._pass = password if colon else None

        self._protocol = parts.scheme
        self._host = hostport.partition(":")[0]
        self._port = parts.port
        self._path = parts.path or None
        self._query = query if question_mark else None
        self._fragment = fragment if hash_mark else None

        if self._query:
            self._params = parse_query(self._query)
            self._rebuild_query()

        logger.debug(
            "Parsed url %s (host=%s, %d param(s))", url, self._host, len(self._params)
        )

    def _rebuild(self) -> None:
        self._rebuild_query()
        if self._protocol is None:
            # Nothing to assemble on an empty Url
            return
        self._rebuild_url()

    def _rebuild_query(self) -> None:
        self._query = build_query(self._params)

    def _rebuild_url(self) -> None:
        userinfo = None
        if self._user is not None:
            userinfo = self._user
            if self._pass is not None:
                userinfo = f"{userinfo}:{self._pass}"
            userinfo += "@"

        buffer = (
            StringBuffer.create(self._protocol)
            .append("://")
            .append_if(userinfo is not None, userinfo)
            .append(self._host)
            .append_if(self._port is not None, f":{self._port}")
            .append_if(self._path is not None, self._path)
            .append_if(bool(self._query), f"?{self._query}")
            .append_if(self._fragment is not None, f"#{self._fragment}")
        )

        self._url = buffer.to_string()
        logger.debug("Rebuilt url %s", self._url)

    @property
    def url(self) -> Optional[str]:
        """Canonical URL string, ``None`` for an empty Url."""
        return self._url

    @property
    def protocol(self) -> Optional[str]:
        return self._protocol

    @property
    def host(self) -> Optional[str]:
        return self._host

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def user(self) -> Optional[str]:
        return self._user

    @property
    def password(self) -> Optional[str]:
        return self._pass

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def query(self) -> Optional[str]:
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    @property
    def params(self) -> Mapping[str, str]:
        """Read-only view of the decoded query parameters, in order."""
        return MappingProxyType(self._params)

    def component(self, name: str) -> Any:
        """
        Get a component by its name.

        Args:
            name: One of the ``COMPONENT_*`` constants.

        Returns:
            The component value, or ``None`` if it is not set.

        Raises:
            KeyError: If ``name`` is not a known component.
        """
        return getattr(self, _COMPONENT_ATTRS[name])

    def components(self) -> Dict[str, Any]:
        """Snapshot of every component keyed by component name."""
        return {name: getattr(self, attr) for name, attr in _COMPONENT_ATTRS.items()}

    def has_param(self, key: str) -> bool:
        return key in self._params

    def get_param(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a query parameter value, or ``default`` if it is not set."""
        return self._params.get(key, default)

    def param(self, key: str, value: Any) -> "Url":
        """
        Set a query parameter and rebuild the URL.

        An existing key keeps its position; a new key is appended. The value
        is stored as a string.

        Returns:
            This Url, so calls can be chained.
        """
        self._params[key] = str(value)
        self._rebuild()
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __str__(self) -> str:
        return self._url or ""

    def __repr__(self) -> str:
        return f"<Url {self._url!r}>"
