"""Minimal HTTP request value that the signer reads and fills in."""

from typing import Dict, Iterator, Mapping, MutableMapping, Optional, Tuple, Union
from urllib.parse import urlsplit

from .exceptions import MalformedHeaderValueError

Body = Union[str, bytes]


def validate_header_value(name: str, value: str) -> str:
    """Return ``value`` if it can be sent as an HTTP header value.

    Visible ASCII, space and tab are accepted. Anything else (CR, LF, other
    control characters, non-ASCII) raises MalformedHeaderValueError.
    """
    for ch in value:
        if ch != '\t' and not (' ' <= ch <= '~'):
            raise MalformedHeaderValueError(name, value)
    return value


class HeaderMap(MutableMapping[str, str]):
    """Case-insensitive header mapping that remembers the original name casing."""

    def __init__(self, headers: Optional[Mapping[str, str]] = None) -> None:
        self._store: Dict[str, Tuple[str, str]] = {}
        if headers:
            self.update(headers)

    def __setitem__(self, name: str, value: str) -> None:
        self._store[name.lower()] = (name, value)

    def __getitem__(self, name: str) -> str:
        return self._store[name.lower()][1]

    def __delitem__(self, name: str) -> None:
        del self._store[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def lower_items(self) -> Iterator[Tuple[str, str]]:
        return ((lower, value) for lower, (_, value) in self._store.items())

    def __repr__(self) -> str:
        return f"HeaderMap({dict(self.items())!r})"


class Request:
    """An outbound request: method, URL, headers and body.

    ``url`` may be absolute (``https://host/path?query``) or just the
    path with an optional query string.
    """

    def __init__(
            self,
            method: str,
            url: str,
            headers: Optional[Mapping[str, str]] = None,
            body: Optional[Body] = None
    ) -> None:
        self.method = method
        self.url = url
        self.headers = HeaderMap(headers)
        self.body: Body = body if body is not None else b''

    def _split(self) -> Tuple[str, str]:
        # urlsplit would read a leading '//' of a bare path as an authority
        if not self.url or self.url.startswith('/'):
            target = self.url.partition('#')[0]
            path, _, query = target.partition('?')
        else:
            parts = urlsplit(self.url)
            path, query = parts.path, parts.query
        return path or '/', query

    @property
    def path(self) -> str:
        return self._split()[0]

    @property
    def query(self) -> str:
        return self._split()[1]

    @property
    def body_bytes(self) -> bytes:
        return self.body.encode('utf-8') if isinstance(self.body, str) else self.body

    def __repr__(self) -> str:
        return f"Request({self.method!r}, {self.url!r})"
