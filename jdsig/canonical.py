"""Builders for the canonical form of a request.

The canonical request is hashed into the string-to-sign, so every byte here
has to match what the JD Cloud gateway computes on its side.
"""

from typing import List, Optional, Tuple
from urllib.parse import parse_qsl

from .encoding import EMPTY_STRING_SHA256, percent_encode, sha256_hex, trim_all
from .request import HeaderMap, Request, validate_header_value

UNSIGNED_HEADERS = frozenset(['user-agent', 'authorization'])


def canonical_query_string(query: Optional[str]) -> str:
    """Return the sorted, re-encoded form of a raw query string.

    >>> canonical_query_string('b=2&a&c=%2f')
    'a=&b=2&c=%2F'
    """
    if not query:
        return ''
    pairs = [
        (percent_encode(key), percent_encode(value))
        for key, value in parse_qsl(
            query, keep_blank_values=True, encoding='utf-8', errors='replace', separator='&'
        )
    ]
    pairs.sort()
    return '&'.join(f"{key}={value}" for key, value in pairs)


def canonical_headers(headers: HeaderMap) -> Tuple[str, str]:
    """Return ``(canonical_header_block, signed_headers)`` for ``headers``."""
    signable: List[Tuple[str, str]] = []
    for name, value in headers.lower_items():
        if name in UNSIGNED_HEADERS:
            continue
        validate_header_value(name, value)
        signable.append((name, trim_all(value)))
    signable.sort(key=lambda item: item[0])

    block = ''.join(f"{name}:{value}\n" for name, value in signable)
    signed_headers = ';'.join(name for name, _ in signable)
    return block, signed_headers


def payload_hash(body: bytes) -> str:
    if not body:
        return EMPTY_STRING_SHA256
    return sha256_hex(body)


def canonical_request(request: Request) -> Tuple[str, str]:
    """Return ``(canonical_request, signed_headers)`` for ``request``."""
    header_block, signed_headers = canonical_headers(request.headers)
    parts = [
        request.method,
        request.path,
        canonical_query_string(request.query),
        header_block,
        signed_headers,
        payload_hash(request.body_bytes),
    ]
    return '\n'.join(parts), signed_headers


def hash_canonical_request(canonical: str) -> str:
    return sha256_hex(canonical)
