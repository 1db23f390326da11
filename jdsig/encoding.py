"""Codec helpers shared by the canonical request builders and the signer."""

import hashlib
import hmac
from typing import Union
from urllib.parse import quote

EMPTY_STRING_SHA256 = 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'


def _to_bytes(data: Union[str, bytes]) -> bytes:
    return data.encode('utf-8') if isinstance(data, str) else data


def percent_encode(value: str) -> str:
    """Percent-encode everything except letters, digits and ``-_.~``.

    Non-ASCII characters are encoded from their UTF-8 bytes and the hex
    digits are uppercase, so ``/`` becomes ``%2F`` and a space ``%20``.
    """
    return quote(value, safe='')


def hex_encode(data: bytes) -> str:
    return data.hex()


def trim_all(value: str) -> str:
    """Strip outer spaces and collapse inner runs of spaces to one.

    Only the space character is touched; tabs and other whitespace are kept.
    """
    return ' '.join(part for part in value.split(' ') if part)


def sha256_hex(data: Union[str, bytes]) -> str:
    return hashlib.sha256(_to_bytes(data)).hexdigest()


def hmac_sha256(key: bytes, data: Union[str, bytes]) -> bytes:
    return hmac.new(key, _to_bytes(data), hashlib.sha256).digest()
