"""
JD Cloud Request Signing - JDCLOUD2-HMAC-SHA256

This package signs outbound JD Cloud API requests with the
JDCLOUD2-HMAC-SHA256 scheme, a variant of AWS Signature Version 4.
"""

from .credentials import Credential
from .exceptions import InvalidCredentialError, MalformedHeaderValueError, SigningError
from .request import HeaderMap, Request
from .signer import ALGORITHM, DEFAULT_USER_AGENT, Signer

__version__ = "0.1.0"
__all__ = [
    "Signer",
    "Credential",
    "Request",
    "HeaderMap",
    "ALGORITHM",
    "DEFAULT_USER_AGENT",
    "SigningError",
    "InvalidCredentialError",
    "MalformedHeaderValueError",
]
