"""JDCLOUD2-HMAC-SHA256 request signing.

The scheme follows AWS Signature Version 4 with JD Cloud's own algorithm
name, key prefix, scope terminator and ``x-jdcloud-*`` headers.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional

from .canonical import canonical_request, hash_canonical_request
from .credentials import Credential
from .encoding import hex_encode, hmac_sha256
from .exceptions import InvalidCredentialError
from .request import Body, Request, validate_header_value

logger = logging.getLogger(__name__)

ALGORITHM = 'JDCLOUD2-HMAC-SHA256'
SIGNING_KEY_PREFIX = 'JDCLOUD2'
SCOPE_TERMINATOR = 'jdcloud2_request'

DATE_HEADER = 'x-jdcloud-date'
NONCE_HEADER = 'x-jdcloud-nonce'
USER_AGENT_HEADER = 'User-Agent'
AUTHORIZATION_HEADER = 'Authorization'

DEFAULT_USER_AGENT = 'JdcloudSdkPython/0.1.0'

SHORT_DATE_FORMAT = '%Y%m%d'
LONG_DATE_FORMAT = '%Y%m%dT%H%M%SZ'


def _as_utc(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def short_date(when: datetime) -> str:
    return _as_utc(when).strftime(SHORT_DATE_FORMAT)


def long_date(when: datetime) -> str:
    return _as_utc(when).strftime(LONG_DATE_FORMAT)


def _derive_key(secret_key: str, date: str, region: str, service: str, prefix: str, terminator: str) -> bytes:
    k_date = hmac_sha256((prefix + secret_key).encode('utf-8'), date)
    k_region = hmac_sha256(k_date, region)
    k_service = hmac_sha256(k_region, service)
    return hmac_sha256(k_service, terminator)


def derive_signing_key(secret_key: str, date: str, region: str, service: str) -> bytes:
    """Derive the per-day, per-scope signing key from the secret key.

    Each HMAC output is the key for the next step: date, region, service and
    finally the scope terminator.
    """
    return _derive_key(secret_key, date, region, service, SIGNING_KEY_PREFIX, SCOPE_TERMINATOR)


def credential_scope(date: str, region: str, service: str) -> str:
    return f"{date}/{region}/{service}/{SCOPE_TERMINATOR}"


def string_to_sign(timestamp: str, scope: str, canonical_request_hash: str) -> str:
    return '\n'.join([ALGORITHM, timestamp, scope, canonical_request_hash])


class Signer:
    """Signs requests for one JD Cloud service in one region.

    A signer only holds its configuration, so one instance can be shared
    between threads as long as every call gets its own request.

    Usage::

        signer = Signer(Credential('ak', 'sk'), 'vm', 'cn-north-1')
        request = Request('GET', 'https://vm.jdcloud-api.com/v1/regions/cn-north-1/instances')
        signer.sign(request)
        request.headers['Authorization']
    """

    def __init__(
            self,
            credential: Credential,
            service_name: str,
            region: str,
            user_agent: str = DEFAULT_USER_AGENT
    ) -> None:
        self.credential = credential
        self.service_name = service_name
        self.region = region
        self.user_agent = user_agent

    def sign(self, request: Request) -> Request:
        """Sign ``request`` in place using the current time and a fresh nonce."""
        now = datetime.now(timezone.utc)
        nonce = str(uuid.uuid4())
        return self.sign_at(request, now, nonce)

    def sign_at(self, request: Request, now: datetime, nonce: str) -> Request:
        """Sign ``request`` in place with an explicit timestamp and nonce.

        The Authorization value is computed on a staged copy, so any error
        leaves the caller's request untouched.
        """
        self._check_credential()
        added = self._signing_headers(request, now, nonce)
        staged = Request(request.method, request.url, request.headers, request.body)
        staged.headers.update(added)
        authorization = validate_header_value(AUTHORIZATION_HEADER, self._authorization(staged, now))

        request.headers.update(added)
        request.headers[AUTHORIZATION_HEADER] = authorization
        return request

    def create_headers(
            self,
            method: str,
            url: str,
            headers: Optional[Mapping[str, str]] = None,
            body: Optional[Body] = None
    ) -> Dict[str, str]:
        """Sign a request built from plain values and return all of its headers."""
        request = self.sign(Request(method, url, headers, body))
        return dict(request.headers)

    def signing_key(self, now: datetime) -> bytes:
        return derive_signing_key(self.credential.secret_key, short_date(now), self.region, self.service_name)

    def credential_scope(self, now: datetime) -> str:
        return credential_scope(short_date(now), self.region, self.service_name)

    def _check_credential(self) -> None:
        if not self.credential.is_valid():
            raise InvalidCredentialError()

    def _signing_headers(self, request: Request, now: datetime, nonce: str) -> Dict[str, str]:
        headers = {
            DATE_HEADER: validate_header_value(DATE_HEADER, long_date(now)),
            NONCE_HEADER: validate_header_value(NONCE_HEADER, nonce),
        }
        if USER_AGENT_HEADER not in request.headers:
            headers[USER_AGENT_HEADER] = validate_header_value(USER_AGENT_HEADER, self.user_agent)
        return headers

    def _authorization(self, request: Request, now: datetime) -> str:
        canonical, signed_headers = canonical_request(request)
        logger.debug("CanonicalRequest:\n%s", canonical)

        scope = self.credential_scope(now)
        sts = string_to_sign(long_date(now), scope, hash_canonical_request(canonical))
        logger.debug("StringToSign:\n%s", sts)

        signature = hex_encode(hmac_sha256(self.signing_key(now), sts))
        return (
            f"{ALGORITHM} Credential={self.credential.access_key}/{scope}, "
            f"SignedHeaders={signed_headers}, Signature={signature}"
        )
