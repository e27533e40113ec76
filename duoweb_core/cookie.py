"""
Signed Cookies
==============
Construction and validation of a single ``ROLE|base64(payload)|hexsig`` token.
"""

import re

import structlog

from .exceptions import (
    EncodingError,
    Expired,
    IntegrationKeyMismatch,
    MalformedPayload,
    MalformedToken,
    RoleMismatch,
    SignatureMismatch,
    VerificationError,
)
from .models import Cookie, Role, SignedToken
from .signature import (
    b64_decode,
    b64_encode,
    hmac_sha1,
    join_fields,
    signatures_match,
    split_fields,
    utf8_length,
)

logger = structlog.get_logger(__name__)

_EPOCH_RE = re.compile(r"[+-]?[0-9]+")

# Expirations are signed 64-bit integers
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def sign_values(key: str, role: Role, cookie: Cookie) -> SignedToken:
    """
    Sign a cookie for the given role.

    Args:
        key: Key matching the role (secret key for TX/AUTH, application key for APP)
        role: Role tag to prefix
        cookie: Payload to encode

    Returns:
        SignedToken; ``str()`` gives the wire form
    """
    payload_b64 = b64_encode(cookie.serialize())
    signature = hmac_sha1(key, join_fields(role.value, payload_b64))
    return SignedToken(role=role.value, payload_b64=payload_b64, signature=signature)


def split_token(raw: str) -> SignedToken:
    fields = split_fields(raw, 3)
    if fields is None or utf8_length(raw) is None:
        raise MalformedToken()
    return SignedToken(*fields)


def parse_cookie(payload_b64: str) -> Cookie:
    """
    Decode and split a base64 payload.

    Raises:
        EncodingError: Bad base64, or an expiration that is not a 64-bit integer
        MalformedPayload: Wrong number of fields
    """
    fields = split_fields(b64_decode(payload_b64), 3)
    if fields is None:
        raise MalformedPayload()
    subject, integration_key, expires_at = fields
    if not _EPOCH_RE.fullmatch(expires_at):
        raise EncodingError()
    expires_at = int(expires_at)
    if not INT64_MIN <= expires_at <= INT64_MAX:
        raise EncodingError()
    return Cookie(subject=subject, integration_key=integration_key, expires_at=expires_at)


def parse_token(
    raw: str,
    expected_role: Role,
    key: str,
    integration_key: str,
    now: int,
) -> str:
    """
    Validate one signed token and return its subject.

    Checks run in a fixed order: framing, signature, role, encoding,
    payload framing, integration key, expiration.

    Args:
        raw: Wire token
        expected_role: Role the token must carry
        key: Key the token must be signed with
        integration_key: Integration key the payload must be bound to
        now: Current Unix time

    Returns:
        The token's subject

    Raises:
        VerificationError: The first check that fails, with ``role`` set
            to ``expected_role``
    """
    try:
        return _parse_token(raw, expected_role, key, integration_key, now)
    except VerificationError as e:
        e.role = expected_role.value
        raise


def _parse_token(
    raw: str,
    expected_role: Role,
    key: str,
    integration_key: str,
    now: int,
) -> str:
    token = split_token(raw)

    expected_signature = hmac_sha1(key, token.cookie)
    if not signatures_match(key, expected_signature, token.signature):
        raise SignatureMismatch()

    if token.role != expected_role.value:
        raise RoleMismatch()

    cookie = parse_cookie(token.payload_b64)

    if cookie.integration_key != integration_key:
        raise IntegrationKeyMismatch()

    if now >= cookie.expires_at:
        raise Expired()

    logger.debug(
        "Token validated",
        role=token.role,
        expires_at=cookie.expires_at,
    )
    return cookie.subject
