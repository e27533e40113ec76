"""
Signature Functions
===================
HMAC-SHA1 signing, signature comparison, and the base64/pipe framing shared
by the signer and the verifier.
"""

import base64
import binascii
import hashlib
import hmac
from typing import List, Optional

from .config import FIELD_DELIMITER
from .exceptions import EncodingError

SIGNATURE_ALGORITHM = "sha1"


def hmac_sha1(key: str, message: str) -> str:
    """
    Compute a lowercase hex HMAC-SHA1 digest.

    Args:
        key: Signing key
        message: Message to sign

    Returns:
        Hex-encoded HMAC-SHA1
    """
    return hmac.new(key.encode(), message.encode(), hashlib.sha1).hexdigest()


def signatures_match(key: str, expected: str, provided: str) -> bool:
    """
    Compare two signatures by re-signing both with ``key``.

    The outer digests are what interoperating implementations compare, so
    this must not be replaced with a direct comparison of the inputs.
    """
    return hmac.compare_digest(hmac_sha1(key, expected), hmac_sha1(key, provided))


def utf8_length(value: str) -> Optional[int]:
    """Length of ``value`` in UTF-8 bytes, or None if it cannot be encoded."""
    try:
        return len(value.encode())
    except UnicodeEncodeError:
        return None


def b64_encode(value: str) -> str:
    """Standard, padded base64 of the UTF-8 bytes of ``value``."""
    return base64.b64encode(value.encode()).decode("ascii")


def b64_decode(value: str) -> str:
    """
    Decode standard padded base64 into text.

    Raises:
        EncodingError: If the input is not valid base64 or not UTF-8
    """
    try:
        return base64.b64decode(value.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        raise EncodingError() from None


def join_fields(*fields: str, delimiter: str = FIELD_DELIMITER) -> str:
    return delimiter.join(fields)


def split_fields(
    value: str,
    count: int,
    delimiter: str = FIELD_DELIMITER,
) -> Optional[List[str]]:
    """Split ``value`` into exactly ``count`` fields, or None."""
    fields = value.split(delimiter)
    if len(fields) != count:
        return None
    return fields
