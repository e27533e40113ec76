"""
Duo Web Models
==============
Data models and enums for the signed handshake tokens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import FIELD_DELIMITER, TOKEN_DELIMITER


class Role(str, Enum):
    """Role tag identifying a token's purpose and signing key."""
    DUO = "TX"
    AUTH = "AUTH"
    APP = "APP"


class FailureReason(str, Enum):
    """Reasons a signing or verification call can fail."""
    INVALID_KEY_LENGTH = "invalid_key_length"
    INVALID_SUBJECT = "invalid_subject"
    MALFORMED_RESPONSE = "malformed_response"
    MALFORMED_TOKEN = "malformed_token"
    SIGNATURE_MISMATCH = "signature_mismatch"
    ROLE_MISMATCH = "role_mismatch"
    ENCODING_ERROR = "encoding_error"
    MALFORMED_PAYLOAD = "malformed_payload"
    INTEGRATION_KEY_MISMATCH = "integration_key_mismatch"
    EXPIRED = "expired"
    SUBJECT_MISMATCH = "subject_mismatch"


@dataclass(frozen=True)
class Cookie:
    """Decoded token payload."""
    subject: str
    integration_key: str
    expires_at: int

    def serialize(self) -> str:
        return FIELD_DELIMITER.join(
            [self.subject, self.integration_key, str(self.expires_at)]
        )


@dataclass(frozen=True)
class SignedToken:
    """A token split into its three wire fields."""
    role: str
    payload_b64: str
    signature: str

    @property
    def cookie(self) -> str:
        """The signed portion, ``role|payload``."""
        return f"{self.role}{FIELD_DELIMITER}{self.payload_b64}"

    def __str__(self) -> str:
        return f"{self.cookie}{FIELD_DELIMITER}{self.signature}"


class CombinedToken(str):
    """
    Colon-joined ``duo_token:app_token`` pair produced by signing.

    Behaves as the plain wire string; the halves are exposed for callers
    that hand them to different parties.
    """

    def __new__(cls, duo_token: str, app_token: str) -> "CombinedToken":
        obj = super().__new__(cls, f"{duo_token}{TOKEN_DELIMITER}{app_token}")
        obj.duo_token = duo_token
        obj.app_token = app_token
        return obj


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of verifying a combined response."""
    subject: Optional[str] = None
    reason: Optional[FailureReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None
