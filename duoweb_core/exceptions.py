"""
Duo Web Exceptions
==================
Error taxonomy for signing and verification.

Messages are deliberately generic: they may be shown to the token holder,
so parsed fields, subjects and keys never appear in them.
"""

from typing import Optional

from .models import FailureReason


class DuoWebError(Exception):
    """Base exception for all signing and verification failures."""

    reason: FailureReason
    default_message = "duo web error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuoWebConfigurationError(DuoWebError, ValueError):
    """Raised for invalid caller-supplied input (keys, subjects)."""
    pass


class InvalidKeyLength(DuoWebConfigurationError):
    """Raised when a key is missing or has the wrong length."""

    reason = FailureReason.INVALID_KEY_LENGTH

    def __init__(self, key_name: str, expected_length: int):
        self.key_name = key_name
        self.expected_length = expected_length
        super().__init__(f"invalid {key_name}: must be {expected_length} characters")


class InvalidSubject(DuoWebConfigurationError):
    reason = FailureReason.INVALID_SUBJECT
    default_message = "subject must be non-empty and must not contain '|'"


class VerificationError(DuoWebError):
    """
    Raised when a signed response fails verification.

    ``role`` names the token (AUTH or APP) whose check failed, when the
    failure is specific to one token.
    """

    role: Optional[str] = None


class MalformedResponse(VerificationError):
    reason = FailureReason.MALFORMED_RESPONSE
    default_message = "unable to split signed response"


class MalformedToken(VerificationError):
    reason = FailureReason.MALFORMED_TOKEN
    default_message = "unable to split signed token"


class SignatureMismatch(VerificationError):
    reason = FailureReason.SIGNATURE_MISMATCH
    default_message = "signature mismatch"


class RoleMismatch(VerificationError):
    reason = FailureReason.ROLE_MISMATCH
    default_message = "role tag mismatch"


class EncodingError(VerificationError):
    reason = FailureReason.ENCODING_ERROR
    default_message = "unable to decode token payload"


class MalformedPayload(VerificationError):
    reason = FailureReason.MALFORMED_PAYLOAD
    default_message = "unable to split token payload"


class IntegrationKeyMismatch(VerificationError):
    reason = FailureReason.INTEGRATION_KEY_MISMATCH
    default_message = "integration key mismatch"


class Expired(VerificationError):
    reason = FailureReason.EXPIRED
    default_message = "token expired"


class SubjectMismatch(VerificationError):
    reason = FailureReason.SUBJECT_MISMATCH
    default_message = "auth subject does not match app subject"
