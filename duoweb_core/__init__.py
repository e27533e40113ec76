"""
Duo Web Core
============
Signed handshake tokens bridging a primary login with Duo second-factor
verification.
"""

__version__ = "0.1.0"

from .clock import Clock, FixedClock, system_clock
from .client import DuoWeb
from .credentials import Credentials
from .exceptions import (
    DuoWebConfigurationError,
    DuoWebError,
    EncodingError,
    Expired,
    IntegrationKeyMismatch,
    InvalidKeyLength,
    InvalidSubject,
    MalformedPayload,
    MalformedResponse,
    MalformedToken,
    RoleMismatch,
    SignatureMismatch,
    SubjectMismatch,
    VerificationError,
)
from .models import CombinedToken, Cookie, FailureReason, Role, SignedToken, VerificationResult
from .signer import Signer
from .verifier import Verifier

__all__ = [
    "__version__",
    # Clock
    "Clock",
    "FixedClock",
    "system_clock",
    # Models
    "Credentials",
    "CombinedToken",
    "Cookie",
    "FailureReason",
    "Role",
    "SignedToken",
    "VerificationResult",
    # Signing / verification
    "DuoWeb",
    "Signer",
    "Verifier",
    # Errors
    "DuoWebError",
    "DuoWebConfigurationError",
    "VerificationError",
    "InvalidKeyLength",
    "InvalidSubject",
    "MalformedResponse",
    "MalformedToken",
    "SignatureMismatch",
    "RoleMismatch",
    "EncodingError",
    "MalformedPayload",
    "IntegrationKeyMismatch",
    "Expired",
    "SubjectMismatch",
]
