"""
Verifier
========
Validates an ``AUTH:APP`` response and returns the subject both tokens agree on.
"""

import structlog

from .clock import Clock, system_clock
from .config import TOKEN_DELIMITER
from .cookie import parse_token
from .credentials import Credentials
from .exceptions import MalformedResponse, SubjectMismatch, VerificationError
from .models import Role, VerificationResult
from .signature import split_fields

logger = structlog.get_logger(__name__)


class Verifier:
    """Verify combined responses against one integration's credentials."""

    def __init__(self, credentials: Credentials, clock: Clock = system_clock):
        self.credentials = credentials
        self.clock = clock

    def verify(self, response: str) -> str:
        """
        Verify a signed response.

        Args:
            response: ``AUTH|...:APP|...`` string echoed back by Duo

        Returns:
            The verified subject

        Raises:
            VerificationError: Subclass naming the first failed check
        """
        now = int(self.clock())
        try:
            subject = self._verify(response, now)
        except VerificationError as e:
            logger.warning("Duo response rejected", reason=e.reason.value, role=e.role)
            raise

        logger.debug("Duo response verified", verified_at=now, subject_length=len(subject))
        return subject

    def check(self, response: str) -> VerificationResult:
        """Like verify(), but report failures as a result instead of raising."""
        try:
            return VerificationResult(subject=self.verify(response))
        except VerificationError as e:
            return VerificationResult(reason=e.reason)

    def _verify(self, response: str, now: int) -> str:
        if not isinstance(response, str):
            raise MalformedResponse()
        tokens = split_fields(response, 2, delimiter=TOKEN_DELIMITER)
        if tokens is None:
            raise MalformedResponse()
        auth_token, app_token = tokens

        integration_key = self.credentials.integration_key
        auth_subject = parse_token(
            auth_token, Role.AUTH, self.credentials.secret_key, integration_key, now
        )
        app_subject = parse_token(
            app_token, Role.APP, self.credentials.application_key, integration_key, now
        )

        if auth_subject != app_subject:
            raise SubjectMismatch()

        return auth_subject
