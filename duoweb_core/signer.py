"""
Signer
======
Issues the ``TX:APP`` token pair for a subject.
"""

from typing import Optional

import structlog

from .clock import Clock, system_clock
from .config import APP_EXPIRE_SECONDS, DUO_EXPIRE_SECONDS, FIELD_DELIMITER
from .cookie import sign_values
from .credentials import Credentials
from .exceptions import InvalidSubject
from .models import CombinedToken, Cookie, Role
from .signature import utf8_length

logger = structlog.get_logger(__name__)


class Signer:
    """
    Sign a subject into a short-lived Duo token and a long-lived app token.

    Safe to share between threads; holds only immutable credentials and the clock.
    """

    def __init__(self, credentials: Credentials, clock: Clock = system_clock):
        self.credentials = credentials
        self.clock = clock

    def sign(self, subject: Optional[str]) -> CombinedToken:
        """
        Sign a subject.

        Args:
            subject: Username to bind into both tokens

        Returns:
            CombinedToken of the form ``TX|...:APP|...``

        Raises:
            InvalidSubject: If the subject is empty, contains '|', or is not
                encodable as UTF-8
        """
        if (
            not isinstance(subject, str)
            or not subject
            or FIELD_DELIMITER in subject
            or utf8_length(subject) is None
        ):
            logger.warning("Refusing to sign invalid subject", reason=InvalidSubject.reason.value)
            raise InvalidSubject()

        now = int(self.clock())
        integration_key = self.credentials.integration_key

        duo_token = sign_values(
            self.credentials.secret_key,
            Role.DUO,
            Cookie(subject, integration_key, now + DUO_EXPIRE_SECONDS),
        )
        app_token = sign_values(
            self.credentials.application_key,
            Role.APP,
            Cookie(subject, integration_key, now + APP_EXPIRE_SECONDS),
        )

        logger.debug("Signed request", issued_at=now, subject_length=len(subject))
        return CombinedToken(str(duo_token), str(app_token))
