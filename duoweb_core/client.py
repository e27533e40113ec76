"""
Duo Web Client
==============
Single entry point bundling a Signer and a Verifier for one integration.
"""

from typing import Mapping, Optional

from .clock import Clock, system_clock
from .credentials import Credentials
from .models import CombinedToken, VerificationResult
from .signer import Signer
from .verifier import Verifier


class DuoWeb:
    """
    Sign requests for and verify responses from the Duo second-factor step.

    Example:
        duo = DuoWeb(akey, ikey, skey)
        sig_request = duo.sign_request("alice")
        ...
        username = duo.verify_response(sig_response)
    """

    def __init__(
        self,
        application_key: str,
        integration_key: str,
        secret_key: str,
        clock: Clock = system_clock,
    ):
        self.credentials = Credentials(application_key, integration_key, secret_key)
        self.signer = Signer(self.credentials, clock)
        self.verifier = Verifier(self.credentials, clock)

    @classmethod
    def from_credentials(cls, credentials: Credentials, clock: Clock = system_clock) -> "DuoWeb":
        return cls(
            credentials.application_key,
            credentials.integration_key,
            credentials.secret_key,
            clock=clock,
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        clock: Clock = system_clock,
    ) -> "DuoWeb":
        """Build a client from DUO_* environment variables."""
        return cls.from_credentials(Credentials.from_env(environ), clock=clock)

    def sign_request(self, subject: Optional[str]) -> CombinedToken:
        return self.signer.sign(subject)

    def verify_response(self, response: str) -> str:
        return self.verifier.verify(response)

    def check_response(self, response: str) -> VerificationResult:
        return self.verifier.check(response)
