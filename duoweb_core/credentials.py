"""
Credentials
===========
The three fixed-length shared secrets of an integration.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from .config import (
    APPLICATION_KEY_ENV,
    APPLICATION_KEY_LENGTH,
    INTEGRATION_KEY_ENV,
    INTEGRATION_KEY_LENGTH,
    SECRET_KEY_ENV,
    SECRET_KEY_LENGTH,
)
from .exceptions import InvalidKeyLength
from .signature import utf8_length

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Credentials:
    """
    Application, integration and secret keys.

    Lengths are checked once here, in UTF-8 bytes; instances are immutable afterwards.
    ``repr`` hides the key material.
    """
    application_key: str
    integration_key: str
    secret_key: str

    def __post_init__(self):
        for name, value, length in (
            ("application key", self.application_key, APPLICATION_KEY_LENGTH),
            ("integration key", self.integration_key, INTEGRATION_KEY_LENGTH),
            ("secret key", self.secret_key, SECRET_KEY_LENGTH),
        ):
            if not isinstance(value, str) or utf8_length(value) != length:
                raise InvalidKeyLength(name, length)

    def __repr__(self) -> str:
        return f"Credentials(integration_key={self.integration_key[:4]}****)"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Credentials":
        """
        Load credentials from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Validated Credentials
        """
        if environ is None:
            environ = os.environ
        credentials = cls(
            application_key=environ.get(APPLICATION_KEY_ENV, ""),
            integration_key=environ.get(INTEGRATION_KEY_ENV, ""),
            secret_key=environ.get(SECRET_KEY_ENV, ""),
        )
        logger.info("Loaded Duo credentials from environment", env_var=INTEGRATION_KEY_ENV)
        return credentials
