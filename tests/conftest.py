"""
Shared fixtures for duoweb-core tests.
"""

import base64
import hashlib
import hmac

import pytest

AKEY = "AKEY_AKEY_AKEY_AKEY_AKEY_AKEY_AKEY_AKEY_"
IKEY = "IKEY_IKEY_IKEY_IKEY_"
SKEY = "SKEY_SKEY_SKEY_SKEY_SKEY_SKEY_SKEY_SKEY_"

NOW = 1579051550


def make_token(key: str, role: str, payload: str) -> str:
    """Build a wire token by hand, independently of the library."""
    payload_b64 = base64.b64encode(payload.encode()).decode()
    cookie = f"{role}|{payload_b64}"
    sig = hmac.new(key.encode(), cookie.encode(), hashlib.sha1).hexdigest()
    return f"{cookie}|{sig}"


def make_response(
    username: str = "tony_the_tiger",
    auth_exp: int = NOW + 300,
    app_exp: int = NOW + 3600,
    app_username: str = None,
    ikey: str = IKEY,
) -> str:
    """Build an ``AUTH:APP`` response as the Duo service would echo it."""
    auth = make_token(SKEY, "AUTH", f"{username}|{ikey}|{auth_exp}")
    app = make_token(AKEY, "APP", f"{app_username or username}|{ikey}|{app_exp}")
    return f"{auth}:{app}"


@pytest.fixture
def credentials():
    from duoweb_core import Credentials

    return Credentials(AKEY, IKEY, SKEY)


@pytest.fixture
def clock():
    from duoweb_core import FixedClock

    return FixedClock(NOW)


def sign_raw(key: str, role: str, payload_b64: str) -> str:
    """Sign an arbitrary (possibly invalid) base64 field."""
    cookie = f"{role}|{payload_b64}"
    sig = hmac.new(key.encode(), cookie.encode(), hashlib.sha1).hexdigest()
    return f"{cookie}|{sig}"


def retag_as_auth(duo_token: str, skey: str = SKEY) -> str:
    """Re-tag a TX token as AUTH, as the Duo service does before echoing it back."""
    _, payload_b64, _ = duo_token.split("|")
    return sign_raw(skey, "AUTH", payload_b64)
