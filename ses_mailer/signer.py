"""AWS3-HTTPS request signing for the SES Query API."""

from __future__ import annotations

import base64
import hashlib
import hmac

from .config import SIGNATURE_ALGORITHM
from .errors import ConfigurationError


def verify_credentials(access_key: str | None, secret_key: str | None) -> None:
    """Raise ConfigurationError unless both keys are non-empty."""
    for name, value in (("access_key", access_key), ("secret_key", secret_key)):
        if not value:
            raise ConfigurationError(f"You have to specify a non empty value for the {name} option")


def sign(secret_key: str, timestamp: str) -> str:
    """
    Compute the base64 HMAC-SHA256 of ``timestamp`` keyed by ``secret_key``.

    The timestamp must be the exact string sent in the Date header.
    """
    digest = hmac.new(secret_key.encode("utf-8"), timestamp.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii").rstrip()


def authorization_header(access_key: str, secret_key: str, timestamp: str) -> str:
    verify_credentials(access_key, secret_key)
    signature = sign(secret_key, timestamp)
    return f"AWS3-HTTPS AWSAccessKey={access_key}, Signature={signature}, Algorithm={SIGNATURE_ALGORITHM}"
