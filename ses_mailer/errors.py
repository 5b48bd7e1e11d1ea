from __future__ import annotations


class MailError(Exception):
    """Base class for every error raised by ses_mailer."""


class ConfigurationError(MailError):
    """Raised when credentials are missing before a signed request is made."""


class ValidationError(MailError):
    """Raised when a message cannot be sent as described."""


class TransportError(MailError):
    """Raised when SES is unreachable (network/timeout)."""


class DeliveryError(MailError):
    """Raised when SES explicitly rejects the request."""

    def __init__(self, message: str, *, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class ProtocolError(MailError):
    """Raised when the SES response has an unexpected shape."""

    def __init__(self, message: str, *, raw_body: str = "", status_code: int | None = None):
        super().__init__(message)
        self.raw_body = raw_body
        self.status_code = status_code
