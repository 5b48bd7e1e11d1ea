"""Minimal client for sending email through the Amazon SES Query API."""

from .client import SESClient
from .config import Settings
from .errors import (
    ConfigurationError,
    DeliveryError,
    MailError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .mailer import SESMailer, build_mailer, parse_send_email_response
from .models import ContentKind, DeliveryResult, Message, MultipleRecipients, SingleRecipient
from .signer import authorization_header, sign

__all__ = [
    "ConfigurationError",
    "ContentKind",
    "DeliveryError",
    "DeliveryResult",
    "MailError",
    "Message",
    "MultipleRecipients",
    "ProtocolError",
    "SESClient",
    "SESMailer",
    "Settings",
    "SingleRecipient",
    "TransportError",
    "ValidationError",
    "authorization_header",
    "build_mailer",
    "parse_send_email_response",
    "sign",
]
