from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union

from .config import DEFAULT_CHARSET
from .errors import ValidationError


class ContentKind(str, Enum):
    TEXT = "Text"
    HTML = "Html"


@dataclass(frozen=True)
class SingleRecipient:
    address: str


@dataclass(frozen=True)
class MultipleRecipients:
    # Blank and None entries are kept here and skipped when numbering destinations.
    addresses: Tuple[Optional[str], ...]


Recipients = Union[SingleRecipient, MultipleRecipients]


def to_recipients(value: object) -> Recipients:
    """
    Normalize the ``to`` value of a message.

    A string addresses a single recipient, a list or tuple addresses several.
    Anything else is rejected.
    """
    if isinstance(value, (SingleRecipient, MultipleRecipients)):
        return value
    if isinstance(value, str):
        return SingleRecipient(value)
    if isinstance(value, (list, tuple)):
        for entry in value:
            if entry is not None and not isinstance(entry, str):
                raise ValidationError(
                    f"Expected only strings in the to address list but got {type(entry).__name__}"
                )
        return MultipleRecipients(tuple(value))
    raise ValidationError(
        f"Expected a string or a list of strings for the to address but got {type(value).__name__} instead"
    )


@dataclass
class Message:
    to: Recipients
    subject: Optional[str] = None
    body: Optional[str] = None
    sender: Optional[str] = None
    sender_name: Optional[str] = None
    content_kind: ContentKind = ContentKind.TEXT
    charset: str = DEFAULT_CHARSET

    def __post_init__(self) -> None:
        self.to = to_recipients(self.to)
        self.content_kind = ContentKind(self.content_kind)

    @classmethod
    def create(
        cls,
        *,
        to: Union[str, Sequence[Optional[str]]],
        subject: Optional[str] = None,
        body: Optional[str] = None,
        sender: Optional[str] = None,
        sender_name: Optional[str] = None,
        html: bool = False,
        charset: Optional[str] = None,
    ) -> "Message":
        return cls(
            to=to,  # type: ignore[arg-type]
            subject=subject,
            body=body,
            sender=sender,
            sender_name=sender_name,
            content_kind=ContentKind.HTML if html else ContentKind.TEXT,
            charset=charset or DEFAULT_CHARSET,
        )

    @property
    def is_html(self) -> bool:
        return self.content_kind is ContentKind.HTML


@dataclass(frozen=True)
class RequestTimestamps:
    iso: str  # Timestamp field, e.g. 2012-01-24T10:00:00.000Z
    http_date: str  # Date header and signed string, e.g. Tue, 24 Jan 2012 10:00:00 GMT


@dataclass
class SignedRequest:
    path: str
    params: Dict[str, str]
    headers: Dict[str, str]
    timestamps: RequestTimestamps


@dataclass
class DeliveryResult:
    status: str  # "success" | "failed"
    message_id: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    def is_success(self) -> bool:
        return self.status == "success"
