from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx
from lxml import etree

from .client import SESClient
from .config import SEND_EMAIL_ACTION, Settings
from .errors import DeliveryError, MailError, ProtocolError, ValidationError
from .models import DeliveryResult, Message, SingleRecipient, to_recipients
from .signer import verify_credentials

logger = logging.getLogger(__name__)

_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def format_source(address: str, name: Optional[str]) -> str:
    if name:
        return f"{name} <{address}>"
    return address


def destination_params(message: Message) -> Dict[str, str]:
    """
    Number the recipients as SES destination members.

    A single recipient uses ``Destination.ToAddresses``; a list uses
    ``Destination.toAddresses`` and numbers only the non-empty entries,
    starting at 1.
    """
    recipients = message.to
    if isinstance(recipients, SingleRecipient):
        return {"Destination.ToAddresses.member.1": recipients.address}

    params: Dict[str, str] = {}
    num = 1
    for address in recipients.addresses:
        if not address:
            continue
        params[f"Destination.toAddresses.member.{num}"] = address
        num += 1
    return params


def _child(element: etree._Element, name: str) -> Optional[etree._Element]:
    for child in element:
        if isinstance(child.tag, str) and etree.QName(child).localname == name:
            return child
    return None


def _child_text(element: etree._Element, *path: str) -> Optional[str]:
    node: Optional[etree._Element] = element
    for name in path:
        if node is None:
            return None
        node = _child(node, name)
    if node is None:
        return None
    return (node.text or "").strip()


def _parse_root(content: bytes) -> Optional[etree._Element]:
    if not content.strip():
        return None
    try:
        return etree.fromstring(content, parser=_XML_PARSER)
    except etree.XMLSyntaxError:
        return None


def parse_send_email_response(status_code: int, body: bytes | str, *, raw_text: str | None = None) -> str:
    """
    Map an SES SendEmail response to its message id.

    Raises DeliveryError for an ErrorResponse on a non-200 status and
    ProtocolError for every other unexpected status/body combination.
    Pass the undecoded bytes so lxml honours the XML encoding declaration;
    ``raw_text`` is only used for error diagnostics.
    """
    content = body.encode("utf-8") if isinstance(body, str) else body
    if raw_text is None:
        raw_text = body if isinstance(body, str) else body.decode("utf-8", errors="replace")
    root = _parse_root(content)
    root_name = etree.QName(root).localname if root is not None else None

    if status_code != 200 and root_name == "ErrorResponse":
        message = _child_text(root, "Error", "Message") or ""
        code = _child_text(root, "Error", "Code")
        raise DeliveryError(f"Failed to send the Email: {message}", code=code, status_code=status_code)

    if status_code == 200 and root_name == "SendEmailResponse":
        message_id = _child_text(root, "SendEmailResult", "MessageId")
        if message_id:
            return message_id

    raise ProtocolError(
        f"Failed to extract the message ID, raw response: {raw_text}",
        raw_body=raw_text,
        status_code=status_code,
    )


class SESMailer:
    provider = "ses"

    def __init__(self, settings: Settings, *, client: SESClient | None = None):
        self._settings = settings
        self._client = client or SESClient(settings)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SESMailer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def resolve_sender(self, message: Message) -> tuple[str, Optional[str]]:
        address = message.sender or self._settings.default_sender
        name = message.sender_name or self._settings.default_sender_name or None
        return address, name

    def validate(self, message: Message) -> None:
        address, _ = self.resolve_sender(message)
        if not address:
            raise ValidationError("You have to specify the from address")
        message.to = to_recipients(message.to)

    def build_params(self, message: Message) -> Dict[str, str]:
        self.validate(message)
        address, name = self.resolve_sender(message)
        kind = message.content_kind.value

        params: Dict[str, str] = {
            "Action": SEND_EMAIL_ACTION,
            "Source": format_source(address, name),
            "Message.Subject.Data": message.subject or "",
            "Message.Subject.Charset": message.charset,
            f"Message.Body.{kind}.Data": message.body or "",
            f"Message.Body.{kind}.Charset": message.charset,
        }
        params.update(destination_params(message))
        return params

    def send(self, message: Message) -> str:
        params = self.build_params(message)
        response = self._client.signed_post("/", params)
        message_id = parse_send_email_response(
            response.status_code, response.content, raw_text=response.text
        )
        logger.info("Mail sent with message id %s", message_id)
        return message_id

    def deliver(self, message: Message) -> DeliveryResult:
        """Send ``message`` and report the outcome instead of raising."""
        try:
            message_id = self.send(message)
        except MailError as exc:
            return DeliveryResult(status="failed", error=str(exc), error_type=type(exc).__name__)
        return DeliveryResult(status="success", message_id=message_id)


def build_mailer(settings: Settings, *, transport: httpx.BaseTransport | None = None) -> SESMailer:
    verify_credentials(settings.access_key, settings.secret_key)
    return SESMailer(settings, client=SESClient(settings, transport=transport))
