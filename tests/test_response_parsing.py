from __future__ import annotations

import pytest

from ses_mailer.errors import DeliveryError, ProtocolError
from ses_mailer.mailer import parse_send_email_response


def test_success_returns_message_id():
    body = "<SendEmailResponse><SendEmailResult><MessageId>ABC123</MessageId></SendEmailResult></SendEmailResponse>"
    assert parse_send_email_response(200, body) == "ABC123"


def test_success_with_xml_declaration():
    body = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<SendEmailResponse><SendEmailResult><MessageId>ABC123</MessageId></SendEmailResult></SendEmailResponse>"
    )
    assert parse_send_email_response(200, body) == "ABC123"


def test_error_response_carries_provider_message_and_code():
    body = (
        '<ErrorResponse xmlns="http://ses.amazonaws.com/doc/2010-12-01/">'
        "<Error><Type>Sender</Type><Code>MessageRejected</Code>"
        "<Message>Email address is not verified.</Message></Error>"
        "<RequestId>abc</RequestId></ErrorResponse>"
    )
    with pytest.raises(DeliveryError) as excinfo:
        parse_send_email_response(400, body)
    assert str(excinfo.value) == "Failed to send the Email: Email address is not verified."
    assert excinfo.value.code == "MessageRejected"


@pytest.mark.parametrize(
    ("status_code", "body"),
    [
        # 200 without the nested result
        (200, "<SendEmailResponse><ResponseMetadata/></SendEmailResponse>"),
        (200, "<SendEmailResponse><SendEmailResult/></SendEmailResponse>"),
        # error body with a success status
        (200, "<ErrorResponse><Error><Message>nope</Message></Error></ErrorResponse>"),
        # success body with an error status
        (500, "<SendEmailResponse><SendEmailResult><MessageId>X</MessageId></SendEmailResult></SendEmailResponse>"),
        (503, "Service Unavailable"),
        (200, ""),
        (200, "<SendEmailResponse><unclosed>"),
    ],
)
def test_unexpected_combinations_raise_protocol_error(status_code, body):
    with pytest.raises(ProtocolError) as excinfo:
        parse_send_email_response(status_code, body)
    assert excinfo.value.raw_body == body
    assert excinfo.value.status_code == status_code
    assert str(excinfo.value) == f"Failed to extract the message ID, raw response: {body}"


def test_bytes_body_honours_xml_encoding_declaration():
    body = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        "<ErrorResponse><Error><Message>Adresse non vérifiée</Message></Error></ErrorResponse>"
    ).encode("latin-1")
    with pytest.raises(DeliveryError) as excinfo:
        parse_send_email_response(400, body)
    assert str(excinfo.value) == "Failed to send the Email: Adresse non vérifiée"


def test_raw_text_is_used_for_protocol_error_diagnostics():
    with pytest.raises(ProtocolError) as excinfo:
        parse_send_email_response(502, b"Bad Gateway", raw_text="Bad Gateway (decoded)")
    assert excinfo.value.raw_body == "Bad Gateway (decoded)"
