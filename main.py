from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ses_mailer.config import Settings
from ses_mailer.errors import MailError
from ses_mailer.mailer import build_mailer
from ses_mailer.models import Message


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a single email through Amazon SES.")
    parser.add_argument("--to", action="append", required=True, help="recipient address (repeatable)")
    parser.add_argument("--subject", default="")
    body = parser.add_mutually_exclusive_group(required=True)
    body.add_argument("--body")
    body.add_argument("--body-file", help="read the body from this file (UTF-8)")
    parser.add_argument("--html", action="store_true", help="send the body as HTML")
    parser.add_argument("--from", dest="sender", default=None, help="defaults to SES_SENDER")
    parser.add_argument("--name", dest="sender_name", default=None, help="defaults to SES_SENDER_NAME")
    parser.add_argument("--charset", default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        logging.error("Missing configuration: %s", exc)
        return 1

    body = args.body if args.body is not None else Path(args.body_file).read_text(encoding="utf-8")
    # One --to keeps the single-recipient form on the wire.
    to = args.to[0] if len(args.to) == 1 else args.to

    try:
        with build_mailer(settings) as mailer:
            message = Message.create(
                to=to,
                subject=args.subject,
                body=body,
                sender=args.sender,
                sender_name=args.sender_name,
                html=args.html,
                charset=args.charset,
            )
            message_id = mailer.send(message)
    except MailError as exc:
        logging.error("Mail sending failed: %s", exc)
        return 1

    print(message_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
