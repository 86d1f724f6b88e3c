#!/usr/bin/env python3
"""Envia um email de teste pela API Resend.

Uso:
    RESEND_API_KEY=re_xxx python scripts/send_email.py \
        --from "Equipe <no-reply@example.com>" --to pessoa@example.com \
        --subject "Teste" --text "Olá!"

    # HTML e anexos
    python scripts/send_email.py --from ... --to ... --subject ... \
        --html "<h1>Olá</h1>" --attach relatorio.pdf

Sai com código 1 se o envio falhar.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from api.connectors.resend import (
    Attachment,
    HtmlEmail,
    SentEmail,
    TextEmail,
    create_resend_client,
)
from config.logging import configure_logging
from config.settings import get_base_settings, get_resend_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--from", dest="sender", required=True)
    parser.add_argument("--to", action="append", required=True, help="Repetível")
    parser.add_argument("--subject", required=True)
    body = parser.add_mutually_exclusive_group(required=True)
    body.add_argument("--text")
    body.add_argument("--html")
    parser.add_argument("--attach", action="append", type=Path, default=[])
    return parser.parse_args(argv)


def _load_attachments(paths: list[Path]) -> list[Attachment] | None:
    if not paths:
        return None
    return [Attachment(content=path.read_bytes(), filename=path.name) for path in paths]


async def _send(args: argparse.Namespace) -> int:
    attachments = _load_attachments(args.attach)
    if args.html is not None:
        email: TextEmail | HtmlEmail = HtmlEmail(
            from_=args.sender,
            to=args.to,
            subject=args.subject,
            html=args.html,
            attachments=attachments,
        )
    else:
        email = TextEmail(
            from_=args.sender,
            to=args.to,
            subject=args.subject,
            text=args.text,
            attachments=attachments,
        )

    settings = get_resend_settings()
    errors = settings.validate()
    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 2

    result = await create_resend_client(settings).send(email)
    if isinstance(result, SentEmail):
        print(result.id)
        return 0
    print(result.describe(), file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    base = get_base_settings()
    configure_logging(level=base.log_level, service_name=base.service_name)
    return asyncio.run(_send(_parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
