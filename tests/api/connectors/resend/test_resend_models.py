"""Testes para api.connectors.resend.models."""

from __future__ import annotations

import dataclasses

import pytest

from api.connectors.resend.models import (
    Attachment,
    HtmlEmail,
    OutboundEmail,
    SentEmail,
    TextEmail,
)


class TestOutboundEmails:
    """TextEmail e HtmlEmail como OutboundEmail."""

    def test_both_variants_satisfy_protocol(self) -> None:
        text = TextEmail(from_="a@example.com", to=["b@example.com"], subject="s", text="t")
        html = HtmlEmail(from_="a@example.com", to=["b@example.com"], subject="s", html="<b>h</b>")
        assert isinstance(text, OutboundEmail)
        assert isinstance(html, OutboundEmail)

    def test_variants_share_no_base_class(self) -> None:
        assert not issubclass(TextEmail, HtmlEmail)
        assert not issubclass(HtmlEmail, TextEmail)

    def test_text_email_to_payload(self) -> None:
        email = TextEmail(
            from_="Floris <floris@example.com>",
            to=["a@example.com"],
            subject="Purchase confirmation",
            text="thank you",
        )
        assert email.to_payload() == {
            "from": "Floris <floris@example.com>",
            "to": ["a@example.com"],
            "subject": "Purchase confirmation",
            "text": "thank you",
        }

    def test_empty_recipients_and_attachments_serialize(self) -> None:
        """Sem validação local: listas vazias passam."""
        email = HtmlEmail(from_="", to=[], subject="", html="", attachments=[])
        assert email.to_payload() == {
            "from": "",
            "to": [],
            "subject": "",
            "html": "",
            "attachments": [],
        }

    def test_invalid_address_is_not_rejected(self) -> None:
        email = TextEmail(from_="não-é-email", to=["@@"], subject="s", text="t")
        assert email.to_payload()["to"] == ["@@"]

    def test_models_are_frozen(self) -> None:
        attachment = Attachment(content=b"x", filename="x.txt")
        with pytest.raises(dataclasses.FrozenInstanceError):
            attachment.filename = "y.txt"  # type: ignore[misc]


class TestSentEmail:
    """Testes para SentEmail.from_response."""

    def test_from_response(self) -> None:
        assert SentEmail.from_response({"id": "abc123"}) == SentEmail(id="abc123")

    def test_unknown_fields_are_ignored(self) -> None:
        sent = SentEmail.from_response({"id": "abc123", "object": "email", "extra": 1})
        assert sent.id == "abc123"

    @pytest.mark.parametrize(
        "data",
        [{}, {"id": None}, {"id": 123}, ["abc123"], "abc123"],
    )
    def test_invalid_bodies_raise_value_error(self, data: object) -> None:
        with pytest.raises(ValueError):
            SentEmail.from_response(data)  # type: ignore[arg-type]
