"""Tests for rendering complete notification emails.

``MessageBuilder`` combines the message file fields with the rendered body
fragments. These tests build a ``MessageConfig`` in memory, render it, and
inspect the document with ``BeautifulSoup``.

Usage
-----
Run ``pytest tests/test_message_builder.py -v``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from metric_mail.config import (
    CTAConfig,
    FooterConfig,
    MessageConfig,
    MetricConfig,
    MetricDefaults,
)
from metric_mail.message import MessageBuilder


@pytest.fixture
def message(tmp_path: Path) -> MessageConfig:
    """Return a message config writing into a temporary directory."""
    return MessageConfig(
        body="Hi **all**\n\n[METRIC_ATTACH_CARD]\n---\nThanks",
        output=tmp_path / "public" / "mail.html",
        header_logo="https://example.invalid/logo.png?a=1&b=2",
        title="Weekly <b>update</b>",
        headline="Numbers are in",
        metric=MetricConfig(title="", description="Intro\n\nSOCs: A | B"),
        defaults=MetricDefaults(title="Fallback metric"),
        cta=CTAConfig(text="Open", link="https://example.invalid/dash"),
        footer=FooterConfig(name="Sam", title="Lead", market="North"),
    )


def test_render_injects_body_fragments(message: MessageConfig) -> None:
    """The body cell holds the rendered paragraphs, card, and separator."""
    soup = BeautifulSoup(MessageBuilder(message).render(), "html.parser")
    body = soup.find(id="body")
    assert body.find("p").find("b").get_text() == "all"
    assert body.find("h2").get_text() == "Fallback metric"
    assert [li.get_text() for li in body.find_all("li")] == ["A", "B"]
    assert soup.find(id="headline").get_text() == "Numbers are in"


def test_render_fills_header_cta_and_footer(message: MessageConfig) -> None:
    """Message fields are placed into their header, CTA, and footer slots."""
    soup = BeautifulSoup(MessageBuilder(message).render(), "html.parser")
    assert soup.title.get_text() == "Weekly update"
    assert soup.find(id="title").find("b").get_text() == "update"
    assert soup.find(id="header-logo")["src"] == "https://example.invalid/logo.png?a=1&b=2"
    assert soup.find(id="cta")["href"] == "https://example.invalid/dash"
    assert soup.find(id="cta-description") is None
    assert soup.find(id="footer-logo") is None
    assert soup.find(id="footer-market").get_text() == "North"


def test_run_writes_document(message: MessageConfig) -> None:
    """``run`` creates parent folders and writes a newline-terminated file."""
    builder = MessageBuilder(message)
    written = builder.run()
    assert written == message.output
    text = written.read_text(encoding="utf-8")
    assert text.endswith("</html>\n")
    assert text == builder.render(), "rendering must be deterministic"
