"""Tests for the ``mail`` command handlers.

The command functions are called directly so stdout can be captured with
``capsys`` without going through argument parsing.

Usage
-----
Run ``pytest tests/test_cli.py -v``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from metric_mail import cli


def test_card_prints_rendered_card(capsys: pytest.CaptureFixture[str]) -> None:
    """``mail card`` prints the card fragment for the given inputs."""
    cli.card(title="Reach", description="SOCs: A | B")
    out = capsys.readouterr().out
    assert "Reach</h2>" in out
    assert '<li style="font-weight: bold;">A</li>' in out


def test_card_reads_description_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The description can be read from a file."""
    source = tmp_path / "description.txt"
    source.write_text("[CODE]x\ny[/CODE]", encoding="utf-8")
    cli.card(title="Deploy", description_file=source)
    assert "x<br>y" in capsys.readouterr().out


def test_card_rejects_conflicting_descriptions(tmp_path: Path) -> None:
    """Inline and file descriptions cannot be combined."""
    source = tmp_path / "description.txt"
    source.write_text("text", encoding="utf-8")
    with pytest.raises(ValueError, match="--description"):
        cli.card(description="inline", description_file=source)


def test_body_prints_rendered_body(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``mail body`` renders the file, injecting the metric card."""
    source = tmp_path / "body.txt"
    source.write_text("Hello\n[METRIC_ATTACH_CARD]\n", encoding="utf-8")
    cli.body(source, metric_title="Reach", metric_description="Up 4%")
    out = capsys.readouterr().out
    assert out.startswith('<p style="margin: 0 0 15px 0;">Hello</p>')
    assert "Reach</h2>" in out


def test_build_writes_message(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``mail build`` honours the output override and reports the path."""
    config = tmp_path / "message.yaml"
    config.write_text("body: Hello\noutput: ignored.html\n", encoding="utf-8")
    output = tmp_path / "out" / "mail.html"
    cli.build(config=config, output=output)
    assert output.exists()
    assert not (tmp_path / "ignored.html").exists()
    assert capsys.readouterr().out.strip().startswith("wrote ")
