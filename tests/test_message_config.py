"""Unit tests for loading notification message files.

These tests write small ``message.yaml`` files into ``tmp_path`` and check that
``load_message_config`` applies defaults, fallbacks, and validation errors.

Usage
-----
Run ``pytest tests/test_message_config.py -v``. Only pytest's ``tmp_path``
fixture is required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from metric_mail.config import MessageConfigError, load_message_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "message.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_load_full_message(tmp_path: Path) -> None:
    """Every block of the message file lands in the typed config."""
    path = _write(
        tmp_path,
        """
defaults:
  metric_title: Untitled metric
output: out/mail.html
header_logo: https://example.invalid/logo.png
title: Weekly update
headline: Numbers are in
body: |
  Hello
  [METRIC_ATTACH_CARD]
metric:
  title: Activation
  description: "A | B"
cta:
  text: Open
  link: https://example.invalid/dash
footer:
  name: Sam
  market: North
        """,
    )
    config = load_message_config(path)
    assert config.body == "Hello\n[METRIC_ATTACH_CARD]\n"
    assert config.output == Path("out/mail.html")
    assert config.title == "Weekly update"
    assert config.metric.title == "Activation"
    assert config.metric.description == "A | B"
    assert config.defaults.title == "Untitled metric"
    assert config.defaults.description == "Description not set."
    assert config.cta.link == "https://example.invalid/dash"
    assert config.cta.description == ""
    assert config.footer.name == "Sam"
    assert config.footer.logo == ""


def test_load_minimal_message_uses_defaults(tmp_path: Path) -> None:
    """Only ``body`` is required; everything else has a default."""
    config = load_message_config(_write(tmp_path, "body: Hi"))
    assert config.output == Path("public/notification.html")
    assert config.metric.title == ""
    assert config.defaults.title == "Metric Update"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing message file is reported with its path."""
    with pytest.raises(FileNotFoundError, match="missing.yaml"):
        load_message_config(tmp_path / "missing.yaml")


def test_missing_body_raises(tmp_path: Path) -> None:
    """A message file without body text is rejected."""
    with pytest.raises(MessageConfigError, match="body"):
        load_message_config(_write(tmp_path, "title: Hi"))


def test_non_mapping_block_raises(tmp_path: Path) -> None:
    """Nested blocks must be mappings."""
    with pytest.raises(MessageConfigError, match="'metric' must be a mapping"):
        load_message_config(_write(tmp_path, "body: Hi\nmetric:\n  - a\n  - b"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is a type error."""
    with pytest.raises(TypeError):
        load_message_config(_write(tmp_path, "- body\n- title"))
