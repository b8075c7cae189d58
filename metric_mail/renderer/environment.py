"""Jinja environment shared by the fragment and message renderers."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from metric_mail import _constants
from metric_mail.inline import format_bold, format_inline
from metric_mail.markup_parser import (
    ListSection,
    MetricCardPlaceholder,
    Paragraph,
    ParagraphSection,
    Separator,
)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def nl2br(text: str) -> str:
    """Replace each newline with an explicit ``<br>`` break."""
    return text.replace("\n", "<br>")


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment with the dialect filters and tests registered.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory containing the ``.jinja`` templates. Defaults to
        ``metric_mail/templates``.

    Returns
    -------
    Environment
        Environment exposing ``inline``, ``bold`` and ``nl2br`` filters, block
        and section tests, and the brand colour constants as globals.

    Notes
    -----
    Autoescaping is disabled: author text is trusted markup and must reach
    the email untouched. Templates escape attribute values explicitly.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(inline=format_inline, bold=format_bold, nl2br=nl2br)
    env.tests.update(
        paragraph=lambda value: isinstance(value, Paragraph),
        separator=lambda value: isinstance(value, Separator),
        metric_card=lambda value: isinstance(value, MetricCardPlaceholder),
        list_section=lambda value: isinstance(value, ListSection),
        paragraph_section=lambda value: isinstance(value, ParagraphSection),
    )
    env.globals.update(
        brand_magenta=_constants.BRAND_MAGENTA,
        brand_dark_magenta=_constants.BRAND_DARK_MAGENTA,
        brand_light_pink=_constants.BRAND_LIGHT_PINK,
        brand_code_pink=_constants.BRAND_CODE_PINK,
    )
    return env


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment", "nl2br"]
