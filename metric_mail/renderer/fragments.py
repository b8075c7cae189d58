"""Render notification body text and metric cards into HTML fragments."""

from __future__ import annotations

import functools
import typing as typ

from metric_mail._constants import DEFAULT_METRIC_DESCRIPTION, DEFAULT_METRIC_TITLE
from metric_mail.markup_parser import parse_blocks, parse_metric_card
from metric_mail.renderer.environment import build_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment


class FragmentRenderer:
    """Render dialect text into email-safe, table-based HTML fragments."""

    def __init__(
        self, *, templates_dir: Path | None = None, env: Environment | None = None
    ) -> None:
        """Initialize the renderer and load the fragment templates.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the Jinja templates; defaults to the package
            templates.
        env : Environment, optional
            Pre-built environment to share with another renderer; takes
            precedence over ``templates_dir``.
        """
        self.env = env or build_environment(templates_dir)
        self.body_template = self.env.get_template("body.jinja")
        self.card_template = self.env.get_template("metric_card.jinja")

    def render_body(
        self,
        body_text: str,
        metric_title: str | None = "",
        metric_description: str | None = "",
        *,
        fallback_title: str = DEFAULT_METRIC_TITLE,
        fallback_description: str = DEFAULT_METRIC_DESCRIPTION,
    ) -> str:
        """Render body text, injecting a metric card at each placeholder line.

        Parameters
        ----------
        body_text : str
            Raw body text in the notification dialect.
        metric_title : str or None, optional
            Title for cards injected at ``[METRIC_ATTACH_CARD]`` lines.
        metric_description : str or None, optional
            Raw description for injected cards.
        fallback_title : str, optional
            Title used when ``metric_title`` is empty.
        fallback_description : str, optional
            Description used when ``metric_description`` is empty.

        Returns
        -------
        str
            Concatenated paragraph, separator, and card fragments in line
            order. Blank lines contribute nothing.
        """

        def _metric_card() -> str:
            return self.render_metric_card(
                metric_title,
                metric_description,
                fallback_title=fallback_title,
                fallback_description=fallback_description,
            )

        return self.body_template.render(
            blocks=parse_blocks(body_text), metric_card=_metric_card
        )

    def render_metric_card(
        self,
        title: str | None = "",
        description: str | None = "",
        *,
        fallback_title: str = DEFAULT_METRIC_TITLE,
        fallback_description: str = DEFAULT_METRIC_DESCRIPTION,
    ) -> str:
        """Render a single self-contained metric card table."""
        card = parse_metric_card(
            title,
            description,
            fallback_title=fallback_title,
            fallback_description=fallback_description,
        )
        return self.card_template.render(card=card)


@functools.cache
def _shared_renderer() -> FragmentRenderer:
    """Return the package-wide renderer built from the bundled templates."""
    return FragmentRenderer()


def render_body(
    body_text: str,
    metric_title: str | None = "",
    metric_description: str | None = "",
    *,
    fallback_title: str = DEFAULT_METRIC_TITLE,
    fallback_description: str = DEFAULT_METRIC_DESCRIPTION,
) -> str:
    """Render body text with the bundled templates.

    See :meth:`FragmentRenderer.render_body` for parameter details.

    Examples
    --------
    >>> render_body("Hello **team**\\n\\n---")
    '<p style="margin: 0 0 15px 0;">Hello <b>team</b></p><div style="margin: 20px 0; border-top: 1px solid #e0e0e0;"></div>'
    """
    return _shared_renderer().render_body(
        body_text,
        metric_title,
        metric_description,
        fallback_title=fallback_title,
        fallback_description=fallback_description,
    )


def render_metric_card(
    title: str | None = "",
    description: str | None = "",
    *,
    fallback_title: str = DEFAULT_METRIC_TITLE,
    fallback_description: str = DEFAULT_METRIC_DESCRIPTION,
) -> str:
    """Render a metric card with the bundled templates."""
    return _shared_renderer().render_metric_card(
        title,
        description,
        fallback_title=fallback_title,
        fallback_description=fallback_description,
    )


__all__ = ["FragmentRenderer", "render_body", "render_metric_card"]
