"""Render the notification markup dialect into email-safe HTML.

This package converts author text (emphasis markers, ``---`` rules,
``[METRIC_ATTACH_CARD]`` placeholders, pipe-delimited lists, and
``[CODE] … [/CODE]`` segments) into table-based HTML fragments, and builds
complete notification emails from YAML message files.

Exports
-------
- ``render_body``: Render body text, injecting metric cards at placeholders.
- ``render_metric_card``: Render a standalone metric card.
- ``format_inline``: Apply ``**bold**`` and ``*italic*`` emphasis to a line.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from metric_mail import render_body
>>> render_body("**Hi**")
'<p style="margin: 0 0 15px 0;"><b>Hi</b></p>'
"""

from __future__ import annotations

from .cli import app, main
from .inline import format_inline
from .renderer import render_body, render_metric_card

__all__ = ["app", "format_inline", "main", "render_body", "render_metric_card"]
