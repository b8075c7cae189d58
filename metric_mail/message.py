"""Notification message rendering pipeline.

This module turns a :class:`~metric_mail.config.MessageConfig` into a complete
HTML email document. It wires the shared Jinja environment, renders the body
through :class:`~metric_mail.renderer.FragmentRenderer` so metric cards are
injected at their placeholder lines, and persists the document. The main
entry point is ``MessageBuilder``.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from metric_mail.config import load_message_config
>>> builder = MessageBuilder(load_message_config(Path("config/message.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/notification.html')

The rendered document contains no timestamps, so identical message files
always produce byte-identical output.
"""

from __future__ import annotations

import typing as typ

from .renderer import FragmentRenderer, build_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import MessageConfig


class MessageBuilder:
    """Render a full notification email from structured config data."""

    def __init__(
        self, message: MessageConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        message : MessageConfig
            Parsed message file; provides header, body, metric card inputs,
            call-to-action, and footer content.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``metric_mail/templates``.
        """
        self.message = message
        self.env = build_environment(templates_dir)
        self.fragments = FragmentRenderer(env=self.env)
        self.template = self.env.get_template("message.jinja")

    def render(self) -> str:
        """Return the complete HTML document as a string."""
        message = self.message
        body_html = self.fragments.render_body(
            message.body,
            message.metric.title,
            message.metric.description,
            fallback_title=message.defaults.title,
            fallback_description=message.defaults.description,
        )
        html = self.template.render(message=message, body_html=body_html)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the message HTML, returning the output path.

        Parent directories are created as needed and the document is written
        as UTF-8; filesystem errors propagate to the caller.
        """
        output_path = self.message.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["MessageBuilder"]
