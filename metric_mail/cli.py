"""Cyclopts CLI entrypoint for rendering notification emails and fragments.

The ``mail`` console script defined here renders a complete notification
email from a YAML message file, or prints the HTML produced for body text and
metric cards so authors can check their markup before sending. Options can
also be supplied through ``INPUT_*`` environment variables.

Examples
--------
Render the default message file:

>>> from metric_mail.cli import main
>>> main()  # doctest: +SKIP

Preview a metric card:

>>> from metric_mail.cli import app
>>> app(["card", "--title", "Reach", "--description", "A | B"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_message_config
from .message import MessageBuilder
from .renderer import render_body, render_metric_card

DEFAULT_CONFIG = Path("config/message.yaml")

app = App(name="mail", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_text(value: str, path: Path | None, *, option: str) -> str:
    """Return inline text or the contents of ``path``, rejecting both at once."""
    if path is None:
        return value
    if value:
        msg = f"Pass either --{option} or --{option}-file, not both."
        raise ValueError(msg)
    return path.read_text(encoding="utf-8")


@app.command(help="Render a notification email from a YAML message file.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to message file", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Render the configured message and write it to disk.

    Parameters
    ----------
    config : Path, optional
        Path to the ``message.yaml`` file (overridable via ``INPUT_CONFIG``).
    output : Path or None, optional
        Override for the HTML output path declared in the message file.

    Returns
    -------
    None
        Writes the rendered document and prints its path.
    """
    message = load_message_config(config)
    if output is not None:
        message.output = output
    written = MessageBuilder(message).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the HTML rendered for a body text file.")
def body(
    path: typ.Annotated[Path, Parameter(help="File containing the body text")],
    *,
    metric_title: typ.Annotated[
        str, Parameter(help="Title for injected metric cards")
    ] = "",
    metric_description: typ.Annotated[
        str, Parameter(help="Description for injected metric cards")
    ] = "",
    metric_description_file: typ.Annotated[
        Path | None, Parameter(help="Read the card description from a file")
    ] = None,
) -> None:
    """Render body text, including any ``[METRIC_ATTACH_CARD]`` lines.

    Raises
    ------
    ValueError
        If both ``metric_description`` and ``metric_description_file`` are
        supplied.
    """
    description = _resolve_text(
        metric_description, metric_description_file, option="metric-description"
    )
    text = path.read_text(encoding="utf-8")
    print(render_body(text, metric_title, description))


@app.command(help="Print the HTML rendered for a single metric card.")
def card(
    *,
    title: typ.Annotated[str, Parameter(help="Card title")] = "",
    description: typ.Annotated[
        str, Parameter(help="Card description in the notification dialect")
    ] = "",
    description_file: typ.Annotated[
        Path | None, Parameter(help="Read the card description from a file")
    ] = None,
) -> None:
    """Render a standalone metric card.

    Raises
    ------
    ValueError
        If both ``description`` and ``description_file`` are supplied.
    """
    text = _resolve_text(description, description_file, option="description")
    print(render_metric_card(title, text))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``mail`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
