"""Load a notification message YAML file into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _mapping, _optional_str
from .models import (
    CTAConfig,
    FooterConfig,
    MessageConfig,
    MessageConfigError,
    MetricConfig,
    MetricDefaults,
)


def load_message_config(path: Path) -> MessageConfig:
    """Load the YAML file describing a notification message.

    Parameters
    ----------
    path : Path
        Filesystem path to the message file (for example,
        ``config/message.yaml``).

    Returns
    -------
    MessageConfig
        Parsed message including body text, metric card inputs, fallbacks,
        call-to-action, footer, and output path.

    Raises
    ------
    FileNotFoundError
        If the message file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    MessageConfigError
        If ``body`` is missing or a nested block is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_message_config(Path("config/message.yaml"))  # doctest: +SKIP
    >>> config.metric.title  # doctest: +SKIP
    'Activation'
    """
    if not path.exists():
        msg = f"Message file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    body = raw.get("body")
    if body is None:
        msg = f"Message file '{path}' does not define 'body'."
        raise MessageConfigError(msg)

    defaults_raw = _mapping(raw, "defaults")
    base_defaults = MetricDefaults()
    defaults = MetricDefaults(
        title=_optional_str(defaults_raw.get("metric_title")) or base_defaults.title,
        description=_optional_str(defaults_raw.get("metric_description"))
        or base_defaults.description,
    )

    metric_raw = _mapping(raw, "metric")
    cta_raw = _mapping(raw, "cta")
    footer_raw = _mapping(raw, "footer")

    return MessageConfig(
        body=str(body),
        output=Path(raw.get("output") or "public/notification.html"),
        header_logo=_optional_str(raw.get("header_logo")),
        title=_optional_str(raw.get("title")),
        headline=_optional_str(raw.get("headline")),
        metric=MetricConfig(
            title=_optional_str(metric_raw.get("title")),
            description=_optional_str(metric_raw.get("description")),
        ),
        defaults=defaults,
        cta=CTAConfig(
            text=_optional_str(cta_raw.get("text")),
            link=_optional_str(cta_raw.get("link")),
            description=_optional_str(cta_raw.get("description")),
        ),
        footer=FooterConfig(
            logo=_optional_str(footer_raw.get("logo")),
            name=_optional_str(footer_raw.get("name")),
            title=_optional_str(footer_raw.get("title")),
            market=_optional_str(footer_raw.get("market")),
        ),
    )


__all__ = ["load_message_config"]
