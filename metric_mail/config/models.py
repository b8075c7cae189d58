"""Typed dataclasses describing a notification message file."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from metric_mail._constants import DEFAULT_METRIC_DESCRIPTION, DEFAULT_METRIC_TITLE


class MessageConfigError(ValueError):
    """Raised when the message configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class MetricDefaults:
    """Fallback text substituted when the metric card fields are empty."""

    title: str = DEFAULT_METRIC_TITLE
    description: str = DEFAULT_METRIC_DESCRIPTION


@dc.dataclass(slots=True)
class MetricConfig:
    """Title and raw dialect description for the attached metric card."""

    title: str = ""
    description: str = ""


@dc.dataclass(slots=True)
class CTAConfig:
    """Call-to-action button shown below the body."""

    text: str = ""
    link: str = ""
    description: str = ""


@dc.dataclass(slots=True)
class FooterConfig:
    """Sender signature rendered in the message footer."""

    logo: str = ""
    name: str = ""
    title: str = ""
    market: str = ""


@dc.dataclass(slots=True)
class MessageConfig:
    """Complete notification message loaded from YAML.

    Attributes
    ----------
    body : str
        Raw body text in the notification dialect.
    output : Path
        Destination of the rendered HTML document.
    header_logo : str
        Image URL shown in the header band.
    title : str
        Document and header title.
    headline : str
        Headline shown above the body.
    metric : MetricConfig
        Inputs for cards injected at ``[METRIC_ATTACH_CARD]`` lines.
    defaults : MetricDefaults
        Fallback card title and description.
    cta : CTAConfig
        Call-to-action button settings.
    footer : FooterConfig
        Footer signature settings.
    """

    body: str
    output: Path = Path("public/notification.html")
    header_logo: str = ""
    title: str = ""
    headline: str = ""
    metric: MetricConfig = dc.field(default_factory=MetricConfig)
    defaults: MetricDefaults = dc.field(default_factory=MetricDefaults)
    cta: CTAConfig = dc.field(default_factory=CTAConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)


__all__ = [
    "CTAConfig",
    "FooterConfig",
    "MessageConfig",
    "MessageConfigError",
    "MetricConfig",
    "MetricDefaults",
]
