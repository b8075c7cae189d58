"""Load and validate notification message YAML for metric_mail builds.

This subpackage parses a ``message.yaml`` file, applies the metric card
fallbacks, and produces typed dataclasses (:class:`MessageConfig` and its
nested blocks) that :class:`~metric_mail.message.MessageBuilder` consumes.
The primary entry point is :func:`load_message_config`.

Examples
--------
>>> from pathlib import Path
>>> from metric_mail.config import load_message_config
>>> message = load_message_config(Path("config/message.yaml"))  # doctest: +SKIP
>>> message.output  # doctest: +SKIP
PosixPath('public/notification.html')
"""

from .loader import load_message_config
from .models import (
    CTAConfig,
    FooterConfig,
    MessageConfig,
    MessageConfigError,
    MetricConfig,
    MetricDefaults,
)

__all__ = [
    "CTAConfig",
    "FooterConfig",
    "MessageConfig",
    "MessageConfigError",
    "MetricConfig",
    "MetricDefaults",
    "load_message_config",
]
