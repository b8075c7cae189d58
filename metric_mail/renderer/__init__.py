"""Jinja-backed rendering of notification markup into HTML fragments."""

from .environment import build_environment
from .fragments import FragmentRenderer, render_body, render_metric_card

__all__ = [
    "FragmentRenderer",
    "build_environment",
    "render_body",
    "render_metric_card",
]
