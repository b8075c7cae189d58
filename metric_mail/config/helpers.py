"""Utility helpers shared by the message configuration loader."""

from __future__ import annotations

import typing as typ

from .models import MessageConfigError


def _optional_str(value: object | None) -> str:
    """Return ``value`` as a string, or an empty string when missing."""
    if value is None:
        return ""
    return str(value)


def _mapping(
    raw: typ.Mapping[str, typ.Any], key: str
) -> typ.Mapping[str, typ.Any]:
    """Return the nested mapping stored at ``key``, or an empty mapping."""
    value = raw.get(key)
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"'{key}' must be a mapping, got {type(value).__name__}."
            raise MessageConfigError(msg)


__all__ = ["_mapping", "_optional_str"]
