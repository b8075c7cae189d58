r"""Inline emphasis for the notification markup dialect.

``**text**`` becomes ``<b>text</b>`` and ``*text*`` becomes ``<i>text</i>``.
Each marker is substituted in a single non-greedy pass, so emphasis never
nests and unmatched markers are left as literal asterisks. Author text is
trusted; nothing is escaped.

Example
-------
>>> from metric_mail.inline import format_inline
>>> format_inline("a **bold** and *quiet* word")
'a <b>bold</b> and <i>quiet</i> word'
"""

from __future__ import annotations

import re

BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.*?)\*")


def format_bold(text: str) -> str:
    """Wrap every shortest ``**…**`` span in ``<b>`` tags."""
    return BOLD_PATTERN.sub(r"<b>\1</b>", text)


def format_inline(text: str) -> str:
    """Apply bold then italic emphasis to a single line of author text.

    Parameters
    ----------
    text : str
        Line of body text, already trimmed by the caller.

    Returns
    -------
    str
        The line with emphasis markers replaced by ``<b>``/``<i>`` markup.
    """
    return ITALIC_PATTERN.sub(r"<i>\1</i>", format_bold(text))


__all__ = ["BOLD_PATTERN", "ITALIC_PATTERN", "format_bold", "format_inline"]
