r"""Parse notification markup into structured blocks and metric cards.

This module powers the metric_mail renderer by splitting body text into
ordered blocks and by breaking a metric card description into its code
segment, description groups, trailing SOC list, and remaining sections. The
dataclasses returned here are what the Jinja fragment templates consume.

Parsing runs in two explicit stages: a group splitter that finds blank-line
boundaries, followed by a classifier that decides between list, paragraph,
code, and SOC content. The code segment is always extracted before grouping,
and only the last group may become a SOC list.

Example
-------
>>> from metric_mail.markup_parser import parse_blocks, parse_metric_card
>>> [type(block).__name__ for block in parse_blocks("Hi\n\n---\n[METRIC_ATTACH_CARD]")]
['Paragraph', 'Separator', 'MetricCardPlaceholder']
>>> card = parse_metric_card("Reach", "Intro text.\n\nEligible SOCs include: A | B")
>>> card.soc_list.title, card.soc_list.items
('Eligible SOCs include:', ['A', 'B'])
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ._constants import (
    CODE_END_TOKEN,
    CODE_START_TOKEN,
    DEFAULT_METRIC_DESCRIPTION,
    DEFAULT_METRIC_TITLE,
    DEFAULT_SOC_TITLE,
    LIST_DELIMITER,
    METRIC_CARD_TOKEN,
    SEPARATOR_TOKEN,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

CODE_SEGMENT_PATTERN = re.compile(
    rf"{re.escape(CODE_START_TOKEN)}(.*?){re.escape(CODE_END_TOKEN)}", re.DOTALL
)
GROUP_BREAK_PATTERN = re.compile(r"\n\s*\n")
SOC_TITLE_PATTERN = re.compile(r"^(.*?):")


@dc.dataclass(frozen=True, slots=True)
class Paragraph:
    """Body line rendered as a paragraph after inline formatting.

    Attributes
    ----------
    text : str
        Trimmed author text for the line.
    """

    text: str


@dc.dataclass(frozen=True, slots=True)
class Separator:
    """Horizontal rule produced by a ``---`` line."""


@dc.dataclass(frozen=True, slots=True)
class MetricCardPlaceholder:
    """Position where the metric card is injected into the body."""


Block = Paragraph | Separator | MetricCardPlaceholder


@dc.dataclass(frozen=True, slots=True)
class CodeSegment:
    """Trimmed contents of the first ``[CODE] … [/CODE]`` span."""

    content: str


@dc.dataclass(frozen=True, slots=True)
class SocList:
    """Titled itemised list taken from the last description group.

    Attributes
    ----------
    title : str
        Heading shown above the list, always ending with a colon.
    items : list[str]
        Raw item text with any echoed title prefix removed.
    """

    title: str
    items: list[str]


@dc.dataclass(frozen=True, slots=True)
class ListSection:
    """Description group rendered as a bullet list."""

    items: list[str]


@dc.dataclass(frozen=True, slots=True)
class ParagraphSection:
    """Description group rendered as a single paragraph."""

    text: str


Section = ListSection | ParagraphSection


@dc.dataclass(frozen=True, slots=True)
class MetricCardModel:
    """Fully parsed metric card handed to the card template.

    Attributes
    ----------
    title : str
        Card heading after fallback substitution.
    sections : list[Section]
        Description groups in their original order, excluding the SOC group.
    code : CodeSegment or None
        Extracted code segment, if the description contained one.
    soc_list : SocList or None
        Trailing SOC list, if the last group contained the list delimiter.
    """

    title: str
    sections: list[Section]
    code: CodeSegment | None
    soc_list: SocList | None


def parse_blocks(text: str) -> list[Block]:
    """Split body text into ordered blocks, dropping blank lines.

    Parameters
    ----------
    text : str
        Raw body text as typed by the author.

    Returns
    -------
    list[Block]
        One block per non-empty line, in input order.
    """
    blocks: list[Block] = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if line == METRIC_CARD_TOKEN:
            blocks.append(MetricCardPlaceholder())
        elif not line:
            continue
        elif line == SEPARATOR_TOKEN:
            blocks.append(Separator())
        else:
            blocks.append(Paragraph(text=line))
    return blocks


def extract_code_segment(description: str) -> tuple[CodeSegment | None, str]:
    """Return the first code segment and the description without it.

    A span whose interior is empty is not treated as a code segment, and an
    unterminated ``[CODE]`` leaves the description untouched.
    """
    match = CODE_SEGMENT_PATTERN.search(description)
    if match is None or not match.group(1):
        return None, description
    remainder = description[: match.start()] + description[match.end() :]
    return CodeSegment(content=match.group(1).strip()), remainder.strip()


def split_groups(text: str) -> list[str]:
    """Split text on blank-line boundaries into trimmed groups.

    Empty groups are kept: leading or trailing blank lines yield an empty
    first or last group, and an empty last group means there is no SOC list.
    """
    return [group.strip() for group in GROUP_BREAK_PATTERN.split(text)]


def _split_items(group: str) -> list[str]:
    items = (item.strip() for item in group.split(LIST_DELIMITER))
    return [item for item in items if item]


def extract_soc_list(
    groups: cabc.Sequence[str],
) -> tuple[SocList | None, list[str]]:
    """Split off the trailing SOC list when the last group is pipe-delimited.

    Parameters
    ----------
    groups : Sequence[str]
        Description groups produced by :func:`split_groups`.

    Returns
    -------
    tuple[SocList | None, list[str]]
        The SOC list (or ``None``) and the groups that remain for section
        rendering.

    Notes
    -----
    The title is the text before the first colon on the group's first line.
    Items starting with that literal ``<title>:`` prefix have it removed; the
    comparison is exact and case-sensitive.
    """
    if not groups or LIST_DELIMITER not in groups[-1]:
        return None, list(groups)

    source = groups[-1]
    match = SOC_TITLE_PATTERN.match(source)
    title = f"{match.group(1).strip()}:" if match else DEFAULT_SOC_TITLE
    items: list[str] = []
    for item in _split_items(source):
        if match and item.startswith(match.group(0)):
            item = item[len(match.group(0)) :].strip()
        items.append(item)
    return SocList(title=title, items=items), list(groups[:-1])


def build_sections(groups: cabc.Iterable[str]) -> list[Section]:
    """Classify each non-empty group as a bullet list or a paragraph."""
    sections: list[Section] = []
    for group in groups:
        if not group:
            continue
        if LIST_DELIMITER in group:
            sections.append(ListSection(items=_split_items(group)))
        else:
            sections.append(ParagraphSection(text=group))
    return sections


def parse_metric_card(
    title: str | None,
    description: str | None,
    *,
    fallback_title: str = DEFAULT_METRIC_TITLE,
    fallback_description: str = DEFAULT_METRIC_DESCRIPTION,
) -> MetricCardModel:
    """Parse a metric card title and description into a card model.

    Parameters
    ----------
    title : str or None
        Card heading; ``fallback_title`` is used when empty or missing.
    description : str or None
        Raw description in the notification dialect; ``fallback_description``
        is used when empty or missing.
    fallback_title : str, optional
        Defaults to ``"Metric Update"``.
    fallback_description : str, optional
        Defaults to ``"Description not set."``.

    Returns
    -------
    MetricCardModel
        Title, sections, optional code segment, and optional SOC list.
    """
    code, remainder = extract_code_segment(description or fallback_description)
    soc_list, section_groups = extract_soc_list(split_groups(remainder))
    return MetricCardModel(
        title=title or fallback_title,
        sections=build_sections(section_groups),
        code=code,
        soc_list=soc_list,
    )


__all__ = [
    "CODE_SEGMENT_PATTERN",
    "GROUP_BREAK_PATTERN",
    "SOC_TITLE_PATTERN",
    "Block",
    "CodeSegment",
    "ListSection",
    "MetricCardModel",
    "MetricCardPlaceholder",
    "Paragraph",
    "ParagraphSection",
    "Section",
    "Separator",
    "SocList",
    "build_sections",
    "extract_code_segment",
    "extract_soc_list",
    "parse_blocks",
    "parse_metric_card",
    "split_groups",
]
