import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from doctor.syntax import Span
from .lines import NormalizedLine, HORIZONTAL_WHITESPACE

log = logging.getLogger(__name__)

TAG_SIGIL = "@"
IDENTIFIER_PUNCTUATION = "-._"


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in IDENTIFIER_PUNCTUATION


def scan_identifier(source: str, pos: int, end: int) -> int:
    """Returns the offset where the identifier run starting at `pos` stops."""
    while pos < end and is_identifier_char(source[pos]):
        pos += 1
    return pos


@dataclass
class Section:
    # None marks the description section.
    name: Optional[Span] = None
    lines: List[NormalizedLine] = field(default_factory=list)


def _match_block_start(line: NormalizedLine) -> Optional[Tuple[Span, Optional[NormalizedLine]]]:
    content = line.content
    source, start, end = content.source, content.start, content.end
    if start >= end or source[start] != TAG_SIGIL:
        return None

    name_end = scan_identifier(source, start + 1, end)
    if name_end == start + 1:
        return None

    rest_start = name_end
    if rest_start < end and source[rest_start] in HORIZONTAL_WHITESPACE:
        rest_start += 1

    first_line = None
    if rest_start < end:
        first_line = NormalizedLine(Span(source, rest_start, end), line.terminator)
    return Span(source, start + 1, name_end), first_line


def split_sections(
    lines: Sequence[NormalizedLine],
) -> Tuple[Optional[Section], List[Section]]:
    """
    Groups normalized lines into the description and the block-tag sections.

    Lines are classified before any inline tag is scanned, so a line that
    continues an open inline tag but starts with `@word` still opens a new
    block tag.
    """
    description = Section()
    block_tags: List[Section] = []
    current = description

    for line in lines:
        match = _match_block_start(line)
        if match is None:
            current.lines.append(line)
            continue

        name, first_line = match
        log.debug("Block tag '@%s' starts at offset %d", name, name.start - 1)
        current = Section(name=name)
        if first_line is not None:
            current.lines.append(first_line)
        block_tags.append(current)

    return (description if description.lines else None), block_tags
