from dataclasses import dataclass
from typing import Iterator, List, Tuple

from doctor.syntax import Span

HORIZONTAL_WHITESPACE = " \t"
CONTINUATION_MARKER = "*"


@dataclass(frozen=True)
class NormalizedLine:
    content: Span
    terminator: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.content.text.strip(HORIZONTAL_WHITESPACE)


def _split_lines(interior: Span) -> Iterator[Tuple[int, int, str]]:
    source = interior.source
    pos = interior.start
    while True:
        newline = source.find("\n", pos, interior.end)
        if newline == -1:
            yield pos, interior.end, ""
            return
        if newline > pos and source[newline - 1] == "\r":
            yield pos, newline - 1, "\r\n"
        else:
            yield pos, newline, "\n"
        pos = newline + 1


def strip_line_marker(source: str, start: int, end: int) -> Span:
    """Strips leading whitespace, one `*` and at most one whitespace after it."""
    pos = start
    while pos < end and source[pos] in HORIZONTAL_WHITESPACE:
        pos += 1
    if pos < end and source[pos] == CONTINUATION_MARKER:
        pos += 1
        if pos < end and source[pos] in HORIZONTAL_WHITESPACE:
            pos += 1
    return Span(source, pos, end)


def normalize_lines(interior: Span) -> List[NormalizedLine]:
    lines = [
        NormalizedLine(strip_line_marker(interior.source, start, end), terminator)
        for start, end, terminator in _split_lines(interior)
    ]

    # The line holding `/**` and the line holding `*/` carry no content
    # in the conventional multi-line layout.
    if lines and lines[0].is_blank:
        lines.pop(0)
    if lines and lines[-1].is_blank:
        lines.pop()
    return lines
