import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from doctor.syntax import BodyItem, InlineTag, Span, TextSegment, UnterminatedInlineTag
from .lines import NormalizedLine, HORIZONTAL_WHITESPACE
from .sections import is_identifier_char, scan_identifier

log = logging.getLogger(__name__)

ESCAPE = "\\"
INLINE_OPEN = "{@"
INLINE_CLOSE = "}"


class ScanState(str, Enum):
    TEXT = "text"
    IN_INLINE_TAG = "in_inline_tag"


def find_inline_open(source: str, pos: int, end: int) -> int:
    """Offset of the next unescaped `{@name`, or -1."""
    escaped = False
    for i in range(pos, end - 2):
        ch = source[i]
        if escaped:
            escaped = False
        elif ch == ESCAPE:
            escaped = True
        elif source.startswith(INLINE_OPEN, i) and is_identifier_char(source[i + 2]):
            return i
    return -1


def find_inline_close(source: str, pos: int, end: int) -> int:
    """Offset of the next unescaped `}`, or -1."""
    escaped = False
    for i in range(pos, end):
        ch = source[i]
        if escaped:
            escaped = False
        elif ch == ESCAPE:
            escaped = True
        elif ch == INLINE_CLOSE:
            return i
    return -1


class BodyScanner:
    """
    Interleaves text segments and inline tags across the lines of one section.

    The scanner is a two-state machine. In TEXT it looks for `{@`; in
    IN_INLINE_TAG it looks for the first unescaped `}`, consuming whole lines
    into the tag body until it finds one. Nested `{@` inside a body is not
    recognized.
    """

    def __init__(self, section: Optional[str] = None):
        self.section = section
        self._state = ScanState.TEXT
        self._items: List[BodyItem] = []
        self._tag_name: Optional[Span] = None
        self._tag_line = 0
        self._body_lines: List[Span] = []

    def scan(self, lines: Sequence[NormalizedLine]) -> Tuple[BodyItem, ...]:
        for index, line in enumerate(lines):
            self._scan_line(index, line)

        if self._state is ScanState.IN_INLINE_TAG:
            raise UnterminatedInlineTag(
                str(self._tag_name), self._tag_line, section=self.section
            )
        return tuple(self._items)

    def _scan_line(self, index: int, line: NormalizedLine) -> None:
        content = line.content
        source, pos, end = content.source, content.start, content.end

        while True:
            if self._state is ScanState.TEXT:
                marker = find_inline_open(source, pos, end)
                if marker == -1:
                    # The rest of the line keeps its terminator, which directly
                    # follows the content in the buffer.
                    segment_end = end + len(line.terminator)
                    if segment_end > pos:
                        self._items.append(TextSegment(Span(source, pos, segment_end)))
                    return

                if marker > pos:
                    self._items.append(TextSegment(Span(source, pos, marker)))
                pos = self._open_tag(index, source, marker, end)
                continue

            close = find_inline_close(source, pos, end)
            if close == -1:
                self._body_lines.append(Span(source, pos, end))
                return

            body = Span(source, pos, close)
            if body.text.strip(HORIZONTAL_WHITESPACE):
                self._body_lines.append(body)
            self._close_tag()
            pos = close + 1

    def _open_tag(self, index: int, source: str, marker: int, end: int) -> int:
        name_start = marker + len(INLINE_OPEN)
        name_end = scan_identifier(source, name_start, end)
        self._tag_name = Span(source, name_start, name_end)
        self._tag_line = index
        self._body_lines = []
        self._state = ScanState.IN_INLINE_TAG
        log.debug("Inline tag '{@%s' opened on line %d", self._tag_name, index)

        if name_end < end and source[name_end] in HORIZONTAL_WHITESPACE:
            return name_end + 1
        return name_end

    def _close_tag(self) -> None:
        self._items.append(InlineTag(self._tag_name, tuple(self._body_lines)))
        self._tag_name = None
        self._body_lines = []
        self._state = ScanState.TEXT


def scan_body(
    lines: Sequence[NormalizedLine], section: Optional[str] = None
) -> Tuple[BodyItem, ...]:
    return BodyScanner(section).scan(lines)
