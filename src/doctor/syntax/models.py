from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, eq=False)
class Span:
    """
    A borrowed view into the buffer a doc comment was parsed from.

    Only the buffer reference and the offsets are stored; the text is sliced
    out on demand. The caller owns the buffer and every span produced by a
    parse call refers back to it. Spans compare equal to plain strings (and to
    other spans) holding the same text.
    """

    source: str
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    @property
    def terminator(self) -> str:
        """The line terminator immediately following the span, if any."""
        if self.source.startswith("\r\n", self.end):
            return "\r\n"
        if self.source.startswith("\n", self.end):
            return "\n"
        return ""

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Span):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self) -> str:
        return f"Span({self.text!r} @ {self.start}:{self.end})"


@dataclass(frozen=True)
class TextSegment:
    """Literal text, including the line terminator when it ends its source line."""

    text: Span


@dataclass(frozen=True)
class InlineTag:
    """An annotation embedded in running text, e.g. `{@link Foo}`."""

    name: Span
    body_lines: Tuple[Span, ...] = ()

    def render(self) -> str:
        if not self.body_lines:
            return f"{{@{self.name}}}"

        # Separator and terminators are read back from the buffer.
        # A line that ends at the closing brace has no terminator.
        separator = self.name.source[self.name.end : self.body_lines[0].start]
        parts = [line.text + line.terminator for line in self.body_lines]
        return f"{{@{self.name}{separator}{''.join(parts)}}}"


BodyItem = Union[TextSegment, InlineTag]


@dataclass(frozen=True)
class Description:
    body_items: Tuple[BodyItem, ...] = ()


@dataclass(frozen=True)
class BlockTag:
    name: Span
    body: Tuple[BodyItem, ...] = ()


@dataclass(frozen=True)
class DocComment:
    """Root of the tree produced by parsing one `/** ... */` comment."""

    description: Optional[Description] = None
    block_tags: Tuple[BlockTag, ...] = ()
