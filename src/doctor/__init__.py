from .syntax import (
    Span,
    TextSegment,
    InlineTag,
    BodyItem,
    Description,
    BlockTag,
    DocComment,
    DocCommentError,
    MalformedComment,
    UnterminatedInlineTag,
)
from .parser import DocCommentParser, DocCommentSerializer, parse

__all__ = [
    "parse",
    "DocCommentParser",
    "DocCommentSerializer",
    "Span",
    "TextSegment",
    "InlineTag",
    "BodyItem",
    "Description",
    "BlockTag",
    "DocComment",
    "DocCommentError",
    "MalformedComment",
    "UnterminatedInlineTag",
]
