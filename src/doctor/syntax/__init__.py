from .models import (
    Span,
    TextSegment,
    InlineTag,
    BodyItem,
    Description,
    BlockTag,
    DocComment,
)
from .errors import DocCommentError, MalformedComment, UnterminatedInlineTag
from .protocols import DocCommentParserProtocol, DocCommentSerializerProtocol

__all__ = [
    "Span",
    "TextSegment",
    "InlineTag",
    "BodyItem",
    "Description",
    "BlockTag",
    "DocComment",
    # Errors
    "DocCommentError",
    "MalformedComment",
    "UnterminatedInlineTag",
    # Protocols
    "DocCommentParserProtocol",
    "DocCommentSerializerProtocol",
]
