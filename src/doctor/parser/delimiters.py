from doctor.syntax import Span, MalformedComment

OPENING_MARKER = "/**"
CLOSING_MARKER = "*/"


def strip_delimiters(comment_text: str) -> Span:
    """
    Validates the comment markers and returns the span strictly between them.

    The input must be the exact comment: no whitespace is tolerated before the
    opening marker or after the closing one. In `/**/` the middle `*` belongs
    to both markers, which leaves an empty interior.
    """
    if not comment_text.startswith(OPENING_MARKER):
        raise MalformedComment("opening")
    if not comment_text.endswith(CLOSING_MARKER):
        raise MalformedComment("closing")

    start = len(OPENING_MARKER)
    end = max(start, len(comment_text) - len(CLOSING_MARKER))
    return Span(comment_text, start, end)
