import logging

from doctor.syntax import (
    BlockTag,
    Description,
    DocComment,
    DocCommentParserProtocol,
)
from .delimiters import strip_delimiters
from .lines import normalize_lines
from .scanner import scan_body
from .sections import split_sections

log = logging.getLogger(__name__)


class DocCommentParser(DocCommentParserProtocol):
    """
    Parses one `/** ... */` comment into a tag-agnostic DocComment tree.

    The parser holds no state between calls; one instance can be shared
    across threads.
    """

    def parse(self, comment_text: str) -> DocComment:
        interior = strip_delimiters(comment_text)
        lines = normalize_lines(interior)
        description_section, tag_sections = split_sections(lines)

        description = None
        if description_section is not None:
            description = Description(body_items=scan_body(description_section.lines))

        block_tags = tuple(
            BlockTag(
                name=section.name,
                body=scan_body(section.lines, section=str(section.name)),
            )
            for section in tag_sections
        )

        log.debug(
            "Parsed doc comment: %d line(s), description=%s, %d block tag(s)",
            len(lines),
            description is not None,
            len(block_tags),
        )
        return DocComment(description=description, block_tags=block_tags)


def parse(comment_text: str) -> DocComment:
    """
    Parses `comment_text` (the exact comment, markers included).

    Raises:
        MalformedComment: the opening or closing marker is missing.
        UnterminatedInlineTag: an inline tag is still open when its section ends.
    """
    return DocCommentParser().parse(comment_text)
