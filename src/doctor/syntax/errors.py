from typing import Optional


class DocCommentError(Exception):
    pass


class MalformedComment(DocCommentError):
    def __init__(self, reason: str):
        self.reason = reason
        marker = "/**" if reason == "opening" else "*/"
        super().__init__(f"Doc comment is missing its {reason} delimiter '{marker}'.")


class UnterminatedInlineTag(DocCommentError):
    def __init__(self, name: str, line: int, section: Optional[str] = None):
        self.name = name
        self.line = line
        self.section = section
        where = "the description" if section is None else f"block tag '@{section}'"
        super().__init__(
            f"Inline tag '{{@{name}' opened on line {line} of {where} is never closed."
        )
