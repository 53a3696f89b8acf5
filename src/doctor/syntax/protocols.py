from typing import Protocol, Dict, Any

from .models import DocComment


class DocCommentParserProtocol(Protocol):
    def parse(self, comment_text: str) -> DocComment: ...


class DocCommentSerializerProtocol(Protocol):
    """
    Converts a DocComment tree to and from plain data.

    Transfer data is JSON-safe and keeps span offsets, so a tree can be rebuilt
    against the same buffer. View data only keeps text and is meant for humans
    (YAML / JSON output on the command line).
    """

    def to_transfer_data(self, doc: DocComment) -> Dict[str, Any]: ...

    def from_transfer_data(self, data: Dict[str, Any], source: str) -> DocComment: ...

    def to_view_data(self, doc: DocComment) -> Any: ...
