from .core import DocCommentParser, parse
from .delimiters import strip_delimiters
from .lines import NormalizedLine, normalize_lines, strip_line_marker
from .sections import Section, split_sections
from .scanner import BodyScanner, ScanState, scan_body
from .serializers import DocCommentSerializer

__all__ = [
    "DocCommentParser",
    "parse",
    "strip_delimiters",
    "NormalizedLine",
    "normalize_lines",
    "strip_line_marker",
    "Section",
    "split_sections",
    "BodyScanner",
    "ScanState",
    "scan_body",
    "DocCommentSerializer",
]
