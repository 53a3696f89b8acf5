from pathlib import Path
from typing import Iterable, List, Optional

from doctor.common import bus


def read_comment_file(path: Path) -> Optional[str]:
    """
    Reads a file holding exactly one doc comment.

    Surrounding whitespace (typically the trailing newline) is dropped so the
    parser receives the exact comment span; span offsets are relative to it.
    """
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        bus.error("file.unreadable", path=path, error=e)
        return None


def collect_comment_files(paths: Iterable[str], pattern: str) -> List[Path]:
    files: List[Path] = []
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob(pattern) if p.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            bus.warning("check.path.missing", path=path)
    return files
