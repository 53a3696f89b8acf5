from typing import List, Optional

import typer

from doctor.cli.factories import make_config, make_parser
from doctor.cli.sources import collect_comment_files, read_comment_file
from doctor.common import bus
from doctor.syntax import DocCommentError


def check_command(
    paths: Optional[List[str]] = typer.Argument(
        None, help="Files or directories to check. Defaults to [tool.doctor] paths."
    ),
):
    config = make_config()
    files = collect_comment_files(paths or config.paths, config.glob)
    if not files:
        bus.warning("check.no_files")
        return

    parser = make_parser()
    failed = 0
    for path in files:
        text = read_comment_file(path)
        if text is None:
            failed += 1
            continue
        try:
            parser.parse(text)
        except DocCommentError as e:
            bus.error("check.file.failed", path=path, error=e)
            failed += 1
            continue
        bus.debug("check.file.ok", path=path)

    if failed:
        bus.error("check.summary.failure", failed=failed, count=len(files))
        raise typer.Exit(code=1)
    bus.success("check.summary.success", count=len(files))
