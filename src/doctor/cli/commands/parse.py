from pathlib import Path
from typing import Optional

import typer

from doctor.cli.factories import make_config, make_parser, make_serializer
from doctor.cli.rendering import format_tree_data
from doctor.cli.sources import read_comment_file
from doctor.common import bus
from doctor.config import OUTPUT_FORMATS
from doctor.syntax import DocCommentError


def parse_command(
    path: Path = typer.Argument(..., help="File holding exactly one doc comment."),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: json or yaml. Defaults to [tool.doctor] format.",
    ),
    offsets: bool = typer.Option(
        False,
        "--offsets",
        help="Include the buffer offsets of every span in the output.",
    ),
):
    config = make_config()
    output_format = output_format or config.format
    if output_format not in OUTPUT_FORMATS:
        bus.error(
            "parse.format.invalid",
            format=output_format,
            choices=", ".join(OUTPUT_FORMATS),
        )
        raise typer.Exit(code=1)

    text = read_comment_file(path)
    if text is None:
        raise typer.Exit(code=1)

    try:
        doc = make_parser().parse(text)
    except DocCommentError as e:
        bus.error("parse.error", path=path, error=e)
        raise typer.Exit(code=1)

    serializer = make_serializer()
    data = serializer.to_transfer_data(doc) if offsets else serializer.to_view_data(doc)
    typer.echo(format_tree_data(data, output_format))
