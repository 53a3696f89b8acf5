import json
from typing import Any

import typer

from doctor.common import Renderer, YamlAdapter


class CliRenderer(Renderer):
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return

        color = None
        if level == "success":
            color = typer.colors.GREEN
        elif level == "warning":
            color = typer.colors.YELLOW
        elif level == "error":
            color = typer.colors.RED
        elif level == "debug":
            color = typer.colors.BRIGHT_BLACK  # Dim/Gray for debug

        typer.secho(message, fg=color)


def format_tree_data(data: Any, output_format: str) -> str:
    if output_format == "yaml":
        return YamlAdapter().dump(data).rstrip("\n")
    return json.dumps(data, indent=2, ensure_ascii=False)
