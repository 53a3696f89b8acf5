import logging

import typer

from doctor.common import bus, MESSAGES
from .rendering import CliRenderer

# Import commands
from .commands.check import check_command
from .commands.parse import parse_command

app = typer.Typer(
    name="doctor",
    help=MESSAGES["cli.app.description"],
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=MESSAGES["cli.option.verbose.help"]
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    cli_renderer = CliRenderer(verbose=verbose)
    bus.set_renderer(cli_renderer)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Register commands
app.command(name="parse", help=MESSAGES["cli.command.parse.help"])(parse_command)
app.command(name="check", help=MESSAGES["cli.command.check.help"])(check_command)


if __name__ == "__main__":
    app()
