import click

from .._version import __version__
from .cli_send import send


@click.group(invoke_without_command=True)
@click.version_option(__version__, "--version", "-V", prog_name="httpbody")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Send HTTP requests with form, raw, file or multipart bodies."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(send)
