"""Select command implementation."""

import click

from surveyor import Select, with_page_size
from surveyor.commands.utils import run_prompt


@click.command()
@click.argument("message")
@click.argument("options", nargs=-1, required=True)
@click.option("--default", "-d", help="Option selected when the user just presses Enter")
@click.option("--help-text", default="", help="Help shown when the user presses '?'")
@click.option("--page-size", type=click.IntRange(min=1), help="Options shown per page")
@click.option("--vim", is_flag=True, help="Start with j/k navigation enabled")
@click.pass_context
def select(ctx, message: str, options: tuple[str, ...], default: str | None,
           help_text: str, page_size: int | None, vim: bool):
    """Pick one of OPTIONS and print it."""
    prompt = Select(message, list(options), default=default, help=help_text, vim_mode=vim)
    opts = [with_page_size(page_size)] if page_size else []
    answer = run_prompt(ctx, prompt, *opts)
    click.echo(answer)
