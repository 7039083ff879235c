"""Input command implementation."""

import click

from surveyor import Input, required, to_lower, with_validator
from surveyor.commands.utils import run_prompt


@click.command(name="input")
@click.argument("message")
@click.option("--default", "-d", default="", help="Answer used for an empty line")
@click.option("--help-text", default="", help="Help shown when the user presses '?'")
@click.option("--required", "is_required", is_flag=True, help="Reject empty answers")
@click.option("--lower", is_flag=True, help="Lower-case the answer")
@click.pass_context
def input_command(ctx, message: str, default: str, help_text: str, is_required: bool, lower: bool):
    """Read one line of text and print it."""
    prompt = Input(message, default=default, help=help_text)
    opts = [with_validator(required)] if is_required else []
    answer = run_prompt(ctx, prompt, *opts, transform=to_lower if lower else None)
    click.echo(answer)
