"""
stacklab - Stack and Expression Lab Command-Line Interface
==========================================================

This module implements the command-line interface for the lab. It offers
one-shot commands for the expression pipeline and an interactive shell
around a bounded stack.

Usage Examples
--------------
Convert infix to postfix:
    $ stacklab convert "(2+3)*4"
    2 3 + 4 *

Evaluate postfix:
    $ stacklab eval "2 3 + 4 *"
    20

Both at once:
    $ stacklab calc -s "2^3^2"
    2 3 2 ^ ^
    512

Interactive session with a 5-element stack:
    $ stacklab shell -c 5
    stacklab> push 7
    7 pushed to stack.

Verbose mode (debug logging of every algorithm step):
    $ stacklab -v calc "1+2*3"
"""

import logging
import sys
from typing import Callable, Optional, TextIO

import click

from stacklab import __version__
from stacklab.cli.errors import handle_cli_exception
from stacklab.config import LabConfig, get_config
from stacklab.converter import InfixToPostfixConverter
from stacklab.errors import InvalidCapacityError
from stacklab.evaluator import PostfixEvaluator
from stacklab.session import LabSession, format_number


PROMPT = "stacklab> "

SHELL_HELP = """\
Commands:
  push VALUE      push VALUE onto the stack
  pop             pop the top element
  peek            show the top element
  clear           empty the stack
  capacity N      set the capacity to N (clears the stack)
  show            draw the stack, top first
  convert EXPR    convert an infix expression to postfix
  eval POSTFIX    evaluate a postfix expression
  help            show this text
  quit            leave the shell"""


# =============================================================================
# CLI Context
# =============================================================================

class Context:
    """Shared state for all commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.config: LabConfig = get_config()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity and configuration."""
        if self.verbose:
            level = logging.DEBUG
        else:
            level = getattr(logging, self.config.log_level, logging.WARNING)
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(name)s: %(message)s" if self.verbose else "%(levelname)s: %(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version=__version__, prog_name="stacklab")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Bounded stack and infix/postfix expression lab.

    \b
    Commands:
      convert   Convert infix to postfix
      eval      Evaluate a postfix expression
      calc      Convert and evaluate an infix expression
      shell     Interactive stack session

    Supported operators: + - * / ^ (^ is right-associative).
    """
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Expression Commands
# =============================================================================

@main.command()
@click.argument("expression", nargs=-1, required=True)
def convert(expression: tuple[str, ...]) -> None:
    """
    Convert an infix EXPRESSION to postfix.

    Conversion never fails; unbalanced parentheses and unknown symbols are
    carried into the output and reported when it is evaluated.

    \b
    Example:
        stacklab convert "(2+3)*4"     # 2 3 + 4 *
    """
    click.echo(InfixToPostfixConverter().to_string(" ".join(expression)))


@main.command("eval")
@click.argument("postfix", nargs=-1, required=True)
@pass_context
def eval_command(ctx: Context, postfix: tuple[str, ...]) -> None:
    """
    Evaluate a POSTFIX expression.

    Tokens are separated by whitespace. Use -- before expressions that
    start with a negative number.

    \b
    Examples:
        stacklab eval "2 3 + 4 *"      # 20
        stacklab eval -- -2 3 "*"      # -6
    """
    try:
        value = PostfixEvaluator().evaluate(" ".join(postfix))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Evaluation")
    click.echo(format_number(value))


@main.command()
@click.argument("expression", nargs=-1, required=True)
@click.option(
    "-s", "--show-postfix",
    is_flag=True,
    help="Print the intermediate postfix expression",
)
@pass_context
def calc(ctx: Context, expression: tuple[str, ...], show_postfix: bool) -> None:
    """
    Convert an infix EXPRESSION and evaluate the result.

    Identifiers are not evaluated; an expression that uses them fails
    with an unsupported token error.

    \b
    Example:
        stacklab calc "(2+3)*4"        # 20
    """
    postfix = InfixToPostfixConverter().to_string(" ".join(expression))
    if show_postfix:
        click.echo(postfix)

    try:
        value = PostfixEvaluator().evaluate(postfix)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Evaluation")
    click.echo(format_number(value))


# =============================================================================
# Interactive Shell
# =============================================================================

@main.command()
@click.option(
    "-c", "--capacity",
    type=click.IntRange(min=1),
    default=None,
    help="Initial stack capacity (default: 10, or STACKLAB_CAPACITY)",
)
@pass_context
def shell(ctx: Context, capacity: Optional[int]) -> None:
    """
    Interactive bounded stack and expression session.

    Reads one command per line from standard input. Type 'help' for the
    list of commands.
    """
    try:
        session = LabSession(capacity=capacity, config=ctx.config)
    except InvalidCapacityError as e:
        raise click.BadParameter(f"{e.message} ({e.hint})", param_hint="'-c' / '--capacity'")
    run_shell(session, sys.stdin, interactive=sys.stdin.isatty())


def run_shell(session: LabSession, stream: TextIO, interactive: bool = False) -> None:
    """Read and execute shell commands from stream until EOF or quit."""
    if interactive:
        click.echo(f"Stack Lab {__version__} (capacity {session.stack.capacity}). Type 'help'.")

    while True:
        if interactive:
            click.echo(PROMPT, nl=False)
        line = stream.readline()
        if not line:
            break

        line = line.rstrip("\r\n")
        command, _, argument = line.strip().partition(" ")
        if not command:
            continue
        if command.lower() in ("quit", "exit"):
            break

        handler = SHELL_COMMANDS.get(command.lower())
        if handler is None:
            click.echo(f"Unknown command: {command} (type 'help')", err=True)
            continue
        handler(session, argument.strip())


def _show(session: LabSession) -> None:
    click.echo(f"Stack (capacity {session.stack.capacity}, size {len(session.stack)}):")
    for line in session.render_stack():
        click.echo(f"  {line}")


def _convert(session: LabSession, expr: str) -> None:
    result = session.convert(expr)
    click.echo(result.message)
    click.echo(result.value)


SHELL_COMMANDS: dict[str, Callable[[LabSession, str], None]] = {
    "push": lambda session, arg: click.echo(session.push(arg).message),
    "pop": lambda session, arg: click.echo(session.pop().message),
    "peek": lambda session, arg: click.echo(session.peek().message),
    "clear": lambda session, arg: click.echo(session.clear().message),
    "capacity": lambda session, arg: click.echo(session.set_capacity(arg).message),
    "show": lambda session, arg: _show(session),
    "convert": _convert,
    "eval": lambda session, arg: click.echo(session.evaluate(arg).message),
    "help": lambda session, arg: click.echo(SHELL_HELP),
}


if __name__ == "__main__":
    main()
