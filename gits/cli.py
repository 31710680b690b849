"""gits command-line interface."""

import click
from rich.console import Console
from rich.markup import escape

from gits.commands import init, passthrough
from gits.config import GitsConfig
from gits.constants import INIT_COMMAND
from gits.exceptions import ConfigurationError
from gits.logging import setup_logging

err_console = Console(stderr=True)


class RawArgsCommand(click.Command):
    """Command that leaves its argument vector untouched in ``ctx.args``.

    git must see every token exactly as typed, including a leading ``--``
    and options such as ``--help`` that click would otherwise consume.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return []


@click.command(cls=RawArgsCommand)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """gits - a git wrapper for sensitive files.

    `gits init` creates a .gits repository beside .git. Anything else is
    passed to git with GIT_DIR=.gits and GIT_WORK_TREE set to the current
    directory, and gits exits with git's exit code.
    """
    try:
        config = GitsConfig.from_env()
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1) from None

    try:
        setup_logging(level=config.logging.level, log_dir=config.logging.directory)
    except OSError as e:
        err = ConfigurationError(
            f"Cannot write logs to {config.logging.directory}: {e}",
            details={"path": config.logging.directory},
        )
        err_console.print(f"[red]Error:[/red] {escape(err.message)}", highlight=False)
        raise SystemExit(1) from None

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    args = list(ctx.args)
    if args and args[0] == INIT_COMMAND:
        # Trailing arguments are rejected by init's own parser
        with init.make_context(INIT_COMMAND, args[1:], parent=ctx) as sub_ctx:
            init.invoke(sub_ctx)
        return

    ctx.exit(passthrough(args, config=config))


def main() -> None:
    """Console script entry point."""
    cli(prog_name="gits")


if __name__ == "__main__":
    main()
