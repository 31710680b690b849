"""gits init command - create the secondary repository."""

import click
from rich.console import Console
from rich.markup import escape

from gits.config import GitsConfig
from gits.constants import PRIMARY_DIR, SECONDARY_DIR
from gits.exceptions import GitsError
from gits.logging import get_logger
from gits.repo import SecondaryRepo

console = Console()
err_console = Console(stderr=True)
logger = get_logger("init")


@click.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Initialize a new .gits repository.

    Creates .gits/ in the current directory, runs git init in it and adds
    .gits to .git/info/exclude. Must be run at the root of an existing git
    repository. Safe to run again.

    Examples:

        gits init
    """
    config = ctx.obj.get("config") if ctx.obj else None

    try:
        repo = SecondaryRepo(config=config or GitsConfig())
        result = repo.init()
    except GitsError as e:
        logger.debug(f"init failed: {e!r}")
        err_console.print(f"[red]Error:[/red] {escape(e.message)}", highlight=False)
        raise SystemExit(1) from None

    if not result.exclude_added:
        logger.debug(f"{SECONDARY_DIR} already listed in {PRIMARY_DIR}/info/exclude")

    if result.created_dir:
        message = f"Initialized empty gits repository in {SECONDARY_DIR}/"
    else:
        message = f"Reinitialized existing gits repository in {SECONDARY_DIR}/"
    console.print(message, highlight=False, soft_wrap=True)
    console.print(
        "\nRecommendation: Add your sensitive files to your main .gitignore as well "
        "for extra safety.",
        highlight=False,
        soft_wrap=True,
    )
