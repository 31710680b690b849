"""Forward arbitrary git commands to the secondary repository."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from gits.config import GitsConfig
from gits.constants import INTERRUPTED_EXIT_CODE
from gits.exceptions import GitsError
from gits.logging import get_logger
from gits.repo import SecondaryRepo

err_console = Console(stderr=True)
logger = get_logger("passthrough")


def passthrough(args: Sequence[str], config: GitsConfig | None = None) -> int:
    """Run git with the given arguments against .gits.

    Args:
        args: Arguments forwarded verbatim to git
        config: gits configuration

    Returns:
        Exit code to terminate with: git's own, 1 on a gits error, or
        130 if git was interrupted with Ctrl-C
    """
    try:
        return SecondaryRepo(config=config).exec(args)
    except GitsError as e:
        logger.debug(f"passthrough failed: {e!r}")
        err_console.print(f"[red]Error:[/red] {escape(e.message)}", highlight=False)
        return 1
    except KeyboardInterrupt:
        logger.debug("git interrupted")
        return INTERRUPTED_EXIT_CODE
