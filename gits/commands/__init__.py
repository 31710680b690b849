"""gits CLI commands."""

from gits.commands.init import init
from gits.commands.passthrough import passthrough

__all__ = [
    "init",
    "passthrough",
]
