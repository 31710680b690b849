"""Allow running gits with ``python -m gits``."""

from gits.cli import main

main()
