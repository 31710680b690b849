"""gits constants."""

# Directory names, relative to the working directory
PRIMARY_DIR = ".git"
SECONDARY_DIR = ".gits"

# Local exclude list, relative to the primary metadata directory
EXCLUDE_FILE = "info/exclude"

# Subcommand handled by gits itself; everything else goes to git
INIT_COMMAND = "init"

# Environment variables set on the delegated git process
GIT_DIR_ENV = "GIT_DIR"
GIT_WORK_TREE_ENV = "GIT_WORK_TREE"

# Environment variables read by gits
GITS_GIT_ENV = "GITS_GIT"
GITS_LOG_ENV = "GITS_LOG"
GITS_LOG_DIR_ENV = "GITS_LOG_DIR"

DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_LOG_LEVEL = "warn"

# Exit status used when the child has no exit code (killed by a signal)
FALLBACK_EXIT_CODE = 1

# Exit status after Ctrl-C interrupted the delegated git process
INTERRUPTED_EXIT_CODE = 130
