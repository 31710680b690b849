"""SecondaryRepo -- create the .gits repository and delegate git commands to it."""

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gits.config import GitsConfig
from gits.constants import (
    EXCLUDE_FILE,
    FALLBACK_EXIT_CODE,
    GIT_DIR_ENV,
    GIT_WORK_TREE_ENV,
    PRIMARY_DIR,
    SECONDARY_DIR,
)
from gits.exceptions import (
    DelegateInitFailedError,
    DelegateSpawnFailedError,
    FilesystemError,
    NotAPrimaryRepositoryError,
    SecondaryRepoNotInitializedError,
)
from gits.logging import get_logger

logger = get_logger("repo")


@dataclass
class InitResult:
    """Outcome of initializing the secondary repository."""

    secondary_dir: Path
    created_dir: bool = False
    exclude_added: bool = False


class SecondaryRepo:
    """The .gits repository living beside a primary .git repository.

    Both repositories share one work tree: the directory gits runs in.
    The secondary repository is only ever touched through the git
    executable, with GIT_DIR and GIT_WORK_TREE pointing it at .gits and
    the work tree.
    """

    def __init__(
        self,
        work_tree: str | Path | None = None,
        config: GitsConfig | None = None,
    ) -> None:
        """Initialize the secondary repository handle.

        Args:
            work_tree: Shared work tree. Defaults to the current directory
            config: gits configuration. Defaults to GitsConfig()
        """
        self.work_tree = Path.cwd() if work_tree is None else Path(work_tree).resolve()
        self.config = config or GitsConfig()

    @property
    def primary_dir(self) -> Path:
        """Path of the primary metadata directory."""
        return self.work_tree / PRIMARY_DIR

    @property
    def secondary_dir(self) -> Path:
        """Path of the secondary metadata directory."""
        return self.work_tree / SECONDARY_DIR

    @property
    def exclude_file(self) -> Path:
        """Path of the primary repository's local exclude list."""
        return self.primary_dir / EXCLUDE_FILE

    def is_initialized(self) -> bool:
        """Check whether the .gits directory exists."""
        return self.secondary_dir.exists()

    def init(self) -> InitResult:
        """Create and initialize the secondary repository.

        Safe to run repeatedly: the directory, git init and the exclude
        entry are all idempotent.

        Returns:
            InitResult describing what was created

        Raises:
            NotAPrimaryRepositoryError: If there is no .git directory
            DelegateInitFailedError: If git init exits non-zero
            DelegateSpawnFailedError: If git cannot be started
            FilesystemError: If a directory or the exclude file cannot be written
        """
        if not self.primary_dir.exists():
            raise NotAPrimaryRepositoryError(
                "Not in a git repository. Initialize a git repository first.",
                path=str(self.work_tree),
            )

        result = InitResult(secondary_dir=self.secondary_dir)

        if not self.secondary_dir.exists():
            try:
                self.secondary_dir.mkdir()
            except OSError as e:
                raise FilesystemError(
                    f"Failed to create directory {self.secondary_dir}: {e}",
                    operation="create directory",
                    path=str(self.secondary_dir),
                ) from e
            result.created_dir = True
            logger.info(f"Created {SECONDARY_DIR} directory")

        returncode = self._spawn(["init"], {GIT_DIR_ENV: str(self.secondary_dir)})
        if returncode != 0:
            raise DelegateInitFailedError(
                f"Failed to initialize git repository in {SECONDARY_DIR}",
                command=f"{self.config.git_executable} init",
                exit_code=returncode,
            )

        result.exclude_added = self._register_exclude()
        return result

    def exec(self, args: Sequence[str]) -> int:
        """Run git against the secondary repository.

        The child inherits stdin, stdout and stderr; nothing is captured.

        Args:
            args: Arguments passed after the git executable, unmodified

        Returns:
            The child's exit code, or 1 if it was killed by a signal

        Raises:
            SecondaryRepoNotInitializedError: If .gits does not exist
            DelegateSpawnFailedError: If git cannot be started
        """
        if not self.is_initialized():
            raise SecondaryRepoNotInitializedError(
                f"{SECONDARY_DIR} directory not found. Run 'gits init' first.",
                path=str(self.secondary_dir),
            )

        logger.debug(f"Running git command with args: {list(args)}")

        returncode = self._spawn(
            list(args),
            {
                GIT_DIR_ENV: str(self.secondary_dir),
                GIT_WORK_TREE_ENV: str(self.work_tree),
            },
        )
        if returncode < 0:
            logger.debug(f"git terminated by signal {-returncode}")
            return FALLBACK_EXIT_CODE
        return returncode

    def _spawn(self, args: list[str], env_overrides: dict[str, str]) -> int:
        """Run the git executable with extra environment variables.

        Args:
            args: Arguments passed after the git executable
            env_overrides: Variables added to the inherited environment

        Returns:
            Raw subprocess return code

        Raises:
            DelegateSpawnFailedError: If the process cannot be started
        """
        cmd = [self.config.git_executable, *args]
        env = {**os.environ, **env_overrides}

        try:
            result = subprocess.run(cmd, env=env, cwd=self.work_tree, check=False)
        except OSError as e:
            raise DelegateSpawnFailedError(
                f"Failed to execute git command: {e}",
                command=" ".join(cmd),
            ) from e
        return result.returncode

    def _register_exclude(self) -> bool:
        """Add the secondary directory to the primary exclude list once.

        Returns:
            True if the entry was appended, False if it was already there
        """
        info_dir = self.exclude_file.parent
        if not info_dir.exists():
            try:
                info_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FilesystemError(
                    f"Failed to create directory {info_dir}: {e}",
                    operation="create directory",
                    path=str(info_dir),
                ) from e

        path = str(self.exclude_file)
        try:
            handle = open(self.exclude_file, "a+", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise FilesystemError(
                f"Failed to open {path}: {e}",
                operation="open",
                path=path,
            ) from e

        with handle:
            try:
                handle.seek(0)
                content = handle.read()
            except (OSError, UnicodeError) as e:
                raise FilesystemError(
                    f"Failed to read {path}: {e}",
                    operation="read",
                    path=path,
                ) from e

            if any(line.strip() == SECONDARY_DIR for line in content.splitlines()):
                return False

            try:
                # "a+" always appends, regardless of the read position
                prefix = "\n" if content and not content.endswith("\n") else ""
                handle.write(f"{prefix}{SECONDARY_DIR}\n")
                handle.flush()
            except OSError as e:
                raise FilesystemError(
                    f"Failed to write to {path}: {e}",
                    operation="write",
                    path=path,
                ) from e

        logger.info(f"Added {SECONDARY_DIR} to {PRIMARY_DIR}/{EXCLUDE_FILE}")
        return True
