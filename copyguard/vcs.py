"""
Read-only access to the version control history of a source tree.

Commands are plain sequences of strings whose first element is the git
subcommand, e.g. ``["status", "-z", "--porcelain"]``. Output is returned as
text exactly as git printed it (GitPython only strips one trailing newline).
"""
from __future__ import annotations
import abc
import logging
from pathlib import Path
from types import TracebackType
from typing import Optional, Sequence, TypeAlias

from git import Repo
from git.exc import CommandError, InvalidGitRepositoryError, NoSuchPathError

from copyguard.errors import ConfigurationError

logger = logging.getLogger(__name__)

GitCommand: TypeAlias = Sequence[str]


class VersionControl(abc.ABC):
    @property
    @abc.abstractmethod
    def root(self) -> Path:
        """
        Working tree root that repository relative paths resolve against.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def execute(self, command: GitCommand) -> str:
        """
        Runs a command and returns its standard output.

        Raises a ``git.exc.CommandError`` when the command exits with a
        non-zero status or git itself cannot be found.
        """
        raise NotImplementedError()

    def execute_or_fallback(self, command: GitCommand, *fallbacks: GitCommand) -> str:
        """
        Runs ``command``, then each fallback in turn until one succeeds.

        Used for flags that older git releases do not understand. If every
        attempt fails the last failure is raised as is.
        """
        failure: Optional[CommandError] = None
        for attempt in (command, *fallbacks):
            try:
                return self.execute(attempt)
            except CommandError as e:
                logger.debug(f"git {' '.join(attempt)} failed, trying next form: {e}")
                failure = e
        assert failure is not None
        raise failure


class GitGateway(VersionControl):
    """
    ``VersionControl`` backed by the git executable through GitPython.
    """

    def __init__(self, path: Path) -> None:
        try:
            self.repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise ConfigurationError(f"{path} is not inside a git repository") from e

        if self.repo.working_tree_dir is None:
            self.repo.close()
            raise ConfigurationError(f"{path} belongs to a bare repository")
        self._root = Path(self.repo.working_tree_dir).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def execute(self, command: GitCommand) -> str:
        subcommand, *args = command
        logger.debug(f"git {' '.join(command)}")
        # repo.git.<name>(...) runs `git <name> ...` in the working tree
        return getattr(self.repo.git, subcommand.replace('-', '_'))(*args)

    def close(self) -> None:
        self.repo.close()

    def __enter__(self) -> GitGateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
