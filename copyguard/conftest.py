from datetime import datetime
from pathlib import Path
from typing import Dict, List, Sequence

import pytest
from git.exc import GitCommandError

from copyguard.vcs import VersionControl


class FakeVcs(VersionControl):
    """
    Returns canned git output instead of running git.

    ``diffs`` and ``shows`` are keyed by commit id. Any command containing
    one of the ``unsupported`` flags fails like an old git release would.
    """

    def __init__(
        self,
        root: Path,
        history: str = "",
        diffs: Dict[str, str] | None = None,
        status: str = "",
        shows: Dict[str, str] | None = None,
        unsupported: Sequence[str] = (),
    ) -> None:
        self._root = root
        self.history = history
        self.diffs = diffs or {}
        self.status = status
        self.shows = shows or {}
        self.unsupported = set(unsupported)
        self.commands: List[List[str]] = []

    @property
    def root(self) -> Path:
        return self._root

    def execute(self, command: Sequence[str]) -> str:
        self.commands.append(list(command))
        rejected = self.unsupported.intersection(command)
        if rejected:
            raise GitCommandError(list(command), 129, f"error: unknown option `{sorted(rejected)[0]}'")

        match command[0]:
            case "rev-list": return self.history
            case "diff-tree": return self.diffs.get(command[-1], "")
            case "status": return self.status
            case "show": return self.shows.get(command[-1], command[-1][:7])
            case _: raise GitCommandError(list(command), 1, "unexpected command")

    def ran(self, subcommand: str) -> List[List[str]]:
        return [c for c in self.commands if c[0] == subcommand]


@pytest.fixture
def fake_vcs():
    return FakeVcs


@pytest.fixture
def clock():
    return lambda: datetime(2024, 5, 17, 12, 0)
