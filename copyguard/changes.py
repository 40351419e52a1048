"""
Works out which year each changed file's copyright statement must reach.

Two sources feed the result:
  - commits on the current branch that are not yet on a mainline branch,
    each contributing its committer year for the files it changed;
  - uncommitted changes in the working tree (staged, unstaged, untracked),
    which contribute the current year.

A file touched by several sources must reach the latest of their years.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from functools import reduce
from pathlib import Path
from typing import Callable, Collection, Dict, Iterable, Iterator, List, Optional, Tuple, TypeAlias
import logging
import os
import re

from copyguard.config import UpdateCheckConfig
from copyguard.errors import ConfigurationError
from copyguard.vcs import VersionControl

logger = logging.getLogger(__name__)

YearMap: TypeAlias = Dict[Path, int]

PORCELAIN_Z_STATUS_RECORD = re.compile(
    r"[ MTADRCU?]{2} (?P<file>[^\0]+)(?:\0(?![ MTADRCU?]{2} )(?P<source>[^\0]+))?\0")


@dataclass(frozen=True)
class CommitRecord:
    commit: str
    year: int
    check: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.check is not None and self.check.lower() == "false"

    @classmethod
    def parse(cls, line: str) -> CommitRecord:
        fields = line.split(None, 2)
        if len(fields) < 2:
            raise ValueError(f"Malformed history line: {line!r}")
        check = fields[2].strip() if len(fields) > 2 else None
        return cls(fields[0], int(fields[1]), check or None)


@dataclass(frozen=True)
class StatusRecord:
    path: str
    source: Optional[str] = None


def parse_history(output: str) -> List[CommitRecord]:
    """
    Parses `rev-list --pretty=format:'%H %cd <trailer>'` output.

    Git releases without `--no-commit-header` print a `commit <sha>` line
    before every formatted line, those are skipped.
    """
    return [
        CommitRecord.parse(line)
        for line in output.splitlines()
        if line.strip() and not line.startswith("commit")
    ]


def parse_status(output: str) -> List[StatusRecord]:
    return [
        StatusRecord(match.group("file"), match.group("source"))
        for match in PORCELAIN_Z_STATUS_RECORD.finditer(output)
    ]


def parse_paths(output: str) -> List[str]:
    return [path for path in output.split("\0") if path]


def common_root(files: Collection[Path]) -> Path:
    """
    Deepest path that contains every file. A single file is its own root.
    """
    if not files:
        raise ConfigurationError("No files to check")
    try:
        root = os.path.commonpath([os.fspath(f) for f in files])
    except ValueError as e:
        raise ConfigurationError(f"Files to check share no common root: {e}") from e
    if not root:
        raise ConfigurationError("Files to check share no common root")
    return Path(root)


def merge_years(pairs: Iterable[Tuple[Path, int]]) -> YearMap:
    def fold(years: YearMap, pair: Tuple[Path, int]) -> YearMap:
        path, year = pair
        years[path] = max(year, years.get(path, year))
        return years

    return reduce(fold, pairs, {})


class ChangeYearCollector:
    def __init__(
        self,
        vcs: VersionControl,
        config: UpdateCheckConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.vcs = vcs
        self.config = config or UpdateCheckConfig()
        self.clock = clock

    def history_command(self, root: Path, commit_header: bool = False) -> List[str]:
        trailer = f"%(trailers:key={self.config.trailer_key},valueonly,separator= )"
        return [
            "rev-list",
            *([] if commit_header else ["--no-commit-header"]),
            f"--pretty=format:%H %cd {trailer}",
            "--date=format:%Y",
            "--no-merges",
            "HEAD",
            "--not",
            *(f"--remotes={glob}" for glob in self.config.mainline),
            "--",
            os.fspath(root),
        ]

    def changed_paths(self, commit: str) -> List[str]:
        return parse_paths(self.vcs.execute([
            "diff-tree", "-z", "--no-commit-id", "--name-only", "-r",
            "--find-renames=100%", "--find-copies=100%",
            f"--diff-filter={self.config.diff_filter}",
            commit,
        ]))

    def describe(self, commit: str) -> str:
        return self.vcs.execute(["show", "--oneline", "--no-patch", commit]).strip()

    def committed(self, root: Path, files: Collection[Path]) -> Iterator[Tuple[Path, int]]:
        """
        (file, committer year) for files changed by unmerged commits under ``root``.
        """
        history = self.vcs.execute_or_fallback(
            self.history_command(root),
            # git < 2.33 has no --no-commit-header
            self.history_command(root, commit_header=True))

        for record in parse_history(history):
            if record.skipped:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"Skipping copyright update checks for: {self.describe(record.commit)}")
                continue
            for path in self.changed_paths(record.commit):
                file = self.vcs.root / path
                if file in files:
                    yield file, record.year

    def uncommitted(self, root: Path, files: Collection[Path]) -> Iterator[Tuple[Path, int]]:
        """
        (file, current year) for files with working tree or index changes.
        """
        status = self.vcs.execute(
            ["status", "-z", "--porcelain", "--untracked-files=all", "--", os.fspath(root)])
        year = self.clock().year
        for record in parse_status(status):
            file = self.vcs.root / record.path
            if file in files:
                yield file, year

    def collect(self, files: Collection[Path]) -> YearMap:
        files = frozenset(files)
        root = common_root(files)
        years = merge_years([*self.committed(root, files), *self.uncommitted(root, files)])
        logger.debug(f"Expecting updated copyright statements in {len(years)} files")
        return years
