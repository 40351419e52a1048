from typing import Callable, FrozenSet, Generator, Iterable, List
from pathlib import Path

import pathspec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

##################################################################################################
# Candidate files
##################################################################################################

# Files that cannot carry a copyright statement
IGNORED_PATTERNS = [
    "**/*.jks", "**/*.cer", "**/*.csr",
    "**/*.json", "**/*.tson",
    "**/*.frs", "**/*.lck",
    "**/*.gz", "**/*.zip",
    "**/*.csv",
    "**/*.ico", "**/*.png", "**/*.gif",
    "**/license.xml",
]


def walk_files(path: Path, predicate: Callable[[Path], bool] | None = None) -> Generator[Path, None, None]:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    if predicate is not None and not predicate(path):
        return

    if path.is_file():
        yield path

    elif path.is_dir():
        for child in sorted(path.iterdir()):
            yield from walk_files(child, predicate=predicate)


def not_git_metadata(path: Path) -> bool:
    return path.name != ".git"


def read_ignore_file(path: Path) -> List[str]:
    """
    Reads gitignore style patterns, skipping comments and blank lines.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"

    if not path.exists():
        return []

    with open(path, 'rt', encoding='utf-8') as f:
        lines = [line.strip() for line in f]
        return [line for line in lines if line and not line.startswith("#")]


class CopyrightSet:
    """
    Files whose copyright statements are checked: everything below the
    sources that no exclusion pattern matches.

    Patterns match the path relative to the source directory it was found in.
    """

    def __init__(self, excludes: Iterable[str] = IGNORED_PATTERNS) -> None:
        self.sources: List[Path] = []
        self.excludes: List[str] = list(excludes)

    def check(self, *sources: Path | str) -> 'CopyrightSet':
        self.sources.extend(Path(source).resolve() for source in sources)
        return self

    def exclude(self, *patterns: str) -> 'CopyrightSet':
        self.excludes.extend(patterns)
        return self

    @property
    def spec(self) -> pathspec.PathSpec:
        return pathspec.PathSpec.from_lines(GitWildMatchPattern, self.excludes)

    def _matching(self, source: Path, spec: pathspec.PathSpec) -> Generator[Path, None, None]:
        base = source if source.is_dir() else source.parent
        for file in walk_files(source, predicate=not_git_metadata):
            if not spec.match_file(file.relative_to(base).as_posix()):
                yield file

    @property
    def files(self) -> FrozenSet[Path]:
        spec = self.spec
        for source in self.sources:
            if not source.exists():
                raise ValueError(f"Path does not exist: {source}")
        return frozenset(file for source in self.sources for file in self._matching(source, spec))

