from pathlib import Path
from typing import Iterable, List

from copyguard.errors import CopyrightError


def format_violations(paths: Iterable[Path]) -> str:
    return "Copyright statements are incorrect in:\n" + ''.join(f"\t{path}\n" for path in paths)


class CopyrightViolationError(CopyrightError):
    """
    Raised once per run, listing every file with an outdated or missing statement.
    """
    def __init__(self, paths: Iterable[Path]) -> None:
        self.paths: List[Path] = sorted(paths)
        super().__init__(format_violations(self.paths))


def report_violations(violations: Iterable[Path]) -> None:
    violations = list(violations)
    if violations:
        raise CopyrightViolationError(violations)
