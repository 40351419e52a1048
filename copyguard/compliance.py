from pathlib import Path
from typing import Mapping, Set
import logging

from copyguard.errors import HeaderReadError
from copyguard.headers import HeaderMatcher

logger = logging.getLogger(__name__)


class ComplianceChecker:
    """
    Compares the copyright statements in files against their expected years.
    """

    def __init__(self, matcher: HeaderMatcher | None = None) -> None:
        self.matcher = matcher or HeaderMatcher()

    def is_compliant(self, path: Path, expected_year: int) -> bool:
        try:
            with open(path, 'rt', encoding='utf-8') as f:
                return self.matcher.covers(f, expected_year)
        except (OSError, UnicodeDecodeError) as e:
            raise HeaderReadError(path, e) from e

    def violations(self, expected_years: Mapping[Path, int]) -> Set[Path]:
        violations: Set[Path] = set()
        for path, expected_year in expected_years.items():
            # deleted since it was changed
            if not path.is_file():
                continue
            if self.is_compliant(path, expected_year):
                logger.debug(f"{path}: copyright covers {expected_year}")
            else:
                logger.debug(f"{path}: copyright does not cover {expected_year}")
                violations.add(path)
        return violations
