from dataclasses import dataclass, field
from typing import Callable, List
import re

from copyguard.headers import DEFAULT_PATTERNS, HeaderMatcher, end_year

################################################################################
# Update check configuration
################################################################################

# Remote tracking branches whose history is considered already checked
DEFAULT_MAINLINE = ["*/main", "*/release/*"]

# Commit trailer that exempts a commit, e.g. `Copyright-Check: false`
CHECK_TRAILER = "Copyright-Check"

# Modified, renamed and copied files only
DEFAULT_DIFF_FILTER = "MRC"


@dataclass
class UpdateCheckConfig:
    patterns: List[re.Pattern[str]] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    end_year: Callable[[re.Match[str]], int] = end_year
    mainline: List[str] = field(default_factory=lambda: list(DEFAULT_MAINLINE))
    trailer_key: str = CHECK_TRAILER
    diff_filter: str = DEFAULT_DIFF_FILTER

    @property
    def matcher(self) -> HeaderMatcher:
        return HeaderMatcher(list(self.patterns), self.end_year)
