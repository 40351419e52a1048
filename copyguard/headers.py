"""
Copyright declaration patterns.

Each pattern finds a declaration such as ``Copyright (C) 2019-2022 Example Corp.``
or ``Copyright Example Corp. 2020, 2023`` within a line and exposes the named
groups ``declaration``, ``entity``, ``years`` and ``end``, where ``end`` is the
final year of the year list.
"""
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List
import re

# horizontal whitespace
_H = r"[^\S\r\n]"

_DECLARATION = rf"(?P<declaration>[Cc]opyright(?:{_H}+(?:\([Cc]\)|©))?)"
_YEARS = rf"(?P<years>(?:(?:\d{{4}}{_H}*-{_H}*)?\d{{4}},{_H}+)*(?:\d{{4}}{_H}*-{_H}*)?(?P<end>\d{{4}}))"

# <declaration> <entity> <years>
ENTITY_THEN_YEARS = re.compile(rf"{_DECLARATION}{_H}+(?P<entity>.*?){_H}+{_YEARS}")

# <declaration> <years> <entity>
YEARS_THEN_ENTITY = re.compile(rf"{_DECLARATION}{_H}+{_YEARS}{_H}+(?P<entity>.*?)")

DEFAULT_PATTERNS: List[re.Pattern[str]] = [ENTITY_THEN_YEARS, YEARS_THEN_ENTITY]


def end_year(match: re.Match[str]) -> int:
    return int(match.group("end"))


@dataclass(frozen=True)
class HeaderMatcher:
    patterns: List[re.Pattern[str]] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    end_year: Callable[[re.Match[str]], int] = end_year

    def years(self, line: str) -> Iterator[int]:
        """
        Yields the year of every pattern that matches somewhere in the line.
        """
        for pattern in self.patterns:
            match = pattern.search(line)
            if match is not None:
                yield self.end_year(match)

    def covers(self, lines: Iterable[str], expected_year: int) -> bool:
        """
        True if any declaration in ``lines`` reaches ``expected_year``.
        """
        return any(year >= expected_year for line in lines for year in self.years(line))
