"""Contest-name and problem-code filters."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from domain.exceptions import ConfigurationError


class Division(str, Enum):
    """Named contest categories matched against contest titles."""

    DIV1 = "div1"
    DIV2 = "div2"
    DIV3 = "div3"

    @property
    def pattern(self) -> re.Pattern[str]:
        # Matches "Codeforces Round #123 (Div. 2)" and "Codeforces Round 900 (Div. 2)"
        number = self.value[-1]
        return re.compile(rf"Codeforces Round #?\s*\d+.*\(Div\. {number}\)", re.IGNORECASE)


class ProblemLetter(str, Enum):
    """Problem letters, each accepting the plain code and its split variants."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @property
    def codes(self) -> frozenset[str]:
        return frozenset({self.value, f"{self.value}1", f"{self.value}2"})


@dataclass(frozen=True)
class CrawlFilters:
    """Filters applied by the crawl service before each fetch."""

    name_pattern: re.Pattern[str]
    problem_codes: frozenset[str]

    @classmethod
    def create(cls, pattern: str | re.Pattern[str], codes: Iterable[str]) -> "CrawlFilters":
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        return cls(name_pattern=pattern, problem_codes=frozenset(codes))

    @classmethod
    def from_choices(cls, division: str, letter: str) -> "CrawlFilters":
        """Build filters from a division name (div1..div3) and a letter (A..G)."""
        try:
            div = Division(division.lower())
        except ValueError:
            choices = ", ".join(d.value for d in Division)
            raise ConfigurationError(f"Invalid pattern: {division}. Expected one of: {choices}")

        try:
            problem_letter = ProblemLetter(letter.upper())
        except ValueError:
            choices = ", ".join(p.value for p in ProblemLetter)
            raise ConfigurationError(f"Invalid code: {letter}. Expected one of: {choices}")

        return cls(name_pattern=div.pattern, problem_codes=problem_letter.codes)

    def matches_contest(self, contest_name: str) -> bool:
        return self.name_pattern.search(contest_name) is not None

    def matches_code(self, code: str) -> bool:
        return code in self.problem_codes
