"""Value objects for problems."""

from dataclasses import dataclass

DIFFICULTY_NA = "NA"


@dataclass(frozen=True)
class ProblemDetail:
    """Data extracted from a single problem page."""

    name: str
    code: str
    link: str
    difficulty: str = DIFFICULTY_NA

    @property
    def has_title(self) -> bool:
        """Whether both code and name were found on the page."""
        return bool(self.code and self.name)
