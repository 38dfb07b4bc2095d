"""Output record model."""

from dataclasses import dataclass

from .contest import ContestSummary
from .problem import ProblemDetail

RECORD_HEADER = ("name", "link", "code", "difficulty", "contest name", "contest link")


@dataclass(frozen=True)
class MatchedRecord:
    """A problem that passed both filters, flattened with its contest."""

    problem_name: str
    problem_link: str
    problem_code: str
    problem_difficulty: str
    contest_name: str
    contest_link: str

    @classmethod
    def from_parts(cls, contest: ContestSummary, problem: ProblemDetail) -> "MatchedRecord":
        return cls(
            problem_name=problem.name,
            problem_link=problem.link,
            problem_code=problem.code,
            problem_difficulty=problem.difficulty,
            contest_name=contest.name,
            contest_link=contest.link,
        )

    def to_row(self) -> list[str]:
        """Row values in RECORD_HEADER order."""
        return [
            self.problem_name,
            self.problem_link,
            self.problem_code,
            self.problem_difficulty,
            self.contest_name,
            self.contest_link,
        ]
