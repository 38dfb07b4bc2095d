"""Value objects for contests found on listing pages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContestSummary:
    """A contest row from the contest listing."""

    name: str
    link: str
