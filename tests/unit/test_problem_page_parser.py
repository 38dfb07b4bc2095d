"""Unit tests for problem page metadata extraction."""

import pytest
from bs4 import BeautifulSoup

from conftest import build_problem_html
from domain.models import DIFFICULTY_NA
from infrastructure.parsers import ProblemPageParser

LINK = "https://codeforces.com/contest/1875/problem/D2"


def _detail(html: str):
    return ProblemPageParser().extract_detail(BeautifulSoup(html, "lxml"), LINK)


class TestProblemPageParser:
    def test_extracts_title_and_difficulty(self):
        detail = _detail(build_problem_html("D2. Hard Problem", "*1900"))

        assert detail.code == "D2"
        assert detail.name == "Hard Problem"
        assert detail.difficulty == "1900"
        assert detail.link == LINK

    def test_missing_difficulty_is_na(self):
        detail = _detail(build_problem_html("A. Easy"))

        assert detail.difficulty == DIFFICULTY_NA == "NA"
        assert detail.code == "A"

    @pytest.mark.parametrize("marker", ["1900", "*", "  "])
    def test_malformed_difficulty_is_na(self, marker):
        detail = _detail(build_problem_html("A. Easy", marker))

        assert detail.difficulty == "NA"

    def test_name_keeps_later_dots(self):
        detail = _detail(build_problem_html("C. Mr. Smith and 1.5 apples"))

        assert detail.code == "C"
        assert detail.name == "Mr. Smith and 1.5 apples"

    def test_missing_title_gives_empty_code_and_name(self):
        detail = _detail(build_problem_html(None, "*800"))

        assert detail.code == ""
        assert detail.name == ""
        assert detail.difficulty == "800"
        assert not detail.has_title

    def test_title_without_separator_gives_empty_code_and_name(self):
        detail = _detail(build_problem_html("Untitled"))

        assert (detail.code, detail.name) == ("", "")
