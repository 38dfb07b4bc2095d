"""Unit tests for problem link extraction from contest pages."""

from bs4 import BeautifulSoup

from conftest import build_contest_html
from infrastructure.parsers import ContestPageParser


def test_extracts_problem_links_in_row_order():
    html = build_contest_html(
        ["/contest/1875/problem/A", "/contest/1875/problem/B", "/contest/1875/problem/D1"]
    )

    links = ContestPageParser().extract_problem_links(BeautifulSoup(html, "lxml"))

    assert links == [
        "https://codeforces.com/contest/1875/problem/A",
        "https://codeforces.com/contest/1875/problem/B",
        "https://codeforces.com/contest/1875/problem/D1",
    ]


def test_ignores_header_and_non_problem_rows():
    html = """
    <div id="pageContent"><div class="datatable"><table>
      <tr><th>#</th></tr>
      <tr><td>no anchor</td></tr>
      <tr><td><a href="/contest/1/standings">Standings</a></td></tr>
      <tr><td><a href="/contest/1/problem/C">C</a></td></tr>
    </table></div></div>
    """

    links = ContestPageParser().extract_problem_links(BeautifulSoup(html, "lxml"))

    assert links == ["https://codeforces.com/contest/1/problem/C"]


def test_contest_without_problem_table():
    html = "<html><body><div id='pageContent'><p>Contest not started</p></div></body></html>"

    assert ContestPageParser().extract_problem_links(BeautifulSoup(html, "lxml")) == []
