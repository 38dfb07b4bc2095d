"""Shared fixtures: HTML page builders and fake collaborators."""

from unittest.mock import AsyncMock

import pytest

from domain.exceptions import FetchError
from domain.models import MatchedRecord

BASE_URL = "https://codeforces.com"


def build_listing_html(contests: list[tuple[str, str]]) -> str:
    """Past-contests table as served on /contests/page/N."""
    rows = "".join(
        f"""
        <tr data-contestId="{href.rsplit('/', 1)[-1]}">
            <td>
                {name}
                <br/>
                <a href="{href}" style="font-size: 0.8em;">Enter &raquo;</a>
                <a href="{href}/standings" style="font-size: 0.8em;">Virtual participation</a>
            </td>
            <td><a href="/profile/writer">writer</a></td>
            <td>Oct/01/2023 17:35</td>
        </tr>
        """
        for name, href in contests
    )
    return f"""
    <html><body><div id="pageContent">
      <div class="contestList">
        <div class="datatable"><table><tr><th>Name</th></tr></table></div>
        <div class="contests-table">
          <div class="datatable">
            <table>
              <tr><th>Name</th><th>Writers</th><th>Start</th></tr>
              {rows}
            </table>
          </div>
        </div>
      </div>
    </div></body></html>
    """


def build_contest_html(problem_hrefs: list[str]) -> str:
    """Problem table as served on /contest/N."""
    rows = "".join(
        f"""
        <tr>
            <td class="id"><a href="{href}">{href.rsplit('/', 1)[-1]}</a></td>
            <td><div><a href="{href}">Some problem</a></div></td>
        </tr>
        """
        for href in problem_hrefs
    )
    return f"""
    <html><body><div id="pageContent">
      <div class="datatable">
        <table class="problems">
          <tr><th>#</th><th>Name</th></tr>
          {rows}
        </table>
      </div>
    </div></body></html>
    """


def build_problem_html(title: str | None, difficulty: str | None = None) -> str:
    """Problem statement page with optional title and difficulty tag."""
    title_block = f'<div class="title">{title}</div>' if title is not None else ""
    difficulty_block = (
        f'<span class="tag-box" title="Difficulty">{difficulty}</span>'
        if difficulty is not None
        else ""
    )
    return f"""
    <html><body>
      <div id="sidebar"><div class="roundbox">
        <span class="tag-box" title="dp">dp</span>
        {difficulty_block}
      </div></div>
      <div id="pageContent">
        <div class="problemindexholder">
          <div class="ttypography">
            <div class="problem-statement">
              <div class="header">
                {title_block}
                <div class="time-limit">time limit per test2 seconds</div>
              </div>
              <div><p>Statement</p></div>
            </div>
          </div>
        </div>
      </div>
    </body></html>
    """


class RecordingSink:
    """In-memory record sink."""

    def __init__(self):
        self.records: list[MatchedRecord] = []

    async def write(self, record: MatchedRecord) -> None:
        self.records.append(record)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def pages():
    """URL -> HTML map served by the fake HTTP client."""
    return {}


@pytest.fixture
def http_client(pages):
    """HTTP client mock serving `pages`; unknown URLs fail like a 404."""
    client = AsyncMock()

    async def get_text(url: str) -> str:
        if url not in pages:
            raise FetchError(url, "HTTP 404")
        return pages[url]

    client.get_text.side_effect = get_text
    return client


def fetched_urls(http_client) -> list[str]:
    return [call.args[0] for call in http_client.get_text.call_args_list]
