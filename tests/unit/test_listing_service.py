"""Unit tests for reading the contest listing."""

import pytest

from conftest import BASE_URL, build_listing_html, fetched_urls
from services import create_listing_service

LISTING_1 = f"{BASE_URL}/contests/page/1"
LISTING_2 = f"{BASE_URL}/contests/page/2"


class TestLatestContests:
    @pytest.mark.asyncio
    async def test_collects_across_pages(self, pages, http_client):
        pages[LISTING_1] = build_listing_html([("R3", "/contest/3"), ("R2", "/contest/2")])
        pages[LISTING_2] = build_listing_html([("R1", "/contest/1"), ("R0", "/contest/0")])

        contests = await create_listing_service(http_client).get_latest_contests(3)

        assert [c.name for c in contests] == ["R3", "R2", "R1"]
        assert [c.link for c in contests][-1] == f"{BASE_URL}/contest/1"

    @pytest.mark.asyncio
    async def test_stops_when_listing_runs_out(self, pages, http_client):
        pages[LISTING_1] = build_listing_html([("R1", "/contest/1")])
        pages[LISTING_2] = build_listing_html([])

        contests = await create_listing_service(http_client).get_latest_contests(5)

        assert [c.name for c in contests] == ["R1"]

    @pytest.mark.asyncio
    async def test_respects_max_pages(self, pages, http_client):
        pages[LISTING_1] = build_listing_html([("R1", "/contest/1")])
        pages[LISTING_2] = build_listing_html([("R0", "/contest/0")])

        service = create_listing_service(http_client, max_pages=1)
        contests = await service.get_latest_contests(5)

        assert [c.name for c in contests] == ["R1"]
        assert fetched_urls(http_client) == [LISTING_1]


def test_page_allowed(http_client):
    assert create_listing_service(http_client).page_allowed(10_000)

    bounded = create_listing_service(http_client, max_pages=2)
    assert bounded.page_allowed(2)
    assert not bounded.page_allowed(3)
