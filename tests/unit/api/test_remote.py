"""Tests for feedloader.api.remote - RemoteFeedLoader."""

from __future__ import annotations

import asyncio
import gc
import json
import threading
import weakref
from collections.abc import Callable
from typing import Any
from uuid import UUID, uuid4

import pytest

from feedloader.api.remote import RemoteFeedLoader, load_async
from feedloader.models.base import LoadError
from feedloader.models.feed_item import FeedItem
from feedloader.models.result import LoadFailure, LoadResult, LoadSuccess
from feedloader.protocols.feed import FeedLoader
from feedloader.testing import HTTPClientSpy

URL = "https://a-given-url.com/feed.json"


# =============================================================================
# Helpers
# =============================================================================


@pytest.fixture
def track_for_memory_leaks(request: pytest.FixtureRequest) -> Callable[[object], None]:
    """Assert tracked instances are collected once the test finishes."""
    refs: list[weakref.ref[Any]] = []

    def check() -> None:
        gc.collect()
        for ref in refs:
            assert ref() is None, "Instance should have been collected. Potential memory leak"

    request.addfinalizer(check)
    return lambda instance: refs.append(weakref.ref(instance))


@pytest.fixture
def make_sut(
    track_for_memory_leaks: Callable[[object], None],
) -> Callable[..., tuple[RemoteFeedLoader, HTTPClientSpy]]:
    def factory(url: str = URL) -> tuple[RemoteFeedLoader, HTTPClientSpy]:
        client = HTTPClientSpy()
        sut = RemoteFeedLoader(url, client)
        track_for_memory_leaks(sut)
        track_for_memory_leaks(client)
        return sut, client

    return factory


def make_item(
    id: UUID,
    image_url: str,
    description: str | None = None,
    location: str | None = None,
) -> tuple[FeedItem, dict[str, Any]]:
    model = FeedItem(id=id, description=description, location=location, image_url=image_url)
    payload = {
        "id": str(id),
        "image": image_url,
        "description": description,
        "location": location,
    }
    return model, {k: v for k, v in payload.items() if v is not None}


def make_items_json(items: list[dict[str, Any]]) -> bytes:
    return json.dumps({"items": items}).encode()


def expect(
    sut: RemoteFeedLoader,
    expected: LoadResult,
    when: Callable[[], None],
) -> None:
    captured: list[LoadResult] = []
    sut.load(captured.append)

    when()

    assert captured == [expected]


# =============================================================================
# Request Tests
# =============================================================================


class TestRemoteFeedLoaderRequests:
    """Tests for the GETs a loader issues."""

    def test_implements_feed_loader_protocol(self, make_sut) -> None:
        """RemoteFeedLoader implements FeedLoader protocol."""
        sut, _ = make_sut()

        assert isinstance(sut, FeedLoader)

    def test_init_does_not_request(self, make_sut) -> None:
        """Constructing a loader issues no GET."""
        _, client = make_sut()

        assert client.requested_urls == []

    def test_load_requests_url(self, make_sut) -> None:
        """load issues one GET to the configured URL."""
        sut, client = make_sut(url="https://a-given-url.com/other.json")

        sut.load(lambda _: None)

        assert client.requested_urls == ["https://a-given-url.com/other.json"]

    def test_load_twice_requests_twice(self, make_sut) -> None:
        """Each load issues its own GET."""
        sut, client = make_sut()

        sut.load(lambda _: None)
        sut.load(lambda _: None)

        assert client.requested_urls == [URL, URL]

    def test_url_property(self, make_sut) -> None:
        """URL is exposed read-only."""
        sut, _ = make_sut()

        assert sut.url == URL


# =============================================================================
# Result Tests
# =============================================================================


class TestRemoteFeedLoaderResults:
    """Tests for results delivered to completions."""

    def test_delivers_connectivity_on_client_error(self, make_sut) -> None:
        """Transport failure maps to connectivity."""
        sut, client = make_sut()

        expect(
            sut,
            LoadFailure(LoadError.CONNECTIVITY),
            when=lambda: client.complete_with_error(OSError("offline")),
        )

    def test_delivers_invalid_data_on_non_200(self, make_sut) -> None:
        """Non-200 responses map to invalid data."""
        sut, client = make_sut()

        for index, code in enumerate([199, 201, 300, 400, 500]):
            expect(
                sut,
                LoadFailure(LoadError.INVALID_DATA),
                when=lambda: client.complete_with_status(
                    code, make_items_json([]), at=index
                ),
            )

    def test_delivers_invalid_data_on_200_with_invalid_json(self, make_sut) -> None:
        """Malformed body maps to invalid data."""
        sut, client = make_sut()

        expect(
            sut,
            LoadFailure(LoadError.INVALID_DATA),
            when=lambda: client.complete_with_status(200, b"Invalid json"),
        )

    def test_delivers_no_items_on_200_with_empty_list(self, make_sut) -> None:
        """Empty list is a successful empty load."""
        sut, client = make_sut()

        expect(
            sut,
            LoadSuccess([]),
            when=lambda: client.complete_with_status(200, make_items_json([])),
        )

    def test_delivers_items_on_200_with_items(self, make_sut) -> None:
        """Items are delivered in payload order."""
        sut, client = make_sut()
        item1 = make_item(id=uuid4(), image_url="http://a-url.com")
        item2 = make_item(
            id=uuid4(),
            description="a description",
            location="a location",
            image_url="http://another-url.com",
        )

        expect(
            sut,
            LoadSuccess([item1[0], item2[0]]),
            when=lambda: client.complete_with_status(
                200, make_items_json([item1[1], item2[1]])
            ),
        )

    def test_interleaved_loads_complete_independently(self, make_sut) -> None:
        """Each completion only sees its own GET's outcome."""
        sut, client = make_sut()
        first: list[LoadResult] = []
        second: list[LoadResult] = []

        sut.load(first.append)
        sut.load(second.append)
        client.complete_with_error(OSError("offline"), at=1)
        client.complete_with_status(200, make_items_json([]), at=0)

        assert first == [LoadSuccess([])]
        assert second == [LoadFailure(LoadError.CONNECTIVITY)]

    def test_repeated_transport_result_delivered_once(self, make_sut) -> None:
        """A transport completing the same call twice yields one delivery."""
        sut, client = make_sut()
        captured: list[LoadResult] = []

        sut.load(captured.append)
        client.complete_with_status(200, make_items_json([]))
        client.complete_with_error(OSError("late"))

        assert captured == [LoadSuccess([])]


# =============================================================================
# Liveness Tests
# =============================================================================


class TestRemoteFeedLoaderLiveness:
    """A released loader never calls its completion."""

    @pytest.mark.parametrize(
        "complete",
        [
            lambda client: client.complete_with_status(200, make_items_json([])),
            lambda client: client.complete_with_status(500, b""),
            lambda client: client.complete_with_error(OSError("offline")),
        ],
        ids=["success", "invalid-data", "connectivity"],
    )
    def test_no_delivery_after_loader_released(
        self, complete: Callable[[HTTPClientSpy], None]
    ) -> None:
        """Results arriving after release are dropped."""
        client = HTTPClientSpy()
        sut: RemoteFeedLoader | None = RemoteFeedLoader(URL, client)
        captured: list[LoadResult] = []

        sut.load(captured.append)
        sut = None
        gc.collect()
        complete(client)

        assert captured == []

    def test_pending_load_does_not_keep_loader_alive(self) -> None:
        """The transport holds no strong reference to the loader."""
        client = HTTPClientSpy()
        sut = RemoteFeedLoader(URL, client)
        ref = weakref.ref(sut)

        sut.load(lambda _: None)
        del sut
        gc.collect()

        assert ref() is None


# =============================================================================
# Async Bridge Tests
# =============================================================================


class TestLoadAsync:
    """Tests for load_async."""

    async def test_returns_result(self) -> None:
        """Awaiting yields the delivered result."""
        client = HTTPClientSpy(auto_complete=(200, make_items_json([])))
        loader = RemoteFeedLoader(URL, client)

        assert await load_async(loader) == LoadSuccess([])

    async def test_resolves_from_another_thread(self) -> None:
        """A completion fired on a worker thread resolves on the loop."""
        client = HTTPClientSpy()
        loader = RemoteFeedLoader(URL, client)

        task = asyncio.create_task(load_async(loader))
        await asyncio.sleep(0)
        worker = threading.Thread(
            target=client.complete_with_error, args=(OSError("offline"),)
        )
        worker.start()
        worker.join()

        assert await task == LoadFailure(LoadError.CONNECTIVITY)
