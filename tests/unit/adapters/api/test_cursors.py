"""
Tests for Cursor - generic pagination over TMDB list endpoints.

Verifies:
- construction state (page 1, unfetched, empty results)
- set_page / param / params are pure, additive state changes
- exec() fetches the current page and replaces results
- next_page() fetches the next unseen page, page counter committed on success only
- failed fetches leave the cursor untouched
"""

import httpx
import pytest
import respx

from tests.conftest import TEST_TOKEN
from tests.fixtures.tmdb_responses import (
    EMPTY_LIST_RESPONSE,
    POPULAR_MOVIES_PAGE_1,
    POPULAR_MOVIES_PAGE_2,
    POPULAR_MOVIES_PAGE_3,
)
from tmdb_cli.adapters.api.core import Core
from tmdb_cli.adapters.api.cursors import Cursor, CursorPage
from tmdb_cli.adapters.api.errors import APIStatusError, DecodeError, TransportError
from tmdb_cli.core.entities import Movie

POPULAR_URL = "https://api.themoviedb.org/3/movie/popular"


@pytest.fixture
def cursor(core: Core) -> Cursor[Movie]:
    """Fresh cursor on the popular movies endpoint."""
    return Cursor(POPULAR_URL, core, Movie)


def _pages_by_number(request: httpx.Request) -> httpx.Response:
    """respx side effect serving POPULAR_MOVIES_PAGE_<n> for ?page=<n>."""
    pages = {
        "1": POPULAR_MOVIES_PAGE_1,
        "2": POPULAR_MOVIES_PAGE_2,
        "3": POPULAR_MOVIES_PAGE_3,
    }
    return httpx.Response(200, json=pages[request.url.params["page"]])


class TestCursorConstruction:
    """Tests for the initial (unfetched) state."""

    def test_starts_unfetched_on_page_one(self, cursor: Cursor[Movie]) -> None:
        """A new cursor should be unfetched on page 1."""
        assert cursor.page == 1
        assert cursor.results == []
        assert cursor.total_pages == 0
        assert cursor.total_results == 0
        assert cursor.query_params == []
        assert cursor.fetched is False
        assert cursor.has_next_page is False

    def test_exposes_url_and_token(self, cursor: Cursor[Movie]) -> None:
        """Cursor should expose its URL and the Core token."""
        assert cursor.url == POPULAR_URL
        assert cursor.token == TEST_TOKEN

    def test_url_is_read_only(self, cursor: Cursor[Movie]) -> None:
        """The cursor URL cannot be reassigned."""
        with pytest.raises(AttributeError):
            cursor.url = "https://example.org"

    def test_rejects_page_below_one(self, core: Core) -> None:
        """Construction should reject pages below 1."""
        with pytest.raises(ValueError):
            Cursor(POPULAR_URL, core, Movie, page=0)

    def test_repr_does_not_contain_token(self, cursor: Cursor[Movie]) -> None:
        """repr() should not leak the token."""
        assert TEST_TOKEN not in repr(cursor)
        assert "Movie" in repr(cursor)


class TestCursorSetters:
    """Tests for set_page / param / params (no I/O)."""

    def test_set_page_changes_page_without_request(self, cursor: Cursor[Movie]) -> None:
        """set_page() should not perform any request."""
        with respx.mock(assert_all_called=False) as mock:
            route = mock.get(POPULAR_URL)
            result = cursor.set_page(7)

        assert result is cursor
        assert cursor.page == 7
        assert route.call_count == 0

    def test_set_page_accepts_out_of_range_high_pages(self, cursor: Cursor[Movie]) -> None:
        """set_page() should not check an upper bound."""
        cursor.set_page(10_000)
        assert cursor.page == 10_000

    @pytest.mark.parametrize("page", [0, -1])
    def test_set_page_rejects_pages_below_one(self, cursor: Cursor[Movie], page: int) -> None:
        """set_page() should reject pages below 1."""
        with pytest.raises(ValueError):
            cursor.set_page(page)
        assert cursor.page == 1

    def test_params_are_strictly_additive(self, cursor: Cursor[Movie]) -> None:
        """param() and params() should only append."""
        cursor.params([("a", "1")])
        cursor.params([("b", "2")])

        assert cursor.query_params == [("a", "1"), ("b", "2")]

    def test_duplicate_keys_are_preserved(self, cursor: Cursor[Movie]) -> None:
        """A repeated key should be kept, not overwritten."""
        cursor.param("region", "US").param("region", "FR")

        assert cursor.query_params == [("region", "US"), ("region", "FR")]

    def test_values_are_rendered_as_query_strings(self, cursor: Cursor[Movie]) -> None:
        """Values should be rendered as strings, booleans in lowercase."""
        cursor.param("year", 2016).param("include_adult", False)

        assert cursor.query_params == [("year", "2016"), ("include_adult", "false")]


class TestCursorExec:
    """Tests for Cursor.exec()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_exec_replaces_results_with_envelope(self, cursor: Cursor[Movie]) -> None:
        """exec() should copy results and totals from the envelope."""
        respx.get(POPULAR_URL).mock(return_value=httpx.Response(200, json=POPULAR_MOVIES_PAGE_1))

        result = await cursor.exec()

        assert result is cursor
        assert [movie.id for movie in cursor.results] == [157336, 155]
        assert all(isinstance(movie, Movie) for movie in cursor.results)
        assert cursor.total_pages == 3
        assert cursor.total_results == 6
        assert cursor.fetched is True
        assert cursor.page == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_exec_requests_current_page_with_token_and_params(
        self, cursor: Cursor[Movie]
    ) -> None:
        """exec() should send the token, the page and the params."""
        route = respx.get(POPULAR_URL).mock(
            return_value=httpx.Response(200, json=POPULAR_MOVIES_PAGE_2)
        )

        await cursor.set_page(2).param("region", "US").exec()

        assert route.calls.last.request.url.params.multi_items() == [
            ("api_key", TEST_TOKEN),
            ("page", "2"),
            ("region", "US"),
        ]

    @pytest.mark.asyncio
    @respx.mock
    async def test_exec_sends_interleaved_repeated_keys_in_insertion_order(
        self, cursor: Cursor[Movie]
    ) -> None:
        """Repeated keys should reach the wire in insertion order, not grouped."""
        route = respx.get(POPULAR_URL).mock(
            return_value=httpx.Response(200, json=POPULAR_MOVIES_PAGE_1)
        )

        await cursor.param("region", "US").param("language", "fr").param("region", "FR").exec()

        assert route.calls.last.request.url.query == (
            b"api_key=test_token&page=1&region=US&language=fr&region=FR"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_exec_twice_refetches_same_page(self, cursor: Cursor[Movie]) -> None:
        """exec() should not advance the page."""
        route = respx.get(POPULAR_URL).mock(
            return_value=httpx.Response(200, json=POPULAR_MOVIES_PAGE_1)
        )

        await cursor.exec()
        await cursor.exec()

        assert route.call_count == 2
        assert [call.request.url.params["page"] for call in route.calls] == ["1", "1"]
        assert cursor.page == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_failed_exec_leaves_results_unchanged(self, cursor: Cursor[Movie]) -> None:
        """A failed exec() should leave the previous results."""
        respx.get(POPULAR_URL).mock(
            side_effect=[
                httpx.Response(200, json=POPULAR_MOVIES_PAGE_1),
                httpx.Response(503, text="Service Unavailable"),
            ]
        )
        await cursor.exec()
        previous = list(cursor.results)

        with pytest.raises(APIStatusError):
            await cursor.exec()

        assert cursor.results == previous
        assert cursor.total_pages == 3
        assert cursor.total_results == 6

    @pytest.mark.asyncio
    @respx.mock
    async def test_failed_exec_on_fresh_cursor_stays_unfetched(
        self, cursor: Cursor[Movie]
    ) -> None:
        """A failed exec() on a new cursor should keep it unfetched."""
        respx.get(POPULAR_URL).mock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(TransportError):
            await cursor.exec()

        assert cursor.fetched is False
        assert cursor.results == []
        assert cursor.page == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_envelope_raises_decode_error(self, cursor: Cursor[Movie]) -> None:
        """A malformed envelope should raise DecodeError."""
        respx.get(POPULAR_URL).mock(
            return_value=httpx.Response(200, json={"page": 1, "results": [{"title": "no id"}]})
        )

        with pytest.raises(DecodeError):
            await cursor.exec()

        assert cursor.results == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_envelope(self, cursor: Cursor[Movie]) -> None:
        """An empty envelope should give empty results."""
        respx.get(POPULAR_URL).mock(return_value=httpx.Response(200, json=EMPTY_LIST_RESPONSE))

        await cursor.exec()

        assert cursor.results == []
        assert cursor.total_pages == 0
        assert cursor.fetched is True


class TestCursorNextPage:
    """Tests for Cursor.next_page()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_page_on_fresh_cursor_fetches_first_page(
        self, cursor: Cursor[Movie]
    ) -> None:
        """next_page() on a new cursor should fetch page 1."""
        route = respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)

        await cursor.next_page()

        assert route.calls.last.request.url.params["page"] == "1"
        assert cursor.page == 1
        assert cursor.results[0].title == "Interstellar"

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_page_twice_ends_on_page_two(self, cursor: Cursor[Movie]) -> None:
        """Two next_page() calls should end on page 2."""
        route = respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)

        await cursor.next_page()
        await cursor.next_page()

        assert route.calls.last.request.url.params["page"] == "2"
        assert cursor.page == 2
        assert [movie.title for movie in cursor.results] == ["The Godfather"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_page_after_exec_advances(self, cursor: Cursor[Movie]) -> None:
        """next_page() after exec() should fetch the following page."""
        route = respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)

        await cursor.exec()
        await cursor.next_page()

        assert [call.request.url.params["page"] for call in route.calls] == ["1", "2"]
        assert cursor.page == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_page_on_fresh_cursor_honours_set_page(
        self, cursor: Cursor[Movie]
    ) -> None:
        """next_page() should fetch the page chosen with set_page()."""
        route = respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)

        await cursor.set_page(3).next_page()

        assert route.calls.last.request.url.params["page"] == "3"
        assert cursor.page == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_failed_next_page_does_not_advance_page(self, cursor: Cursor[Movie]) -> None:
        """A failed next_page() should keep the page so a retry asks for it again."""
        route = respx.get(POPULAR_URL).mock(
            side_effect=[
                httpx.Response(200, json=POPULAR_MOVIES_PAGE_1),
                httpx.Response(500),
                httpx.Response(200, json=POPULAR_MOVIES_PAGE_2),
            ]
        )
        await cursor.next_page()

        with pytest.raises(APIStatusError):
            await cursor.next_page()

        assert cursor.page == 1
        assert cursor.results[0].title == "Interstellar"

        # Retrying requests the same page again, no page is skipped
        await cursor.next_page()
        assert [call.request.url.params["page"] for call in route.calls] == ["1", "2", "2"]
        assert cursor.page == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_page_keeps_accumulated_params(self, cursor: Cursor[Movie]) -> None:
        """Params should be sent with every page."""
        route = respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)

        cursor.param("region", "US")
        await cursor.next_page()
        await cursor.next_page()

        for call in route.calls:
            assert call.request.url.params["region"] == "US"
            assert call.request.url.params["api_key"] == TEST_TOKEN


class TestCursorIteration:
    """Tests for has_next_page, pages() and iteration over results."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_pages_walks_every_page_sequentially(self, cursor: Cursor[Movie]) -> None:
        """pages() should fetch each page once, in order."""
        route = respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)

        seen = []
        async for page in cursor.pages():
            seen.append((page.page, [movie.id for movie in page.results]))

        assert seen == [(1, [157336, 155]), (2, [238]), (3, [13])]
        assert route.call_count == 3
        assert cursor.has_next_page is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_pages_skips_the_already_fetched_page(self, cursor: Cursor[Movie]) -> None:
        """pages() should not fetch the current page again."""
        respx.get(POPULAR_URL).mock(side_effect=_pages_by_number)
        await cursor.exec()

        pages = [page.page async for page in cursor.pages()]

        assert pages == [2, 3]

    @pytest.mark.asyncio
    @respx.mock
    async def test_iterating_cursor_yields_current_results(self, cursor: Cursor[Movie]) -> None:
        """Iterating a cursor should yield its current results."""
        respx.get(POPULAR_URL).mock(return_value=httpx.Response(200, json=POPULAR_MOVIES_PAGE_1))
        await cursor.exec()

        assert [movie.title for movie in cursor] == ["Interstellar", "The Dark Knight"]


class TestCursorPage:
    """Tests for the CursorPage envelope model."""

    def test_ignores_unknown_fields(self) -> None:
        """CursorPage should ignore unknown envelope keys."""
        envelope = CursorPage[Movie].model_validate({**POPULAR_MOVIES_PAGE_2, "dates": {}})

        assert envelope.page == 2
        assert envelope.results[0].id == 238
