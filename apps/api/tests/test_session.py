import asyncio

import pytest
from pydantic import ValidationError

from talent_directory.schemas import FilterState
from talent_directory.services.directory import DirectorySearchSession

from conftest import FakeRecordStore, GatedRecordStore, make_profile


def test_set_filter_replaces_state_immutably():
    session = DirectorySearchSession(FakeRecordStore())
    before = session.filters
    after = session.set_filter(languages=["English"], search_term="data")
    assert before == FilterState()
    assert after.languages == ("English",)
    assert after.search_term == "data"
    assert session.filters is after
    with pytest.raises(ValidationError):
        after.search_term = "mutated"


def test_set_filter_rejects_unknown_fields():
    session = DirectorySearchSession(FakeRecordStore())
    with pytest.raises(ValidationError):
        session.set_filter(colour="blue")


@pytest.mark.asyncio
async def test_initial_state_is_empty_and_idle():
    session = DirectorySearchSession(FakeRecordStore())
    assert session.state.results == []
    assert session.state.loading is False
    assert session.state.error is False


@pytest.mark.asyncio
async def test_search_uses_current_filters():
    store = FakeRecordStore([
        make_profile(name="Ana", languages=["English"]),
        make_profile(name="Bea", languages=["Greek"]),
    ])
    session = DirectorySearchSession(store)
    session.set_filter(languages=["Greek"])
    result = await session.search()
    assert [r.name for r in result.results] == ["Bea"]
    assert session.state == result


@pytest.mark.asyncio
async def test_superseded_response_is_discarded():
    store = GatedRecordStore([
        make_profile(name="Ana", languages=["English"]),
        make_profile(name="Sofia", languages=["Spanish"]),
    ])
    session = DirectorySearchSession(store)

    session.set_filter(languages=["English"])
    first = asyncio.create_task(session.search())
    await asyncio.sleep(0)
    session.set_filter(languages=["Spanish"])
    second = asyncio.create_task(session.search())
    await asyncio.sleep(0)
    assert len(store.gates) == 2
    assert session.state.loading is True

    # newest completes first, stale one afterwards
    store.gates[1].set()
    latest = await second
    store.gates[0].set()
    stale = await first

    assert [r.name for r in latest.results] == ["Sofia"]
    assert session.state == latest
    assert stale == latest
    assert session.state.loading is False


@pytest.mark.asyncio
async def test_facet_catalog_is_cached_until_refresh():
    store = FakeRecordStore([make_profile(languages=["English"])])
    session = DirectorySearchSession(store)
    first = await session.get_facet_catalog()
    store.records.append(make_profile(languages=["Greek"]))
    assert (await session.get_facet_catalog()).languages == ["English"]
    refreshed = await session.get_facet_catalog(refresh=True)
    assert first.languages == ["English"]
    assert refreshed.languages == ["English", "Greek"]


@pytest.mark.asyncio
async def test_failed_catalog_load_is_not_cached():
    store = FakeRecordStore([make_profile(languages=["English"])], fail=True)
    session = DirectorySearchSession(store)
    assert (await session.get_facet_catalog()).languages == []
    store.fail = False
    assert (await session.get_facet_catalog()).languages == ["English"]


@pytest.mark.asyncio
async def test_empty_population_session():
    session = DirectorySearchSession(FakeRecordStore([]))
    result = await session.search()
    catalog = await session.get_facet_catalog()
    assert (result.results, result.loading, result.error) == ([], False, False)
    assert catalog.languages == catalog.areas_of_expertise == catalog.memberships == []


@pytest.mark.asyncio
async def test_catalog_value_selects_the_records_it_came_from():
    store = FakeRecordStore([
        make_profile(name="Ana", memberships=["ICC "]),
        make_profile(name="Bea", memberships=["ICC"]),
    ])
    session = DirectorySearchSession(store)
    catalog = await session.get_facet_catalog()
    assert catalog.memberships == ["ICC", "ICC "]

    session.set_filter(memberships=["ICC "])
    result = await session.search()
    assert [r.name for r in result.results] == ["Ana"]

    session.set_filter(memberships=catalog.memberships)
    result = await session.search()
    assert {r.name for r in result.results} == {"Ana", "Bea"}


@pytest.mark.asyncio
async def test_cancelled_search_clears_loading():
    store = GatedRecordStore([make_profile(name="Ana")])
    session = DirectorySearchSession(store)
    task = asyncio.create_task(session.search())
    await asyncio.sleep(0)
    assert session.state.loading is True

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert session.state.loading is False
    assert session.state.results == []


@pytest.mark.asyncio
async def test_unexpected_store_error_clears_loading():
    class BrokenStore(FakeRecordStore):
        async def query(self, query):
            raise RuntimeError("driver bug")

    session = DirectorySearchSession(BrokenStore([make_profile()]))
    with pytest.raises(RuntimeError):
        await session.search()
    assert session.state.loading is False


@pytest.mark.asyncio
async def test_superseded_failure_leaves_newer_search_loading():
    store = GatedRecordStore([make_profile(name="Ana")])
    session = DirectorySearchSession(store)
    first = asyncio.create_task(session.search())
    await asyncio.sleep(0)
    second = asyncio.create_task(session.search())
    await asyncio.sleep(0)

    first.cancel()
    with pytest.raises(asyncio.CancelledError):
        await first
    assert session.state.loading is True

    store.gates[1].set()
    latest = await second
    assert session.state == latest
    assert session.state.loading is False
