import asyncio
import logging

import pytest

from artwork_browser.errors import FetchFailed, InvalidInput
from artwork_browser.models import Record
from artwork_browser.services.bulk_select_service import BulkSelectOrchestrator
from artwork_browser.services.pagination_service import PaginationController
from artwork_browser.services.selection_service import SelectionSet
from artwork_browser.utils.events import ChangeNotifier
from conftest import FakeFetcher, GatedFetcher, make_records


def _orchestrator(fetcher, selection=None, page_size=12):
    selection = selection if selection is not None else SelectionSet()
    return BulkSelectOrchestrator(fetcher, selection, page_size=page_size), selection


def test_select_first_fetches_only_needed_pages(fetcher, dataset) -> None:
    orchestrator, selection = _orchestrator(fetcher)

    selected = asyncio.run(orchestrator.select_first(25))

    assert selected == 25
    assert fetcher.calls == [(1, 12), (2, 12), (3, 12)]
    assert sorted(record.id for record in selection.snapshot()) == [record.id for record in dataset[:25]]


def test_select_first_on_page_boundary_does_not_overfetch(fetcher) -> None:
    orchestrator, selection = _orchestrator(fetcher)

    asyncio.run(orchestrator.select_first(24))

    assert fetcher.pages_requested == [1, 2]
    assert len(selection) == 24


def test_select_first_starts_from_first_page_regardless_of_current_page(fetcher) -> None:
    controller = PaginationController(fetcher, page_size=12)
    orchestrator, selection = _orchestrator(fetcher)

    async def scenario() -> None:
        await controller.go_to_page(5)
        await orchestrator.select_first(3)

    asyncio.run(scenario())

    assert fetcher.pages_requested == [5, 1]
    assert selection.ids() == {1, 2, 3}
    assert controller.state.page == 5


def test_select_first_with_other_page_size(dataset) -> None:
    fetcher = FakeFetcher(dataset)
    orchestrator, selection = _orchestrator(fetcher, page_size=5)

    asyncio.run(orchestrator.select_first(12))

    assert fetcher.calls == [(1, 5), (2, 5), (3, 5)]
    assert selection.ids() == set(range(1, 13))


def test_select_more_than_available_selects_everything() -> None:
    fetcher = FakeFetcher(make_records(30))
    orchestrator, selection = _orchestrator(fetcher)

    selected = asyncio.run(orchestrator.select_first(50))

    assert selected == 30
    assert selection.ids() == set(range(1, 31))
    assert fetcher.pages_requested == [1, 2, 3]


def test_select_stops_when_dataset_is_exhausted() -> None:
    fetcher = FakeFetcher(make_records(24))
    orchestrator, selection = _orchestrator(fetcher)

    asyncio.run(orchestrator.select_first(100))

    assert fetcher.pages_requested == [1, 2]
    assert len(selection) == 24


def test_select_zero_clears_selection_without_fetching(fetcher) -> None:
    selection = SelectionSet()
    selection.replace_all(make_records(3, start_id=50))
    orchestrator, _ = _orchestrator(fetcher, selection)

    selected = asyncio.run(orchestrator.select_first(0))

    assert selected == 0
    assert len(selection) == 0
    assert fetcher.calls == []


def test_failure_mid_loop_leaves_selection_untouched(dataset) -> None:
    fetcher = FakeFetcher(dataset, fail_on={2})
    selection = SelectionSet()
    prior = [Record(id=900, title="kept"), Record(id=901, title="also kept")]
    selection.replace_all(prior)
    orchestrator, _ = _orchestrator(fetcher, selection)

    with pytest.raises(FetchFailed) as excinfo:
        asyncio.run(orchestrator.select_first(30))

    assert excinfo.value.page == 2
    assert fetcher.pages_requested == [1, 2]
    assert sorted(selection.snapshot(), key=lambda record: record.id) == prior
    assert orchestrator.busy is False


@pytest.mark.parametrize("bad_value", [-1, 2.5, "3", True])
def test_invalid_target_count_is_rejected(fetcher, bad_value) -> None:
    orchestrator, _ = _orchestrator(fetcher)

    with pytest.raises(InvalidInput):
        asyncio.run(orchestrator.select_first(bad_value))
    assert fetcher.calls == []


def test_busy_flag_is_reported_while_running(dataset) -> None:
    notifier = ChangeNotifier()
    fetcher = GatedFetcher(dataset)
    selection = SelectionSet()
    orchestrator = BulkSelectOrchestrator(fetcher, selection, page_size=12, notifier=notifier)
    busy_states = []
    notifier.subscribe(lambda reason: busy_states.append(orchestrator.busy) if reason == "busy" else None)

    async def scenario() -> None:
        task = asyncio.create_task(orchestrator.select_first(5))
        await asyncio.sleep(0)
        assert orchestrator.busy is True
        fetcher.gate(1).set()
        await task

    asyncio.run(scenario())

    assert busy_states == [True, False]
    assert orchestrator.busy is False


def test_newer_bulk_select_supersedes_older(dataset) -> None:
    fetcher = GatedFetcher(dataset)
    orchestrator, selection = _orchestrator(fetcher)

    async def scenario() -> tuple:
        older = asyncio.create_task(orchestrator.select_first(20))
        newer = asyncio.create_task(orchestrator.select_first(3))
        await asyncio.sleep(0)
        fetcher.gate(1).set()
        newer_count = await newer
        fetcher.gate(2).set()
        older_count = await older
        return older_count, newer_count

    older_count, newer_count = asyncio.run(scenario())

    assert (older_count, newer_count) == (0, 3)
    assert selection.ids() == {1, 2, 3}
    assert orchestrator.busy is False


def test_superseded_bulk_select_failure_is_discarded(dataset) -> None:
    fetcher = GatedFetcher(dataset, fail_on={2})
    orchestrator, selection = _orchestrator(fetcher)

    async def scenario() -> list:
        older = asyncio.create_task(orchestrator.select_first(20))
        newer = asyncio.create_task(orchestrator.select_first(3))
        await asyncio.sleep(0)
        fetcher.gate(1).set()
        await newer
        fetcher.gate(2).set()
        return await asyncio.gather(older, return_exceptions=True)

    results = asyncio.run(scenario())

    assert results == [0]
    assert selection.ids() == {1, 2, 3}
    assert orchestrator.busy is False


def test_page_count_is_logged_per_call(dataset, caplog) -> None:
    caplog.set_level(logging.INFO, logger="artwork_browser.services.bulk_select_service")
    fetcher = GatedFetcher(dataset)
    orchestrator, _ = _orchestrator(fetcher)

    async def scenario() -> None:
        older = asyncio.create_task(orchestrator.select_first(20))
        newer = asyncio.create_task(orchestrator.select_first(3))
        await asyncio.sleep(0)
        fetcher.gate(1).set()
        await newer
        fetcher.gate(2).set()
        await older

    asyncio.run(scenario())

    assert "Bulk-selected 3 rows from 1 page(s)" in caplog.text
    assert "Bulk-selected 20 rows" not in caplog.text
