import asyncio

import pytest

from core.domain.errors import ScoutbaseError
from core.domain.models import ApiResult, Role
from core.services.search_service import SearchService
from tests.fakes import FakeApi


def test_only_filled_filters_are_sent():
    api = FakeApi(search_profiles=ApiResult(ok=True, data=[{"user_id": 1, "state": "TX"}]))

    result = asyncio.run(SearchService(api).search(Role.ATHLETE, {
        "high_school_name": "",
        "positions": "Catcher",
        "state": "TX",
        "bio": "   ",
    }))

    assert api.called("search_profiles") == [(Role.ATHLETE, {"positions": "Catcher", "state": "TX"})]
    assert len(result.items) == 1


def test_unknown_filters_are_ignored():
    params = SearchService.build_query(Role.COACH, {"division": "D2", "password": "x"})

    assert params == {"division": "D2"}


def test_empty_list_is_no_results():
    api = FakeApi(search_profiles=ApiResult(ok=True, data=[]))

    result = asyncio.run(SearchService(api).search(Role.COACH, {}))

    assert result.empty


def test_single_record_is_wrapped():
    api = FakeApi(search_profiles=ApiResult(ok=True, data={"user_id": 2}))

    result = asyncio.run(SearchService(api).search(Role.COACH, {}))

    assert [item["user_id"] for item in result.items] == [2]
    assert result.items[0]["team_needs"] is None


def test_failure_raises():
    api = FakeApi(search_profiles=ApiResult(ok=False, status_code=500))

    with pytest.raises(ScoutbaseError, match="Search failed"):
        asyncio.run(SearchService(api).search(Role.ATHLETE, {"state": "TX"}))


def test_scouts_are_not_searchable():
    with pytest.raises(ValueError):
        SearchService.build_query(Role.SCOUT, {})


def test_unreadable_records_are_dropped():
    api = FakeApi(search_profiles=ApiResult(ok=True, data=[
        {"user_id": 1, "height": 6.2},
        {"height": 5.9},
        {"user_id": 3, "weight": "heavy"},
        "garbage",
    ]))

    result = asyncio.run(SearchService(api).search(Role.ATHLETE, {}))

    assert [item["user_id"] for item in result.items] == [1]
