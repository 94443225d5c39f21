import asyncio
from types import SimpleNamespace

from adapters.telegram.middleware import SessionMiddleware, ThrottlingMiddleware


def test_throttle_sliding_window():
    throttle = ThrottlingMiddleware(default_limit=2, interval=60)

    assert throttle.allow(1, "default", 2, now=0)
    assert throttle.allow(1, "default", 2, now=1)
    assert not throttle.allow(1, "default", 2, now=2)
    assert throttle.allow(2, "default", 2, now=2)
    assert throttle.allow(1, "default", 2, now=61)


def test_search_has_its_own_window():
    throttle = ThrottlingMiddleware(default_limit=1, search_limit=1, interval=60)

    assert throttle.allow(1, "default", 1, now=0)
    assert throttle.allow(1, "search", 1, now=0)
    assert not throttle.allow(1, "search", 1, now=1)


def test_no_session_for_events_without_chat(sessions):
    middleware = SessionMiddleware(sessions)
    seen = {}

    async def handler(event, data):
        seen.update(data)
        return "handled"

    result = asyncio.run(middleware(handler, SimpleNamespace(), {}))

    assert result == "handled"
    assert seen["session"] is None


def test_idle_users_are_forgotten():
    throttle = ThrottlingMiddleware(default_limit=5, interval=60)
    for user_id in range(100):
        throttle.allow(user_id, "default", 5, now=10)
    assert throttle.tracked() == 100

    assert throttle.allow(500, "default", 5, now=75)
    assert throttle.tracked() == 1

    assert throttle.allow(500, "default", 5, now=80)
    assert throttle.tracked() == 1
