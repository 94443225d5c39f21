import pytest

from core.domain.errors import SessionExpiredError
from core.domain.models import Role, Session


def test_set_get_invalidate(sessions, token):
    session = sessions.set(1, Session(token=token, user_id=7))

    assert sessions.get(1) is session
    assert 1 in sessions
    assert len(sessions) == 1

    assert sessions.invalidate(1) is session
    assert sessions.get(1) is None
    assert sessions.invalidate(1) is None


def test_sessions_are_per_chat(sessions, token):
    sessions.set(1, Session(token=token, user_id=7))
    sessions.set(2, Session(token=token, user_id=8))

    sessions.get(1).role = Role.ATHLETE

    assert sessions.get(1).role == Role.ATHLETE
    assert sessions.get(2).role is None


def test_require_without_session(sessions):
    with pytest.raises(SessionExpiredError):
        sessions.require(99)
