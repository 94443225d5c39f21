import asyncio

import pytest

from core.domain.errors import ValidationError
from core.domain.models import ApiResult, Role, Route, Session
from core.services.role_service import RoleService
from tests.fakes import FakeApi


@pytest.fixture
def session(token):
    return Session(token=token, user_id=7)


def test_assign_without_selection_is_local_error(session):
    api = FakeApi()

    with pytest.raises(ValidationError, match="select a role"):
        asyncio.run(RoleService(api).assign(session, None))
    assert api.calls == []


@pytest.mark.parametrize("role,route", [
    (Role.ATHLETE, Route.CREATE_ATHLETE),
    (Role.COACH, Route.CREATE_COACH),
    (Role.SCOUT, Route.CREATE_SCOUT),
])
def test_assign_routes_to_profile_creation(session, role, route):
    api = FakeApi(assign_role=ApiResult(ok=True, status_code=200, data={"message": "ok"}))

    result = asyncio.run(RoleService(api).assign(session, role))

    assert result.ok
    assert result.data == route
    assert session.role == role
    assert api.called("assign_role") == [(7, role)]


def test_assign_failure_keeps_role_unset(session):
    api = FakeApi(assign_role=ApiResult(ok=False, status_code=500))

    result = asyncio.run(RoleService(api).assign(session, Role.COACH))

    assert not result.ok
    assert result.message == "Failed to assign role. Please try again."
    assert session.role is None


def test_assign_failure_prefers_server_message(session):
    api = FakeApi(assign_role=ApiResult(ok=False, status_code=400, message="Role already assigned"))

    result = asyncio.run(RoleService(api).assign(session, Role.SCOUT))

    assert result.message == "Role already assigned"
