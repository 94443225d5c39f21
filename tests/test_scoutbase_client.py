import asyncio
import json

import httpx

from core.domain.models import ImageAttachment, Role
from infrastructure.api import HttpScoutbaseApi

BASE_URL = "http://backend.test/scoutbase"


def make_api(handler):
    seen = []

    def record(request):
        request.read()
        seen.append(request)
        return handler(request)

    return HttpScoutbaseApi(BASE_URL + "/", transport=httpx.MockTransport(record)), seen


def test_login_posts_credentials():
    api, seen = make_api(lambda request: httpx.Response(200, json={"jwt": "abc"}))

    result = asyncio.run(api.login("ann@example.com", "pw"))

    assert result.ok
    assert result.data == {"jwt": "abc"}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/scoutbase/login"
    assert json.loads(request.content) == {"email": "ann@example.com", "password": "pw"}


def test_error_status_carries_server_detail():
    api, _ = make_api(lambda request: httpx.Response(400, json={"detail": "Incorrect password"}))

    result = asyncio.run(api.login("ann@example.com", "bad"))

    assert not result.ok
    assert result.status_code == 400
    assert result.error_message("fallback") == "Incorrect password"


def test_error_without_json_falls_back():
    api, _ = make_api(lambda request: httpx.Response(500, text="oops"))

    result = asyncio.run(api.fetch_role(1))

    assert not result.ok
    assert result.error_message("Failed.") == "Failed."


def test_network_error_becomes_failed_result():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    api, _ = make_api(handler)

    result = asyncio.run(api.register("Ann", "ann@example.com", "pw"))

    assert not result.ok
    assert result.status_code is None
    assert "Network error" in result.message


def test_non_json_success_body_is_failure():
    api, _ = make_api(lambda request: httpx.Response(200, text="<html>"))

    result = asyncio.run(api.fetch_role(1))

    assert not result.ok
    assert result.message == "Unexpected response from server"


def test_empty_success_body_is_ok():
    api, _ = make_api(lambda request: httpx.Response(200))

    result = asyncio.run(api.logout("tok"))

    assert result.ok
    assert result.data is None


def test_current_token_sends_cookie_and_reads_text():
    api, seen = make_api(lambda request: httpx.Response(200, text='"fresh.token.value"'))

    result = asyncio.run(api.current_token("old.token"))

    assert result.ok
    assert result.data == "fresh.token.value"
    assert seen[0].url.path == "/scoutbase/user"
    assert "jwt=old.token" in seen[0].headers["cookie"]


def test_search_uses_role_endpoint_and_params():
    api, seen = make_api(lambda request: httpx.Response(200, json=[]))

    asyncio.run(api.search_profiles(Role.COACH, {"state": "TX", "division": "D1"}))

    request = seen[0]
    assert request.url.path == "/scoutbase/searchforcoach"
    assert dict(request.url.params) == {"state": "TX", "division": "D1"}


def test_assign_role_body():
    api, seen = make_api(lambda request: httpx.Response(200, json={"message": "ok"}))

    asyncio.run(api.assign_role(7, Role.SCOUT))

    assert seen[0].url.path == "/scoutbase/assignrole"
    assert json.loads(seen[0].content) == {"user_id": 7, "role_name": "Scout"}


def test_create_without_picture_is_plain_form():
    api, seen = make_api(lambda request: httpx.Response(201, json={"id": 1}))

    asyncio.run(api.create_profile(Role.ATHLETE, {"user_id": 7, "height": "NaN"}))

    request = seen[0]
    assert request.url.path == "/scoutbase/athlete/createprofile"
    assert request.headers["content-type"].startswith("application/x-www-form-urlencoded")
    assert b"height=NaN" in request.content


def test_create_with_picture_is_multipart():
    api, seen = make_api(lambda request: httpx.Response(201, json={"id": 1}))
    image = ImageAttachment.from_uri("file:///tmp/photos/me.png", content=b"\x89PNG")

    asyncio.run(api.create_profile(Role.COACH, {"user_id": 7, "bio": "Hi"}, image))

    request = seen[0]
    assert request.url.path == "/scoutbase/coach/createprofile"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="profile_picture"; filename="me.png"' in request.content
    assert b"Content-Type: image/png" in request.content


def test_scout_create_is_json():
    api, seen = make_api(lambda request: httpx.Response(201, json={"user_id": 7}))

    asyncio.run(api.create_profile(Role.SCOUT, {"user_id": 7}))

    assert seen[0].url.path == "/scoutbase/scout/createprofile"
    assert json.loads(seen[0].content) == {"user_id": 7}


def test_update_and_picture_paths():
    api, seen = make_api(lambda request: httpx.Response(200, json={}))
    image = ImageAttachment.from_uri("avatar", content=b"x")

    asyncio.run(api.update_profile(Role.ATHLETE, 5, {"bio": None}))
    asyncio.run(api.replace_profile_picture(Role.COACH, 5, image))
    asyncio.run(api.fetch_email(5))

    assert [(r.method, r.url.path) for r in seen] == [
        ("PUT", "/scoutbase/editathlete/5/"),
        ("PUT", "/scoutbase/edit-coach-profile-picture/5/"),
        ("GET", "/scoutbase/fetch-email/5/"),
    ]
    assert json.loads(seen[0].content) == {"bio": None}
    assert image.content_type == "image"
