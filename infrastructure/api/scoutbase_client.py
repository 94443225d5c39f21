"""
httpx implementation of the Scoutbase API.

Each call opens its own AsyncClient so cookies issued to one bot user are
never sent on behalf of another.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from config.settings import settings
from core.domain.constants import (
    REGISTER_PATH, LOGIN_PATH, CURRENT_USER_PATH, LOGOUT_PATH,
    FETCH_ROLE_PATH, ASSIGN_ROLE_PATH, FETCH_EMAIL_PATH,
    PROFILE_LOOKUP_PATHS, CREATE_PROFILE_PATHS, EDIT_PROFILE_PATHS, EDIT_PICTURE_PATHS,
    PROFILE_PICTURE_FIELD, TOKEN_COOKIE,
)
from core.domain.models import ApiResult, ImageAttachment, Role, UserId
from core.interfaces.api import IScoutbaseApi

logger = logging.getLogger(__name__)


def _server_message(response: httpx.Response) -> Optional[str]:
    """Pull `message` / `detail` out of an error body, if it is JSON"""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message") or body.get("detail")
    return str(message) if message else None


class HttpScoutbaseApi(IScoutbaseApi):
    """Talks to the Scoutbase backend over HTTP/JSON"""

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or settings.scoutbase_api_url).rstrip("/")
        # Injected in tests (httpx.MockTransport)
        self._transport = transport

    def _client(self, token: Optional[str] = None) -> httpx.AsyncClient:
        cookies = {TOKEN_COOKIE: token} if token else None
        return httpx.AsyncClient(base_url=self.base_url, transport=self._transport, cookies=cookies)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        as_text: bool = False,
        **kwargs,
    ) -> ApiResult:
        logger.debug(f"{method} {path}")
        try:
            async with self._client(token) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            return ApiResult(ok=False, message=f"Network error: {e}")

        if not response.is_success:
            logger.warning(f"{method} {path} -> {response.status_code}")
            return ApiResult(
                ok=False,
                status_code=response.status_code,
                message=_server_message(response),
            )

        if as_text:
            return ApiResult(ok=True, status_code=response.status_code, data=response.text)

        if not response.content:
            return ApiResult(ok=True, status_code=response.status_code)
        try:
            data = response.json()
        except ValueError:
            logger.warning(f"{method} {path} returned a non-JSON body")
            return ApiResult(ok=False, status_code=response.status_code, message="Unexpected response from server")
        return ApiResult(ok=True, status_code=response.status_code, data=data)

    # === Auth ===

    async def register(self, name: str, email: str, password: str) -> ApiResult:
        return await self._request(
            "POST", REGISTER_PATH,
            json={"name": name, "email": email, "password": password},
        )

    async def login(self, email: str, password: str) -> ApiResult:
        return await self._request("POST", LOGIN_PATH, json={"email": email, "password": password})

    async def current_token(self, token: str) -> ApiResult:
        result = await self._request("GET", CURRENT_USER_PATH, token=token, as_text=True)
        if result.ok:
            # Some backends JSON-encode the bare string
            result.data = (result.data or "").strip().strip('"')
        return result

    async def logout(self, token: Optional[str] = None) -> ApiResult:
        return await self._request("POST", LOGOUT_PATH, token=token)

    # === Roles ===

    async def fetch_role(self, user_id: UserId) -> ApiResult:
        return await self._request("GET", FETCH_ROLE_PATH, params={"user_id": user_id})

    async def assign_role(self, user_id: UserId, role: Role) -> ApiResult:
        return await self._request(
            "POST", ASSIGN_ROLE_PATH,
            json={"user_id": user_id, "role_name": role.value},
        )

    # === Profiles ===

    async def search_profiles(self, role: Role, params: Dict[str, Any]) -> ApiResult:
        return await self._request("GET", PROFILE_LOOKUP_PATHS[role], params=params)

    async def create_profile(
        self,
        role: Role,
        fields: Dict[str, Any],
        image: Optional[ImageAttachment] = None,
    ) -> ApiResult:
        path = CREATE_PROFILE_PATHS[role]
        if role == Role.SCOUT:
            return await self._request("POST", path, json=fields)

        data = {key: str(value) for key, value in fields.items()}
        files = None
        if image is not None:
            # Multipart only when there is a picture; no placeholder is uploaded
            files = {PROFILE_PICTURE_FIELD: (image.filename, image.content, image.content_type)}
        return await self._request("POST", path, data=data, files=files)

    async def update_profile(self, role: Role, user_id: UserId, body: Dict[str, Any]) -> ApiResult:
        path = EDIT_PROFILE_PATHS[role].format(user_id=user_id)
        return await self._request("PUT", path, json=body)

    async def replace_profile_picture(self, role: Role, user_id: UserId, image: ImageAttachment) -> ApiResult:
        path = EDIT_PICTURE_PATHS[role].format(user_id=user_id)
        files = {PROFILE_PICTURE_FIELD: (image.filename, image.content, image.content_type)}
        return await self._request("PUT", path, files=files)

    async def fetch_email(self, user_id: UserId) -> ApiResult:
        return await self._request("GET", FETCH_EMAIL_PATH.format(user_id=user_id))
