"""
Auth service - login/registration and post-login routing.

Flow after a successful login:
    token -> decode -> fetch role -> (no role) role selection
                                  -> fetch profile -> incomplete: profile creation
                                                   -> complete:   home
Each step awaits the previous one; any failure stops the flow.
"""

import logging
from typing import Any, Hashable, Optional

from core.domain.constants import CREATE_PROFILE_ROUTES
from core.domain.errors import AuthError, ScoutbaseError, SessionExpiredError
from core.domain.forms import LOGIN_FORM, REGISTRATION_FORM
from core.domain.models import ApiResult, Role, Route, Session
from core.interfaces.api import IScoutbaseApi
from core.services.session_service import SessionStore
from core.utils.tokens import decode_token

logger = logging.getLogger(__name__)


def is_profile_complete(profile: Any) -> bool:
    """
    A profile counts as complete when any field other than `user_id` holds
    a non-null, non-empty value.

    Lookup endpoints answer with a list; its first record is checked and an
    empty list is incomplete. NOTE: a single stray default value is enough
    to pass, this mirrors what the backend contract expects.
    """
    if isinstance(profile, list):
        if not profile:
            return False
        profile = profile[0]
    if not isinstance(profile, dict):
        return False
    return any(
        value is not None and value != ""
        for key, value in profile.items()
        if key != "user_id"
    )


class AuthService:
    """Service for authentication and session routing"""

    def __init__(self, api: IScoutbaseApi, sessions: SessionStore):
        self.api = api
        self.sessions = sessions

    # === LOGIN / REGISTER ===

    async def login(self, key: Hashable, email: str, password: str) -> Session:
        """
        Log in and store the session for `key`.

        Raises:
            ValidationError: email or password empty (no request sent).
            AuthError: non-2xx response, or no decodable token in it.
        """
        LOGIN_FORM.validate({"email": email, "password": password})

        result = await self.api.login(email, password)
        if not result.ok:
            raise AuthError(result.error_message("Login failed. Please check your email and password."))

        token = result.data.get("jwt") if isinstance(result.data, dict) else None
        if not token:
            raise AuthError("Token not found in response.")

        claims = decode_token(token)
        logger.info(f"User {claims.id} logged in")
        return self.sessions.set(key, Session(token=token, user_id=claims.id, name=claims.name))

    async def register(self, key: Hashable, name: str, email: str, password: str) -> Session:
        """Create the account, then log straight in with the same credentials"""
        REGISTRATION_FORM.validate({"name": name, "email": email, "password": password})

        result = await self.api.register(name, email, password)
        if not result.ok:
            raise AuthError(result.error_message("Registration failed. Please try again."))

        logger.info(f"Registered {email}, logging in")
        return await self.login(key, email, password)

    async def sign_in(self, key: Hashable, email: str, password: str) -> Route:
        session = await self.login(key, email, password)
        return await self._route_or_forget(key, session)

    async def sign_up(self, key: Hashable, name: str, email: str, password: str) -> Route:
        session = await self.register(key, name, email, password)
        return await self._route_or_forget(key, session)

    async def _route_or_forget(self, key: Hashable, session: Session) -> Route:
        """A login whose routing step fails is not kept"""
        try:
            return await self.resolve_route(session)
        except ScoutbaseError:
            self.sessions.invalidate(key)
            raise

    # === ROUTING ===

    async def fetch_role(self, session: Session) -> Optional[Role]:
        """Look up the user's role and remember it on the session"""
        result = await self.api.fetch_role(session.user_id)
        if not result.ok:
            raise ScoutbaseError(result.error_message("Failed to fetch role."))
        raw = result.data.get("role") if isinstance(result.data, dict) else None
        session.role = Role.parse(raw)
        return session.role

    async def resolve_route(self, session: Session) -> Route:
        """Decide which screen an authenticated user lands on"""
        role = await self.fetch_role(session)
        if role is None:
            session.profile_complete = False
            return Route.ROLE_ASSIGNMENT

        result = await self.api.search_profiles(role, {"user_id": session.user_id})
        if not result.ok:
            raise ScoutbaseError(result.error_message("Failed to fetch profile data."))

        session.profile_complete = is_profile_complete(result.data)
        if not session.profile_complete:
            return CREATE_PROFILE_ROUTES[role]
        return Route.HOME

    async def home_route(self, session: Session) -> Route:
        """
        Route for a user asking for the home screen: HOME once the role is set
        and the profile is complete, otherwise the step still missing.
        """
        if session.role is not None and session.profile_complete:
            return Route.HOME
        return await self.resolve_route(session)

    # === SESSION ===

    async def refresh(self, key: Hashable) -> Session:
        """
        Confirm the stored session with the backend (GET /user).

        Raises:
            SessionExpiredError: nothing stored, or the backend no longer
                recognizes the token. The stored session is dropped.
        """
        session = self.sessions.require(key)
        result = await self.api.current_token(session.token)
        if not result.ok or not result.data:
            self.sessions.invalidate(key)
            raise SessionExpiredError("Your session has expired. Please log in again.")

        try:
            claims = decode_token(result.data)
        except AuthError as e:
            self.sessions.invalidate(key)
            raise SessionExpiredError("Your session has expired. Please log in again.") from e

        session.token = result.data
        session.user_id = claims.id
        session.name = claims.name or session.name
        return session

    async def logout(self, key: Hashable) -> ApiResult:
        """
        Log out server-side and forget the session.
        The session is dropped whatever the backend answers.
        """
        session = self.sessions.invalidate(key)
        result = await self.api.logout(session.token if session else None)
        if not result.ok:
            logger.warning(f"Logout request failed: {result.message or result.status_code}")
        return result
