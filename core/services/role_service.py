"""
Role assignment - one role per user, picked once after registration.
"""

import logging
from typing import Optional

from core.domain.constants import CREATE_PROFILE_ROUTES
from core.domain.errors import ValidationError
from core.domain.models import ApiResult, Role, Route, Session
from core.interfaces.api import IScoutbaseApi

logger = logging.getLogger(__name__)


class RoleService:
    """Service for persisting the user's role choice"""

    def __init__(self, api: IScoutbaseApi):
        self.api = api

    async def assign(self, session: Session, role: Optional[Role]) -> ApiResult:
        """
        Persist `role` for the session user.

        On success the session's role is set and `data` carries the profile
        creation route for that role. Failures come back as-is so the user
        can pick again.
        """
        if role is None:
            raise ValidationError(["role_name"], "Please select a role.")

        result = await self.api.assign_role(session.user_id, role)
        if not result.ok:
            logger.warning(f"Role assignment failed for user {session.user_id}: {result.message}")
            return ApiResult(
                ok=False,
                status_code=result.status_code,
                message=result.error_message("Failed to assign role. Please try again."),
            )

        session.role = role
        logger.info(f"User {session.user_id} is now {role.value}")
        return ApiResult(ok=True, status_code=result.status_code, data=self.next_route(role))

    @staticmethod
    def next_route(role: Role) -> Route:
        return CREATE_PROFILE_ROUTES[role]
