"""
Profile service - create, load and edit role-specific profiles.
Platform-agnostic, works through the API interface.
"""

import logging
from typing import Any, Dict, Optional

import pydantic

from core.domain.constants import EDIT_PROFILE_PATHS
from core.domain.errors import ScoutbaseError, ValidationError
from core.domain.forms import PROFILE_FORMS, FormSchema, format_number
from core.domain.models import ApiResult, ImageAttachment, Role, Session, UserId, profile_record
from core.interfaces.api import IScoutbaseApi

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for profile CRUD (no deletion)"""

    def __init__(self, api: IScoutbaseApi):
        self.api = api

    @staticmethod
    def form_for(role: Role) -> FormSchema:
        return PROFILE_FORMS[role]

    @staticmethod
    def is_editable(role: Optional[Role]) -> bool:
        return role in EDIT_PROFILE_PATHS

    async def _role(self, session: Session) -> Role:
        if session.role is not None:
            return session.role
        result = await self.api.fetch_role(session.user_id)
        role = Role.parse(result.data.get("role")) if result.ok and isinstance(result.data, dict) else None
        if role is None:
            raise ScoutbaseError("No role assigned yet.")
        session.role = role
        return role

    # === CREATE ===

    async def create(
        self,
        session: Session,
        values: Dict[str, Any],
        image: Optional[ImageAttachment] = None,
    ) -> ApiResult:
        """
        Create the profile for the session's role.

        Raises:
            ValidationError: a required field is empty (no request sent).
        """
        role = await self._role(session)
        form = self.form_for(role)
        form.validate(values)

        fields: Dict[str, Any] = {"user_id": session.user_id}
        if role != Role.SCOUT:
            fields.update(form.to_form_data(values))

        result = await self.api.create_profile(role, fields, image if role != Role.SCOUT else None)
        if not result.ok:
            return ApiResult(
                ok=False,
                status_code=result.status_code,
                message=result.error_message(f"Failed to create {role.value.lower()} profile."),
            )
        session.profile_complete = True
        logger.info(f"{role.value} profile created for user {session.user_id}")
        return result

    # === READ ===

    async def load(self, session: Session) -> Optional[Dict[str, Any]]:
        """The session user's profile record, None if there is none yet"""
        role = await self._role(session)
        result = await self.api.search_profiles(role, {"user_id": session.user_id})
        if not result.ok:
            raise ScoutbaseError(result.error_message("Failed to load profile data."))

        data = result.data
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            return None
        try:
            return profile_record(role, data)
        except pydantic.ValidationError as e:
            logger.warning(f"Unreadable {role.value} profile for user {session.user_id}: {e}")
            raise ScoutbaseError("Unexpected profile data.") from e

    @staticmethod
    def prefill(form: FormSchema, record: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """Form values from an existing record (missing -> empty string)"""
        record = record or {}
        values = {}
        for f in form.input_fields:
            value = record.get(f.name)
            if value is None:
                values[f.name] = ""
            elif isinstance(value, float):
                values[f.name] = format_number(value)
            else:
                values[f.name] = str(value)
        return values

    # === UPDATE ===

    async def update(self, session: Session, values: Dict[str, Any]) -> ApiResult:
        """Partial in-place update (PUT, JSON). Empty values are sent as null."""
        role = await self._role(session)
        if not self.is_editable(role):
            raise ValidationError([], f"{role.value} profiles have nothing to edit.")

        body = self.form_for(role).editable().to_json(values)
        result = await self.api.update_profile(role, session.user_id, body)
        if not result.ok:
            return ApiResult(
                ok=False,
                status_code=result.status_code,
                message=result.error_message("Failed to update profile."),
            )
        logger.info(f"{role.value} profile updated for user {session.user_id}")
        return result

    async def replace_picture(self, session: Session, image: ImageAttachment) -> ApiResult:
        role = await self._role(session)
        if not self.is_editable(role):
            raise ValidationError([], f"{role.value} profiles have no picture.")

        result = await self.api.replace_profile_picture(role, session.user_id, image)
        if not result.ok:
            return ApiResult(
                ok=False,
                status_code=result.status_code,
                message=result.error_message("Failed to update profile picture."),
            )
        return result

    # === CONTACT ===

    async def fetch_email(self, user_id: UserId) -> ApiResult:
        """Reveal a user's contact email; data is the address"""
        result = await self.api.fetch_email(user_id)
        email = result.data.get("email") if result.ok and isinstance(result.data, dict) else None
        if not email:
            return ApiResult(
                ok=False,
                status_code=result.status_code,
                message=result.error_message("Email not available."),
            )
        return ApiResult(ok=True, status_code=result.status_code, data=email)
