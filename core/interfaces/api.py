"""
Scoutbase API interface - abstraction over the remote backend.
Every method returns an ApiResult; transport failures never raise.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from core.domain.models import ApiResult, ImageAttachment, Role, UserId


class IScoutbaseApi(ABC):
    """Interface for the Scoutbase HTTP backend"""

    # === Auth ===

    @abstractmethod
    async def register(self, name: str, email: str, password: str) -> ApiResult:
        """POST /register"""
        pass

    @abstractmethod
    async def login(self, email: str, password: str) -> ApiResult:
        """POST /login, data is the JSON body ({"jwt": ...} on success)"""
        pass

    @abstractmethod
    async def current_token(self, token: str) -> ApiResult:
        """GET /user, data is the raw token text for the session"""
        pass

    @abstractmethod
    async def logout(self, token: Optional[str] = None) -> ApiResult:
        """POST /logout"""
        pass

    # === Roles ===

    @abstractmethod
    async def fetch_role(self, user_id: UserId) -> ApiResult:
        """GET /fetchrole?user_id=, data is {"role": ...}"""
        pass

    @abstractmethod
    async def assign_role(self, user_id: UserId, role: Role) -> ApiResult:
        """POST /assignrole"""
        pass

    # === Profiles ===

    @abstractmethod
    async def search_profiles(self, role: Role, params: Dict[str, Any]) -> ApiResult:
        """GET the role's lookup endpoint with query params, data is a list"""
        pass

    @abstractmethod
    async def create_profile(
        self,
        role: Role,
        fields: Dict[str, Any],
        image: Optional[ImageAttachment] = None,
    ) -> ApiResult:
        """POST the role's createprofile endpoint"""
        pass

    @abstractmethod
    async def update_profile(self, role: Role, user_id: UserId, body: Dict[str, Any]) -> ApiResult:
        """PUT a partial JSON update"""
        pass

    @abstractmethod
    async def replace_profile_picture(self, role: Role, user_id: UserId, image: ImageAttachment) -> ApiResult:
        """PUT a new picture (multipart)"""
        pass

    @abstractmethod
    async def fetch_email(self, user_id: UserId) -> ApiResult:
        """GET /fetch-email/{user_id}/, data is {"email": ...}"""
        pass
