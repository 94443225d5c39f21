from core.services.session_service import SessionStore
from core.services.auth_service import AuthService, is_profile_complete
from core.services.role_service import RoleService
from core.services.profile_service import ProfileService
from core.services.search_service import SearchService

__all__ = [
    "SessionStore",
    "AuthService",
    "is_profile_complete",
    "RoleService",
    "ProfileService",
    "SearchService",
]
