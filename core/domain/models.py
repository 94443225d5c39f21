"""
Domain models - the core of business logic.
These models are transport-agnostic (work with Telegram, a CLI, tests, etc.)
and mirror the JSON records exchanged with the Scoutbase backend.
"""

import re
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Union
from enum import Enum


# === ENUMS ===

class Role(str, Enum):
    """Marketplace role. Values are the exact strings the backend stores."""
    ATHLETE = "Athlete"
    COACH = "Coach"
    SCOUT = "Scout"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Map a backend role string to a Role, None for empty/unknown"""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Route(str, Enum):
    """Screens the client can navigate to"""
    LANDING = "/"
    LOGIN = "/login"
    REGISTER = "/register"
    ROLE_ASSIGNMENT = "/roleassignment"
    CREATE_ATHLETE = "/createathlete"
    CREATE_COACH = "/createcoach"
    CREATE_SCOUT = "/createscout"
    HOME = "/home"
    PROFILE = "/profile"
    EDIT_ATHLETE = "/editathleteprofile"
    EDIT_COACH = "/editcoachprofile"
    SEARCH_ATHLETE = "/searchathlete"
    SEARCH_COACH = "/searchcoach"


UserId = Union[int, str]


# === USER ===

class TokenClaims(BaseModel):
    """What the client reads out of a decoded (unverified) bearer token"""
    id: UserId
    name: Optional[str] = None


class Session(BaseModel):
    """In-memory session context, populated once at login"""
    token: str
    user_id: UserId
    name: Optional[str] = None
    role: Optional[Role] = None
    # Role set and profile found complete (checked at login or just created)
    profile_complete: bool = False


# === PROFILES ===

class AthleteProfile(BaseModel):
    user_id: UserId
    high_school_name: Optional[str] = None
    positions: Optional[str] = None
    youtube_video_link: Optional[str] = None
    profile_picture: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    bio: Optional[str] = None
    state: Optional[str] = None
    throwing_arm: Optional[str] = None
    batting_arm: Optional[str] = None


class CoachProfile(BaseModel):
    user_id: UserId
    name: Optional[str] = None
    team_needs: Optional[str] = None
    school_name: Optional[str] = None
    position_within_org: Optional[str] = None
    bio: Optional[str] = None
    profile_picture: Optional[str] = None
    division: Optional[str] = None
    state: Optional[str] = None


class ScoutProfile(BaseModel):
    """Scouts carry no attributes beyond the owning user"""
    user_id: UserId


PROFILE_MODELS = {
    Role.ATHLETE: AthleteProfile,
    Role.COACH: CoachProfile,
    Role.SCOUT: ScoutProfile,
}


def profile_record(role: Role, raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a backend record against the role's profile model and return it
    as a plain dict of the known fields. Raises pydantic.ValidationError.
    """
    return PROFILE_MODELS[role].model_validate(raw).model_dump()


# === API PLUMBING ===

class ApiResult(BaseModel):
    """Uniform success/failure wrapper returned by every API call"""
    ok: bool
    status_code: Optional[int] = None
    data: Any = None
    message: Optional[str] = None

    def error_message(self, fallback: str) -> str:
        """Server-provided message if there is one, otherwise the fallback"""
        return self.message or fallback


class ImageAttachment(BaseModel):
    """Local image attached to a multipart upload"""
    filename: str
    content_type: str
    content: bytes = b""

    @classmethod
    def from_uri(cls, uri: str, content: bytes = b"") -> "ImageAttachment":
        """
        Build an attachment from a file URI or path.

        The MIME type comes from the extension only: `photo.jpg` -> `image/jpg`,
        no extension -> `image`.
        """
        path = uri.replace("file://", "", 1)
        filename = path.split("/")[-1]
        match = re.search(r"\.(\w+)$", filename)
        content_type = f"image/{match.group(1)}" if match else "image"
        return cls(filename=filename, content_type=content_type, content=content)


class SearchResult(BaseModel):
    """Records returned by a search, in backend order"""
    items: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.items


# === STATIC CONTENT ===

class Article(BaseModel):
    """Featured article shown on the home screen"""
    id: int
    title: str
    description: str
