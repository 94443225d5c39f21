"""
Text cards for profile records (profile screen and search results).
"""

from html import escape
from typing import Any, Dict, Optional

from core.domain.forms import format_number
from core.domain.models import Role
from locales import t


def _display(value: Any) -> str:
    if value is None or value == "":
        return t("not_available")
    if isinstance(value, float):
        return format_number(value)
    return escape(str(value))


def render_profile_card(role: Optional[Role], record: Dict[str, Any]) -> str:
    """Role-specific card; unknown roles fall back to the scout card"""
    if role == Role.ATHLETE:
        keys = ("high_school_name", "positions", "height", "weight",
                "throwing_arm", "batting_arm", "state", "bio")
        text = t("athlete_card", **{k: _display(record.get(k)) for k in keys})
        if record.get("youtube_video_link"):
            text += t("athlete_video", youtube_video_link=_display(record["youtube_video_link"]))
    elif role == Role.COACH:
        keys = ("school_name", "name", "position_within_org", "team_needs",
                "division", "state", "bio")
        text = t("coach_card", **{k: _display(record.get(k)) for k in keys})
    else:
        text = t("scout_card")

    picture = record.get("profile_picture")
    if picture and str(picture).startswith("http"):
        text += "\n" + t("profile_picture_line", url=escape(str(picture)))
    return text
