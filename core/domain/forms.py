"""
Declarative form schemas.

One schema per entity drives both the conversational form (field order,
prompt labels) and the client-side required-field check that runs before
any request is sent.
"""

import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from core.domain.errors import ValidationError
from core.domain.models import Role

TEXT = "text"
NUMBER = "number"
SECRET = "secret"
IMAGE = "image"

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: Any) -> float:
    """
    Lenient float parsing: reads the leading number of the input
    ("6.1 ft" -> 6.1) and yields NaN when there is none.
    """
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER.match(str(value or ""))
    if not match:
        return math.nan
    return float(match.group(1))


def format_number(value: float) -> str:
    """Render a number for a form body: 6.0 -> "6", NaN -> "NaN"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    type: str = TEXT
    required: bool = False
    hint: Optional[str] = None  # example shown under the prompt

    @property
    def is_numeric(self) -> bool:
        return self.type == NUMBER


@dataclass(frozen=True)
class FormSchema:
    """Ordered field list for one entity"""

    name: str
    fields: Tuple[FormField, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.fields)

    def __len__(self):
        return len(self.fields)

    def get(self, name: str) -> Optional[FormField]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def input_fields(self) -> List[FormField]:
        """Fields typed in as text (images are attached separately)"""
        return [f for f in self.fields if f.type != IMAGE]

    @property
    def image_field(self) -> Optional[FormField]:
        for f in self.fields:
            if f.type == IMAGE:
                return f
        return None

    def missing(self, values: Mapping[str, Any]) -> List[str]:
        """Names of required fields with no value"""
        return [f.name for f in self.fields if f.required and _is_blank(values.get(f.name))]

    def validate(self, values: Mapping[str, Any]) -> None:
        missing = self.missing(values)
        if missing:
            raise ValidationError(missing)

    def editable(self) -> "FormSchema":
        """Same fields for an in-place edit: nothing required, no picture upload"""
        return FormSchema(
            name=f"{self.name}_edit",
            fields=tuple(replace(f, required=False) for f in self.fields if f.type != IMAGE),
        )

    # === Request bodies ===

    def to_form_data(self, values: Mapping[str, Any]) -> Dict[str, str]:
        """
        Multipart body for profile creation.
        Every input field is sent; empty optional text goes out as "".
        """
        data = {}
        for f in self.input_fields:
            raw = values.get(f.name)
            if f.is_numeric:
                data[f.name] = "" if _is_blank(raw) else format_number(parse_number(raw))
            else:
                data[f.name] = "" if raw is None else str(raw)
        return data

    def to_json(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        JSON body for an in-place edit.
        Empty values become null; JSON has no NaN so unparseable numbers do too.
        """
        body: Dict[str, Any] = {}
        for f in self.input_fields:
            raw = values.get(f.name)
            if _is_blank(raw):
                body[f.name] = None
            elif f.is_numeric:
                number = parse_number(raw)
                body[f.name] = None if math.isnan(number) else number
            else:
                body[f.name] = raw
        return body

    def query_params(self, values: Mapping[str, Any]) -> Dict[str, str]:
        """Search filters: only fields with a value, never empty parameters"""
        return {
            f.name: str(values[f.name]).strip()
            for f in self.input_fields
            if not _is_blank(values.get(f.name))
        }


# === Schemas ===

REGISTRATION_FORM = FormSchema(
    name="registration",
    fields=(
        FormField("name", "Full Name", required=True),
        FormField("email", "Email Address", required=True),
        FormField("password", "Password", type=SECRET, required=True),
    ),
)

LOGIN_FORM = FormSchema(
    name="login",
    fields=(
        FormField("email", "Email", required=True),
        FormField("password", "Password", type=SECRET, required=True),
    ),
)

ATHLETE_PROFILE_FORM = FormSchema(
    name="athlete_profile",
    fields=(
        FormField("high_school_name", "High School Name", required=True),
        FormField("positions", "Positions", required=True, hint="e.g., Pitcher, Outfielder"),
        FormField("youtube_video_link", "YouTube Video Link"),
        FormField("height", "Height", type=NUMBER, required=True, hint="e.g., 6.1"),
        FormField("weight", "Weight (lbs)", type=NUMBER, required=True, hint="e.g., 185"),
        FormField("bio", "Bio", required=True),
        FormField("state", "State", required=True),
        FormField("throwing_arm", "Throwing Arm", hint="Left or Right"),
        FormField("batting_arm", "Batting Arm", hint="Left, Right or Switch"),
        FormField("profile_picture", "Profile Picture", type=IMAGE),
    ),
)

COACH_PROFILE_FORM = FormSchema(
    name="coach_profile",
    fields=(
        FormField("name", "Name"),
        FormField("team_needs", "Team Needs", required=True, hint="e.g., Looking for pitchers"),
        FormField("school_name", "School Name", required=True),
        FormField("position_within_org", "Position Within Organization", required=True, hint="e.g., Head Coach"),
        FormField("bio", "Bio", required=True),
        FormField("division", "Division", hint="e.g., D1"),
        FormField("state", "State"),
        FormField("profile_picture", "Profile Picture", type=IMAGE),
    ),
)

SCOUT_PROFILE_FORM = FormSchema(name="scout_profile")

ATHLETE_SEARCH_FORM = FormSchema(
    name="athlete_search",
    fields=(
        FormField("high_school_name", "High School"),
        FormField("positions", "Positions"),
        FormField("height", "Height (in inches)"),
        FormField("weight", "Weight (in lbs)"),
        FormField("bio", "Bio keywords"),
        FormField("state", "State"),
    ),
)

COACH_SEARCH_FORM = FormSchema(
    name="coach_search",
    fields=(
        FormField("team_needs", "Team Needs"),
        FormField("school_name", "School Name"),
        FormField("position_within_org", "Position"),
        FormField("bio", "Bio keywords"),
        FormField("state", "State"),
        FormField("division", "Division"),
    ),
)

PROFILE_FORMS = {
    Role.ATHLETE: ATHLETE_PROFILE_FORM,
    Role.COACH: COACH_PROFILE_FORM,
    Role.SCOUT: SCOUT_PROFILE_FORM,
}

SEARCH_FORMS = {
    Role.ATHLETE: ATHLETE_SEARCH_FORM,
    Role.COACH: COACH_SEARCH_FORM,
}
