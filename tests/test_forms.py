import math

import pytest

from core.domain.errors import ValidationError
from core.domain.forms import (
    ATHLETE_PROFILE_FORM,
    ATHLETE_SEARCH_FORM,
    COACH_PROFILE_FORM,
    LOGIN_FORM,
    REGISTRATION_FORM,
    SCOUT_PROFILE_FORM,
    format_number,
    parse_number,
)


def test_parse_number_reads_leading_number():
    assert parse_number("6.1") == 6.1
    assert parse_number("185 lbs") == 185.0
    assert parse_number(" -2") == -2.0
    assert parse_number(72) == 72.0


def test_parse_number_without_digits_is_nan():
    assert math.isnan(parse_number("tall"))
    assert math.isnan(parse_number(""))
    assert math.isnan(parse_number(None))


def test_format_number():
    assert format_number(6.0) == "6"
    assert format_number(6.1) == "6.1"
    assert format_number(math.nan) == "NaN"


@pytest.mark.parametrize("missing", ["name", "email", "password"])
def test_registration_requires_every_field(missing):
    values = {"name": "Ann", "email": "ann@example.com", "password": "pw"}
    values[missing] = ""

    with pytest.raises(ValidationError) as exc:
        REGISTRATION_FORM.validate(values)
    assert exc.value.missing == [missing]


def test_whitespace_counts_as_missing():
    assert LOGIN_FORM.missing({"email": "   ", "password": "pw"}) == ["email"]


def test_athlete_required_subset():
    assert ATHLETE_PROFILE_FORM.missing({}) == [
        "high_school_name", "positions", "height", "weight", "bio", "state",
    ]


def test_coach_required_subset():
    assert COACH_PROFILE_FORM.missing({}) == [
        "team_needs", "school_name", "position_within_org", "bio",
    ]


def test_scout_form_requires_nothing():
    SCOUT_PROFILE_FORM.validate({})


def test_form_data_sends_every_field_and_nan():
    values = {
        "high_school_name": "Central High",
        "positions": "Pitcher",
        "height": "tall",
        "weight": "185",
        "bio": "Lefty",
        "state": "TX",
    }
    data = ATHLETE_PROFILE_FORM.to_form_data(values)

    assert data["height"] == "NaN"
    assert data["weight"] == "185"
    assert data["youtube_video_link"] == ""
    assert data["throwing_arm"] == ""
    assert "profile_picture" not in data


def test_edit_json_uses_null_for_empty_and_nan():
    body = ATHLETE_PROFILE_FORM.editable().to_json({
        "high_school_name": "Central High",
        "height": "tall",
        "weight": "190.5",
        "bio": "",
    })

    assert body["high_school_name"] == "Central High"
    assert body["height"] is None
    assert body["weight"] == 190.5
    assert body["bio"] is None
    assert body["state"] is None


def test_editable_form_drops_requirements_and_picture():
    form = COACH_PROFILE_FORM.editable()

    assert form.missing({}) == []
    assert form.image_field is None
    assert form.get("profile_picture") is None


def test_query_params_keep_only_filled_filters():
    params = ATHLETE_SEARCH_FORM.query_params({
        "high_school_name": "",
        "positions": " Catcher ",
        "state": None,
        "height": "72",
    })

    assert params == {"positions": "Catcher", "height": "72"}
