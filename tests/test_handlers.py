import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage

import adapters.telegram.handlers  # noqa: F401  registers every screen
from adapters.telegram.handlers import profile, profile_form, search
from adapters.telegram.keyboards import get_form_step_keyboard
from adapters.telegram.loader import session_store
from adapters.telegram.states import ProfileFormStates, SearchStates
from config.features import features
from core.domain.models import ApiResult, Role, Session
from core.services.auth_service import AuthService
from core.services.profile_service import ProfileService
from core.services.search_service import SearchService
from tests.fakes import FakeApi, make_token

CHAT_ID = 1001

ATHLETE_VALUES = {
    "high_school_name": "Central High",
    "positions": "Pitcher",
    "youtube_video_link": "",
    "height": "6.1",
    "weight": "185",
    "bio": "",
    "state": "TX",
    "throwing_arm": "",
    "batting_arm": "",
}


def fake_message():
    return SimpleNamespace(chat=SimpleNamespace(id=CHAT_ID), answer=AsyncMock(), text=None)


def fake_callback(data):
    return SimpleNamespace(data=data, answer=AsyncMock(), message=fake_message())


def fsm():
    return FSMContext(storage=MemoryStorage(), key=StorageKey(bot_id=42, chat_id=CHAT_ID, user_id=CHAT_ID))


def sent_texts(message):
    return [call.args[0] for call in message.answer.call_args_list]


def callbacks(markup):
    return [button.callback_data for row in markup.inline_keyboard for button in row]


def athlete_session():
    return Session(token=make_token(), user_id=7, role=Role.ATHLETE)


async def review_step(state, values, mode=profile_form.CREATE):
    await state.set_state(ProfileFormStates.confirming)
    await state.update_data(mode=mode, role=Role.ATHLETE.value, values=values,
                            field_index=len(values), image=None, resume=False)


@pytest.fixture(autouse=True)
def clean_store(monkeypatch):
    monkeypatch.setattr(features, "SESSION_EXPIRED_REDIRECT_SECONDS", 0)
    session_store.invalidate(CHAT_ID)
    yield
    session_store.invalidate(CHAT_ID)


# === profile form ===

def test_submit_with_missing_field_jumps_back_then_returns_to_review(monkeypatch):
    api = FakeApi()
    monkeypatch.setattr(profile_form, "profile_service", ProfileService(api))
    state = fsm()
    asyncio.run(review_step(state, ATHLETE_VALUES))
    callback = fake_callback("form_submit")

    asyncio.run(profile_form.form_submit(callback, state, athlete_session()))

    data = asyncio.run(state.get_data())
    assert sent_texts(callback.message)[0] == "Please fill in all required fields: Bio"
    assert data["field_index"] == 5
    assert data["resume"] is True
    assert asyncio.run(state.get_state()) == ProfileFormStates.entering_value.state
    assert api.calls == []

    reply = fake_message()
    reply.text = "Left-handed pitcher"
    asyncio.run(profile_form.field_entered(reply, state))

    # The picture step is not asked again once the walk resumes
    assert asyncio.run(state.get_state()) == ProfileFormStates.confirming.state
    assert asyncio.run(state.get_data())["values"]["bio"] == "Left-handed pitcher"
    assert "Bio: Left-handed pitcher" in sent_texts(reply)[0]


def test_skipping_picture_goes_to_review():
    state = fsm()
    asyncio.run(review_step(state, dict(ATHLETE_VALUES, bio="Lefty")))
    asyncio.run(state.set_state(ProfileFormStates.waiting_picture))
    asyncio.run(state.update_data(image={"filename": "old.png", "content_type": "image/png"}))
    callback = fake_callback("picture_skip")

    asyncio.run(profile_form.picture_skipped(callback, state))

    assert asyncio.run(state.get_state()) == ProfileFormStates.confirming.state
    assert asyncio.run(state.get_data())["image"] is None
    summary = sent_texts(callback.message)[0]
    assert "High School Name: Central High" in summary
    assert "old.png" not in summary
    callback.answer.assert_awaited_once()


def test_server_failure_stays_on_review(monkeypatch):
    api = FakeApi(create_profile=ApiResult(ok=False, status_code=500, message="Server error"))
    monkeypatch.setattr(profile_form, "profile_service", ProfileService(api))
    state = fsm()
    asyncio.run(review_step(state, dict(ATHLETE_VALUES, bio="Lefty")))
    callback = fake_callback("form_submit")
    session = athlete_session()

    asyncio.run(profile_form.form_submit(callback, state, session))

    assert sent_texts(callback.message) == ["Server error"]
    markup = callback.message.answer.call_args.kwargs["reply_markup"]
    assert "form_submit" in callbacks(markup)
    assert asyncio.run(state.get_state()) == ProfileFormStates.confirming.state
    assert asyncio.run(state.get_data())["values"]["bio"] == "Lefty"
    assert not session.profile_complete


def test_clear_empties_an_optional_field_on_edit():
    state = fsm()
    values = {"name": "Sam", "team_needs": "Pitchers", "school_name": "State U",
              "position_within_org": "Head Coach", "bio": "Hi", "division": "D1", "state": "TX"}
    asyncio.run(state.set_state(ProfileFormStates.entering_value))
    asyncio.run(state.update_data(mode=profile_form.EDIT, role=Role.COACH.value, values=values,
                                  field_index=5, image=None, resume=False))
    callback = fake_callback("form_skip")

    asyncio.run(profile_form.field_skipped(callback, state))

    data = asyncio.run(state.get_data())
    assert data["values"]["division"] == ""
    assert data["values"]["state"] == "TX"
    assert data["field_index"] == 6


def test_step_keyboard_offers_clear_next_to_keep():
    assert callbacks(get_form_step_keyboard(can_skip=True, can_keep=True)) == [
        "form_keep", "form_skip", "form_cancel",
    ]
    assert callbacks(get_form_step_keyboard(can_skip=False, can_keep=True)) == ["form_keep", "form_cancel"]
    assert callbacks(get_form_step_keyboard(can_skip=True)) == ["form_skip", "form_cancel"]

    labels = [b.text for row in get_form_step_keyboard(can_skip=True, can_keep=True).inline_keyboard for b in row]
    assert "Clear" in labels


# === search ===

def test_search_without_results_returns_to_panel(monkeypatch):
    api = FakeApi(search_profiles=ApiResult(ok=True, data=[]))
    monkeypatch.setattr(search, "search_service", SearchService(api))
    state = fsm()
    asyncio.run(state.set_state(SearchStates.choosing_filter))
    asyncio.run(state.update_data(role=Role.COACH.value, filters={"state": "TX"}))
    callback = fake_callback("search_run")

    asyncio.run(search.run_search(callback, state))

    texts = sent_texts(callback.message)
    assert texts[0] == "No results found."
    assert "Coaches" in texts[1]
    assert api.called("search_profiles") == [(Role.COACH, {"state": "TX"})]
    assert asyncio.run(state.get_state()) == SearchStates.choosing_filter.state


# === logout ===

@pytest.mark.parametrize("strict,notice", [
    (True, "Failed to logout on the server. You've been logged out here anyway."),
    (False, "You've been logged out."),
])
def test_failed_logout_still_lands_on_landing(monkeypatch, strict, notice):
    api = FakeApi(logout=ApiResult(ok=False, status_code=500))
    monkeypatch.setattr(profile, "auth_service", AuthService(api, session_store))
    monkeypatch.setattr(features, "STRICT_LOGOUT", strict)
    session_store.set(CHAT_ID, Session(token=make_token(), user_id=7))
    message, state = fake_message(), fsm()

    asyncio.run(profile._logout(message, state))

    texts = sent_texts(message)
    assert texts[0] == notice
    assert "Scoutbase" in texts[1]
    assert CHAT_ID not in session_store
    assert len(api.called("logout")) == 1
