"""
FSM States for Telegram bot - one group per screen.
"""

from aiogram.fsm.state import State, StatesGroup


class RegisterStates(StatesGroup):
    """FSM states for account registration"""
    waiting_name = State()
    waiting_email = State()
    waiting_password = State()


class LoginStates(StatesGroup):
    """FSM states for login"""
    waiting_email = State()
    waiting_password = State()


class RoleStates(StatesGroup):
    """FSM states for role selection"""
    choosing = State()


class ProfileFormStates(StatesGroup):
    """FSM states for profile create/edit (create or edit mode kept in FSM data)"""
    entering_value = State()      # Walking through the form's fields one by one
    waiting_picture = State()     # Optional picture after the text fields
    confirming = State()          # Review and submit


class ProfilePictureStates(StatesGroup):
    """FSM states for replacing the profile picture"""
    waiting_photo = State()


class SearchStates(StatesGroup):
    """FSM states for the search filter panel"""
    choosing_filter = State()
    entering_value = State()
