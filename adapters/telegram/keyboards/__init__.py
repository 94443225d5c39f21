from adapters.telegram.keyboards.inline import (
    get_landing_keyboard,
    get_home_keyboard,
    get_back_to_home_keyboard,
    get_role_keyboard,
    get_form_step_keyboard,
    get_picture_keyboard,
    get_form_confirm_keyboard,
    get_scout_create_keyboard,
    get_profile_keyboard,
    get_search_filters_keyboard,
    get_result_keyboard,
)

__all__ = [
    "get_landing_keyboard",
    "get_home_keyboard",
    "get_back_to_home_keyboard",
    # Role assignment
    "get_role_keyboard",
    # Profile form
    "get_form_step_keyboard",
    "get_picture_keyboard",
    "get_form_confirm_keyboard",
    "get_scout_create_keyboard",
    # Profile view
    "get_profile_keyboard",
    # Search
    "get_search_filters_keyboard",
    "get_result_keyboard",
]
