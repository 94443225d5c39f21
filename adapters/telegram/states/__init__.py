from adapters.telegram.states.screens import (
    RegisterStates,
    LoginStates,
    RoleStates,
    ProfileFormStates,
    ProfilePictureStates,
    SearchStates,
)

__all__ = [
    "RegisterStates",
    "LoginStates",
    "RoleStates",
    "ProfileFormStates",
    "ProfilePictureStates",
    "SearchStates",
]
