"""
Client-side error taxonomy.
Handlers catch these, show `str(error)` to the user and stop the flow.
"""

from typing import Iterable, List


class ScoutbaseError(Exception):
    """Base class for errors surfaced to the user"""


class AuthError(ScoutbaseError):
    """Login/registration failed or the token could not be read"""


class SessionExpiredError(ScoutbaseError):
    """No usable session: the user has to log in again"""


class ValidationError(ScoutbaseError):
    """Required form fields are missing. Raised before any network call."""

    def __init__(self, missing: Iterable[str], message: str = "Please fill in all required fields."):
        self.missing: List[str] = list(missing)
        super().__init__(message)
