"""
Session store - one Session per chat, held in memory.

Populated once at login and handed to every screen that needs `user_id`,
instead of each screen re-fetching and re-decoding the token.
"""

import logging
from typing import Dict, Hashable, Optional

from core.domain.errors import SessionExpiredError
from core.domain.models import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory sessions keyed by chat/user id"""

    def __init__(self):
        self._sessions: Dict[Hashable, Session] = {}

    def get(self, key: Hashable) -> Optional[Session]:
        return self._sessions.get(key)

    def require(self, key: Hashable) -> Session:
        """Session for `key` or SessionExpiredError"""
        session = self._sessions.get(key)
        if session is None:
            raise SessionExpiredError("Your session has expired. Please log in again.")
        return session

    def set(self, key: Hashable, session: Session) -> Session:
        self._sessions[key] = session
        logger.debug(f"Session stored for {key} (user {session.user_id})")
        return session

    def invalidate(self, key: Hashable) -> Optional[Session]:
        """Drop the session for `key`; returns what was held"""
        session = self._sessions.pop(key, None)
        if session is not None:
            logger.debug(f"Session invalidated for {key} (user {session.user_id})")
        return session

    def __contains__(self, key: Hashable) -> bool:
        return key in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
