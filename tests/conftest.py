import os

# The bot loader validates the token format at import time
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "42:TEST")

import pytest

from core.services.session_service import SessionStore
from tests.fakes import make_token


@pytest.fixture
def sessions():
    return SessionStore()


@pytest.fixture
def token():
    return make_token()
