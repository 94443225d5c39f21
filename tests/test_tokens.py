import jwt
import pytest

from core.domain.errors import AuthError
from core.utils.tokens import decode_token
from tests.fakes import make_token


def test_decode_reads_id_and_name_without_verifying():
    claims = decode_token(make_token(user_id=12, name="Sam"))

    assert claims.id == 12
    assert claims.name == "Sam"


@pytest.mark.parametrize("token", ["", None])
def test_missing_token(token):
    with pytest.raises(AuthError, match="Token not found"):
        decode_token(token)


def test_malformed_token():
    with pytest.raises(AuthError):
        decode_token("not-a-jwt")


def test_token_without_id():
    token = jwt.encode({"name": "Nobody"}, "k", algorithm="HS256")
    with pytest.raises(AuthError):
        decode_token(token)
