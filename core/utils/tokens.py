"""
Bearer token decoding.

The client only reads the payload to learn who is logged in. The signature
is never checked: the backend is trusted.
"""

import jwt

from core.domain.errors import AuthError
from core.domain.models import TokenClaims


def decode_token(token: str) -> TokenClaims:
    """
    Decode a JWT without verification and return its claims.

    Raises:
        AuthError: token is empty, malformed, or has no `id` claim.
    """
    if not token:
        raise AuthError("Token not found in response.")
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        raise AuthError(f"Invalid token format: {e}") from e

    if not isinstance(payload, dict) or payload.get("id") in (None, ""):
        raise AuthError("Invalid token format")
    return TokenClaims(id=payload["id"], name=payload.get("name"))
