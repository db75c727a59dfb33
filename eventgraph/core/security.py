# eventgraph/core/security.py
"""
Password hashing and session tokens.

Passwords are hashed with bcrypt. Session tokens are HS256 JWTs that carry
the user id in `sub` and expire JWT_EXPIRATION_HOURS after issuance.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from pydantic import ValidationError as PydanticValidationError

from eventgraph.core.config import settings
from eventgraph.schemas.token import TokenPayload

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


# --- PASSWORDS ---
def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a candidate password against a stored bcrypt hash.

    bcrypt.checkpw does the comparison in constant time. A hash that cannot be
    parsed counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification failed: {e}")
        return False


# --- TOKENS ---
def create_access_token(user_id: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(hours=settings.JWT_EXPIRATION_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """
    Return the user id embedded in a token, or None.

    Malformed, badly signed and expired tokens all yield None; callers treat
    that as an anonymous request rather than an error.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as e:
        logger.debug(f"Rejected bearer token: {e}")
        return None

    try:
        token_data = TokenPayload(**payload)
    except PydanticValidationError:
        return None
    return token_data.sub or None
