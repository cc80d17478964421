"""Bearer tokens identifying a patient or doctor.

Tokens are minted by the credential service; this module only needs to
agree with it on the claim layout: ``sub`` is the user email and ``role``
the role the user held when the token was issued.
"""
from datetime import datetime, timedelta, timezone

import jwt

from hospital_booking.core import config

REQUIRED_CLAIMS = ["sub", "role", "exp"]


def create_access_token(email: str, role: str, expires_minutes: int | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    lifetime = timedelta(minutes=expires_minutes or config.JWT_EXPIRES_MINUTES)
    payload = {"sub": email, "role": role, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
