"""
Shared request dependencies.

Authentication is handled by the gateway in front of this service; it
forwards the signed-in user as ``X-Auth-User-*`` headers. Anything reaching a
protected route without them is rejected.
"""

import math
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from config import Settings, get_settings
from models.bookings import AuthenticatedUser
from services.rate_limiter import get_booking_limiter


async def get_current_user(
    user_id: Optional[str] = Header(None, alias="X-Auth-User-Id"),
    user_name: Optional[str] = Header(None, alias="X-Auth-User-Name"),
    user_email: Optional[str] = Header(None, alias="X-Auth-User-Email"),
) -> AuthenticatedUser:
    if not user_id or not user_email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthenticated.",
        )

    return AuthenticatedUser(id=user_id, name=user_name or "", email=user_email)


async def booking_rate_limit(
    user: AuthenticatedUser = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    limiter = get_booking_limiter(settings.booking_rate_limit, settings.booking_rate_window)
    retry_after = limiter.hit(str(user.id))

    if retry_after is not None:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too Many Attempts.",
            headers={"Retry-After": str(max(1, math.ceil(retry_after)))},
        )

    return user
