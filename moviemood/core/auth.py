"""Authentication dependency validating session tokens issued by /welcome."""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from moviemood.core.sessions import Session, SessionRegistry, get_session_registry

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = (
    "Invalid Authorization Header! Navigate to the /welcome route to get authorized."
)


def get_current_session(
    authorization: str | None = Header(default=None),
    registry: SessionRegistry = Depends(get_session_registry),
) -> Session:
    """Resolve the raw Authorization header to a registered session."""

    session = registry.get(authorization)
    if session is None:
        logger.warning("Rejected chat request without a registered session token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
        )
    return session
