"""Access control enforced before routing and body parsing.

Order per request: authenticate (401), feature gate (404), role check (403).
"""
import logging

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.exceptions.custom import FeatureDisabledError
from app.exceptions.handlers import feature_disabled_error_handler
from app.security import (
    authenticate,
    basic_auth,
    is_allowed,
    resolve_access_rule,
    resolve_feature_gate,
)

logger = logging.getLogger(__name__)


def _unauthorized() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Authentication required"},
        headers={"WWW-Authenticate": "Basic"},
    )


class AccessControlMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rule = resolve_access_rule(request.method, request.url.path)
        if rule.public:
            return await call_next(request)

        try:
            credentials = await basic_auth(request)
        except HTTPException:
            # Malformed Basic header
            return _unauthorized()
        if credentials is None:
            return _unauthorized()

        principal = authenticate(request.app.state.accounts, credentials)
        if principal is None:
            logger.warning("Rejected credentials for user %r", credentials.username)
            return _unauthorized()

        feature = resolve_feature_gate(request.url.path)
        if feature and not request.app.state.feature_flags.is_enabled(feature):
            return await feature_disabled_error_handler(request, FeatureDisabledError(feature))

        if not is_allowed(rule, principal):
            logger.warning(
                "Forbidden: user=%s roles=%s %s %s",
                principal.username, sorted(principal.roles),
                request.method, request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN, content={"detail": "Forbidden"},
            )

        return await call_next(request)
