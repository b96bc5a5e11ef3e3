# app/routers/auth.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from app.core.config import settings
from app.core.constants import CREDENTIAL_MISMATCH_BODY, LOGOUT_BODY
from app.core.dependencies import get_auth_service
from app.models.user import LoginRequest, RegisterRequest
from app.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/login", response_class=PlainTextResponse)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Set the session cookie and echo the token.

    A wrong password answers 200 with a mismatch message rather than 401.
    """
    token = await service.login(request)
    if token is None:
        return PlainTextResponse(CREDENTIAL_MISMATCH_BODY)

    response = PlainTextResponse(token)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True
    )
    response.headers["Access-Control-Expose-Headers"] = "Set-Cookie"
    return response


@router.post("/register")
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    await service.register(request)
    return Response(status_code=200)


@router.post("/logout", response_class=PlainTextResponse)
async def logout():
    """Clear the session cookie whether or not one was sent."""
    response = PlainTextResponse(LOGOUT_BODY)
    response.set_cookie(settings.SESSION_COOKIE_NAME, "", max_age=0)
    return response
