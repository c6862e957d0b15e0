"""Dependencies for session authentication, and the session cookie itself"""

from fastapi import Depends, Request, Response

from mlc.config import Config, get_config
from mlc.schemas.auth import PlaceSession
from mlc.services.auth import AuthService


def get_place_session(
    request: Request,
    auth_service: AuthService = Depends(),
    config: Config = Depends(get_config),
) -> PlaceSession:
    return auth_service.validate(request.cookies.get(config.session_cookie))


def get_admin_session(
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
) -> PlaceSession:
    auth_service.require_admin(session)
    return session


def set_session_cookie(response: Response, config: Config, value: str) -> None:
    response.set_cookie(
        key=config.session_cookie,
        value=value,
        path="/",
        secure=config.tls_enabled,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response, config: Config) -> None:
    response.delete_cookie(
        key=config.session_cookie,
        path="/",
        secure=config.tls_enabled,
        httponly=True,
        samesite="lax",
    )
