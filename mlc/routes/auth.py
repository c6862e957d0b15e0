"""API routes for place login, logout and password change"""

from fastapi import APIRouter, Depends, Response

from mlc.config import Config, get_config
from mlc.middlewares.auth import (
    clear_session_cookie,
    get_place_session,
    set_session_cookie,
)
from mlc.schemas.auth import (
    LoginResponseSchema,
    LoginSchema,
    PasswordChangeSchema,
    PlaceSession,
)
from mlc.schemas.base import CSRFProtectedSchema
from mlc.services.auth import AuthService
from mlc.services.place import PlaceService

auth_router = APIRouter(prefix="/place", tags=["Auth"])


@auth_router.post("/auth", response_model=LoginResponseSchema)
def login(
    credentials: LoginSchema,
    response: Response,
    auth_service: AuthService = Depends(),
    config: Config = Depends(get_config),
):
    session, cookie = auth_service.login(credentials.place, credentials.password)
    set_session_cookie(response, config, cookie)
    return LoginResponseSchema(
        place=session.place,
        csrf_token=session.csrf,
        admin=auth_service.is_admin(session),
    )


@auth_router.post("/logout")
def logout(
    payload: CSRFProtectedSchema,
    response: Response,
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
    config: Config = Depends(get_config),
) -> dict[str, bool]:
    auth_service.require_csrf(session, payload.csrf_token)
    clear_session_cookie(response, config)
    return {"logged_out": True}


@auth_router.post("/password")
def change_password(
    payload: PasswordChangeSchema,
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
    place_service: PlaceService = Depends(),
) -> dict[str, bool]:
    auth_service.require_csrf(session, payload.csrf_token)
    place_service.change_password(
        session.place, payload.current_password, payload.new_password
    )
    return {"changed": True}
