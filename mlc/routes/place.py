"""API routes for the place itself"""

from fastapi import APIRouter, Depends

from mlc.middlewares.auth import get_place_session
from mlc.schemas.auth import PlaceSession
from mlc.schemas.base import CSRFProtectedSchema
from mlc.schemas.place import CashCollectedSchema, PlaceMainSchema
from mlc.services.auth import AuthService
from mlc.services.place import PlaceService

place_router = APIRouter(prefix="/place", tags=["Place"])


@place_router.get("/main", response_model=PlaceMainSchema)
def main(
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
    place_service: PlaceService = Depends(),
):
    place = place_service.get(session.place)
    return PlaceMainSchema(
        place=place.name,
        csrf_token=session.csrf,
        cash=place.cash,
        admin=auth_service.is_admin(session),
    )


@place_router.post("/cash/clear", response_model=CashCollectedSchema)
def clear_cash(
    payload: CSRFProtectedSchema,
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
    place_service: PlaceService = Depends(),
):
    auth_service.require_csrf(session, payload.csrf_token)
    collected = place_service.clear_cash(session.place)
    return CashCollectedSchema(place=session.place, collected=collected)
