"""API routes for Card issue and lookup"""

from fastapi import APIRouter, Depends

from mlc.middlewares.auth import get_admin_session, get_place_session
from mlc.schemas.auth import PlaceSession
from mlc.schemas.card import (
    CardCreatedSchema,
    CardCreateSchema,
    CardInfoRequestSchema,
    CardSchema,
)
from mlc.services.auth import AuthService
from mlc.services.card import CardService

card_router = APIRouter(prefix="/place", tags=["Cards"])
admin_router = APIRouter(prefix="/admin", tags=["Admin"])


@card_router.post("/card_info", response_model=CardSchema)
def read_card(
    payload: CardInfoRequestSchema,
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
    card_service: CardService = Depends(),
):
    auth_service.require_csrf(session, payload.csrf_token)
    return card_service.get_info(payload.card)


@admin_router.post("/cards", response_model=CardCreatedSchema)
def create_card(
    card: CardCreateSchema,
    session: PlaceSession = Depends(get_admin_session),
    auth_service: AuthService = Depends(),
    card_service: CardService = Depends(),
):
    auth_service.require_csrf(session, card.csrf_token)
    return CardCreatedSchema(id=card_service.create(card).id)
