"""API routes for recording purchases"""

from fastapi import APIRouter, Depends

from mlc.middlewares.auth import get_place_session
from mlc.models.operation import Operation
from mlc.schemas.auth import PlaceSession
from mlc.schemas.operation import (
    OperationCreateSchema,
    OperationSchema,
    ReceiptSchema,
)
from mlc.services.auth import AuthService
from mlc.services.card import CardService
from mlc.services.ledger import LedgerService

operation_router = APIRouter(prefix="/place", tags=["Operations"])


def build_receipt(operation: Operation, holder: str) -> ReceiptSchema:
    total = operation.amount - operation.discount
    return ReceiptSchema(
        operation=OperationSchema.model_validate(operation),
        holder=holder,
        card=operation.card_id,
        amount=operation.amount,
        discount_percent=operation.discount * 100 // operation.amount,
        discount=operation.discount,
        total=total,
        change=operation.cash - total,
    )


@operation_router.post("/op", response_model=ReceiptSchema)
def record_operation(
    payload: OperationCreateSchema,
    session: PlaceSession = Depends(get_place_session),
    auth_service: AuthService = Depends(),
    ledger_service: LedgerService = Depends(),
    card_service: CardService = Depends(),
):
    auth_service.require_csrf(session, payload.csrf_token)
    operation = ledger_service.record_operation(
        place_name=session.place,
        card_id=payload.card,
        amount=payload.amount,
        cash=payload.cash,
    )
    holder = card_service.get(payload.card).name
    return build_receipt(operation, holder)
