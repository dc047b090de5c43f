from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.errors import error_response
from app.api.schemas import (
    BookingRequestSchema,
    CheckoutResponseSchema,
    ErrorResponseSchema,
    PublicSlotSchema,
    SuccessResponseSchema,
)
from app.application.exceptions import BookingError
from app.application.use_cases.reservation import ReservationUseCase
from app.wiring.dependencies import get_reservation_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/calendar", response_model=list[PublicSlotSchema])
def calendar(uc: ReservationUseCase = Depends(get_reservation_use_case)):
    try:
        slots = uc.list_calendar()
    except BookingError as e:
        return error_response(e)
    return [PublicSlotSchema.from_entity(slot) for slot in slots]


@router.post(
    "/create-checkout",
    response_model=CheckoutResponseSchema,
    responses={400: {"model": ErrorResponseSchema}, 500: {"model": ErrorResponseSchema}},
)
def create_checkout(
    req: BookingRequestSchema,
    uc: ReservationUseCase = Depends(get_reservation_use_case),
):
    try:
        url = uc.request_payment_session(req.to_intent())
    except BookingError as e:
        return error_response(e)
    return CheckoutResponseSchema(url=url)


@router.post(
    "/confirm",
    response_model=SuccessResponseSchema,
    responses={400: {"model": ErrorResponseSchema}, 500: {"model": ErrorResponseSchema}},
)
def confirm(
    req: BookingRequestSchema,
    uc: ReservationUseCase = Depends(get_reservation_use_case),
):
    try:
        uc.confirm_reservation(req.to_intent())
    except BookingError as e:
        return error_response(e)
    return SuccessResponseSchema()
