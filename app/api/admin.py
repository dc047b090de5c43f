from __future__ import annotations

from fastapi import APIRouter, Depends, Header

from app.api.errors import error_response
from app.api.schemas import ErrorResponseSchema, SlotKeySchema, SlotSchema, SuccessResponseSchema
from app.application.exceptions import BookingError
from app.application.use_cases.admin_slots import AdminSlotsUseCase
from app.wiring.dependencies import get_admin_use_case


router = APIRouter(prefix="/admin", responses={401: {"model": ErrorResponseSchema}})


@router.get("/reservations", response_model=list[SlotSchema])
def reservations(
    authorization: str | None = Header(default=None),
    uc: AdminSlotsUseCase = Depends(get_admin_use_case),
):
    try:
        slots = uc.list_reservations(authorization)
    except BookingError as e:
        return error_response(e)
    return [SlotSchema.from_entity(slot) for slot in slots]


@router.post("/add-slot", response_model=SuccessResponseSchema)
def add_slot(
    req: SlotKeySchema,
    authorization: str | None = Header(default=None),
    uc: AdminSlotsUseCase = Depends(get_admin_use_case),
):
    try:
        uc.add_slot(authorization, req.date, req.time)
    except BookingError as e:
        return error_response(e)
    return SuccessResponseSchema()


@router.post("/delete-slot", response_model=SuccessResponseSchema)
def delete_slot(
    req: SlotKeySchema,
    authorization: str | None = Header(default=None),
    uc: AdminSlotsUseCase = Depends(get_admin_use_case),
):
    try:
        uc.delete_slot(authorization, req.date, req.time)
    except BookingError as e:
        return error_response(e)
    return SuccessResponseSchema()
