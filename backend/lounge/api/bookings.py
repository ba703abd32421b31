"""
Booking API
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from lounge.api.deps import require_auth
from lounge.db.database import get_db
from lounge.schemas.booking import (
    AvailableSeats,
    BookingCreate,
    BookingHistoryResponse,
    BookingResponse,
    BookingUpdate,
    BulkPaymentResponse,
    BulkUpdateResponse,
    ChangeSeatRequest,
    PaymentMethodRequest,
    PaymentStatusRequest,
    SplitPaymentRequest,
)
from lounge.schemas.common import SuccessResponse
from lounge.services import booking_service

router = APIRouter(prefix="/api/bookings", tags=["bookings"])
history_router = APIRouter(prefix="/api/booking-history", tags=["bookings"])


@router.get("", response_model=List[BookingResponse])
def get_bookings(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    """All live bookings, newest first"""
    return booking_service.list_bookings(db)


@router.get("/active", response_model=List[BookingResponse])
def get_active_bookings(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return booking_service.list_active_bookings(db)


@router.get("/available-seats", response_model=List[AvailableSeats])
def get_available_seats(
    date: Optional[str] = None,
    time_slot: Optional[str] = Query(None, alias="timeSlot"),
    duration_minutes: Optional[str] = Query(None, alias="durationMinutes"),
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """Free seat numbers per category for a date, HH:MM-HH:MM slot and duration"""
    return booking_service.available_seats(db, date, time_slot, duration_minutes)


@router.post("/archive", response_model=BulkUpdateResponse)
def archive_bookings(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    """Move completed and expired bookings to history"""
    count = booking_service.archive_finished(db)
    return {"success": True, "count": count}


@router.post("/payment-method", response_model=BulkUpdateResponse)
def set_payment_method(
    request: PaymentMethodRequest,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    count = booking_service.set_payment_method(db, request.booking_ids, request.payment_method)
    return {"success": True, "count": count}


@router.post("/payment-status", response_model=BulkPaymentResponse)
def set_payment_status(
    request: PaymentStatusRequest,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    bookings = booking_service.set_payment_status(
        db, request.booking_ids, request.payment_status, request.payment_method, actor=user
    )
    return {"success": True, "count": len(bookings), "bookings": bookings}


@router.post("/split-payment", response_model=BulkPaymentResponse)
def split_payment(
    request: SplitPaymentRequest,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """Mark bookings paid with a cash/UPI split"""
    bookings = booking_service.split_payment(
        db, request.booking_ids, request.cash_amount, request.upi_amount, actor=user
    )
    return {"success": True, "count": len(bookings), "bookings": bookings}


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return booking_service.get_booking(db, booking_id)


@router.post("", response_model=BookingResponse, status_code=201)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """Create a booking; a booking code is generated when none is given"""
    return booking_service.create_booking(db, booking, actor=user)


@router.patch("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: str,
    booking_update: BookingUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    return booking_service.update_booking(db, booking_id, booking_update, actor=user)


@router.patch("/{booking_id}/change-seat", response_model=BookingResponse)
def change_seat(
    booking_id: str,
    request: ChangeSeatRequest,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    return booking_service.change_seat(db, booking_id, request.new_seat_name, actor=user)


@router.delete("/{booking_id}", response_model=SuccessResponse)
def delete_booking(booking_id: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    booking_service.delete_booking(db, booking_id, actor=user)
    return {"success": True}


@history_router.get("", response_model=List[BookingHistoryResponse])
def get_booking_history(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    """Archived bookings, most recently archived first"""
    return booking_service.list_history(db)
