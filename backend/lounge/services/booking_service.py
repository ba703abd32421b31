"""
Bookings, seat availability, archiving and payments
"""
import logging
import math
import random
import re
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from lounge.core.exceptions import BadRequest, Conflict, NotFound
from lounge.models.booking import (
    ACTIVE_STATUSES,
    BOOKING_FIELDS,
    FINISHED_STATUSES,
    Booking,
    BookingHistory,
)
from lounge.models.device_config import DeviceConfig
from lounge.schemas.booking import BookingCreate, BookingUpdate
from lounge.services.activity_service import log_activity, log_payment
from lounge.utils.time_utils import now_ms, to_ms

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("cash", "upi_online")
PAYMENT_STATUSES = ("unpaid", "pending", "paid")
SPLIT_METHOD = "split"

_TRAILING_DIGITS = re.compile(r"(\d+)$")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def seat_number_from_name(seat_name: str) -> int:
    """Trailing digits of a seat name, 0 when there are none ("PS5-12" -> 12)"""
    match = _TRAILING_DIGITS.search(seat_name or "")
    return int(match.group(1)) if match else 0


def config_seat_numbers(config: DeviceConfig) -> List[int]:
    """Seat numbers of a category; falls back to 1..count when no names are configured"""
    if config.seats:
        return [n for n in (seat_number_from_name(name) for name in config.seats) if n > 0]
    return list(range(1, (config.count or 0) + 1))


def _base36(value: int) -> str:
    digits = ""
    while value:
        value, remainder = divmod(value, 36)
        digits = _BASE36[remainder] + digits
    return digits or "0"


def generate_booking_code(timestamp_ms: Optional[int] = None) -> str:
    """BK- + last 5 base36 digits of the clock + 4 random hex digits"""
    stamp = _base36(timestamp_ms if timestamp_ms is not None else now_ms()).upper()[-5:]
    return f"BK-{stamp}{random.randrange(0xFFFF):04X}"


def _parse_request_window(date_value: Optional[str], time_slot: Optional[str], duration_minutes: Optional[str]):
    if not date_value or not time_slot or not duration_minutes:
        raise BadRequest("Missing required parameters: date, timeSlot, durationMinutes")

    try:
        day = date.fromisoformat(date_value[:10])
        hour, minute = (int(part) for part in time_slot.split("-")[0].strip().split(":")[:2])
        start = datetime.combine(day, time(hour, minute))
        minutes = int(duration_minutes)
        end = start + timedelta(minutes=minutes)
    except (ValueError, OverflowError):
        raise BadRequest("Invalid date, timeSlot or durationMinutes")
    if minutes <= 0:
        raise BadRequest("durationMinutes must be positive")

    return start, end


def available_seats(
    db: Session,
    date_value: Optional[str],
    time_slot: Optional[str],
    duration_minutes: Optional[str],
) -> List[dict]:
    """
    Free seat numbers per category for the requested slot.

    A seat is taken when an active booking in the same category overlaps
    [start, start + duration).
    """
    start, end = _parse_request_window(date_value, time_slot, duration_minutes)
    start_ms, end_ms = to_ms(start), to_ms(end)

    overlapping = db.query(Booking.category, Booking.seat_number).filter(
        Booking.status.in_(ACTIVE_STATUSES),
        Booking.start_time < end_ms,
        Booking.end_time > start_ms,
    ).all()
    occupied: Dict[str, set] = {}
    for category, seat_number in overlapping:
        occupied.setdefault(category, set()).add(seat_number)

    result = []
    for config in db.query(DeviceConfig).all():
        taken = occupied.get(config.category, set())
        seats = sorted(n for n in config_seat_numbers(config) if n not in taken)
        result.append({"category": config.category, "seats": seats})
    return result


def list_bookings(db: Session) -> List[Booking]:
    return db.query(Booking).order_by(Booking.created_at.desc()).all()


def list_active_bookings(db: Session) -> List[Booking]:
    return db.query(Booking).filter(
        Booking.status.in_(ACTIVE_STATUSES)
    ).order_by(Booking.created_at.desc()).all()


def get_booking(db: Session, booking_id: str) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise NotFound("Booking not found")
    return booking


def create_booking(db: Session, payload: BookingCreate, actor: Optional[dict] = None) -> Booking:
    """Insert a booking as given; overlap is not checked here"""
    data = payload.model_dump()
    data["start_time"] = to_ms(payload.start_time)
    data["end_time"] = to_ms(payload.end_time)
    data["booking_code"] = payload.booking_code or generate_booking_code()

    if db.query(Booking.id).filter(Booking.booking_code == data["booking_code"]).first():
        raise Conflict("Booking code already exists")

    booking = Booking(**data)
    db.add(booking)
    db.commit()
    db.refresh(booking)

    log_activity(db, actor, "create", "booking", booking.id,
                 f"Created booking for {booking.customer_name} at {booking.seat_name}")
    return booking


def update_booking(db: Session, booking_id: str, patch: BookingUpdate, actor: Optional[dict] = None) -> Booking:
    """Write only the fields present in the request body"""
    booking = get_booking(db, booking_id)

    update_data = patch.model_dump(exclude_unset=True)
    columns = Booking.__table__.columns
    for field, value in update_data.items():
        if value is None and not columns[field].nullable:
            raise BadRequest(f"{to_camel(field)} cannot be null")

    if update_data.get("start_time") is not None:
        update_data["start_time"] = to_ms(patch.start_time)
    if update_data.get("end_time") is not None:
        update_data["end_time"] = to_ms(patch.end_time)
    if update_data.get("booking_code") and update_data["booking_code"] != booking.booking_code:
        taken = db.query(Booking.id).filter(Booking.booking_code == update_data["booking_code"]).first()
        if taken:
            raise Conflict("Booking code already exists")

    for field, value in update_data.items():
        setattr(booking, field, value)
    db.commit()
    db.refresh(booking)

    if update_data:
        changed = ", ".join(to_camel(field) for field in update_data)
        log_activity(db, actor, "update", "booking", booking.id,
                     f"Updated booking for {booking.customer_name} ({changed})")
    return booking


def change_seat(db: Session, booking_id: str, new_seat_name: Optional[str], actor: Optional[dict] = None) -> Booking:
    if not new_seat_name:
        raise BadRequest("New seat name is required")
    booking = get_booking(db, booking_id)

    old_seat_name = booking.seat_name
    booking.seat_name = new_seat_name
    booking.seat_number = seat_number_from_name(new_seat_name)
    db.commit()
    db.refresh(booking)

    log_activity(db, actor, "update", "booking", booking.id,
                 f"Changed seat from {old_seat_name} to {new_seat_name}")
    return booking


def delete_booking(db: Session, booking_id: str, actor: Optional[dict] = None) -> None:
    booking = get_booking(db, booking_id)
    details = f"Deleted booking for {booking.customer_name} at {booking.seat_name}"

    db.delete(booking)
    db.commit()
    log_activity(db, actor, "delete", "booking", booking_id, details)


def archive_finished(db: Session) -> int:
    """
    Move completed and expired bookings into booking history.

    Each booking is copied and deleted in its own commit, so a failure part
    way leaves the earlier moves in place.
    """
    finished = db.query(Booking).filter(Booking.status.in_(FINISHED_STATUSES)).all()
    count = 0
    for booking in finished:
        entry = BookingHistory(
            booking_id=booking.id,
            archived_at=now_ms(),
            **{field: getattr(booking, field) for field in BOOKING_FIELDS}
        )
        db.add(entry)
        db.delete(booking)
        db.commit()
        count += 1

    if count:
        logger.info("Archived %d finished bookings", count)
    return count


def list_history(db: Session) -> List[BookingHistory]:
    return db.query(BookingHistory).order_by(BookingHistory.archived_at.desc()).all()


def _require_ids(booking_ids: List[str]) -> None:
    if not booking_ids:
        raise BadRequest("Booking IDs are required")


def set_payment_method(db: Session, booking_ids: List[str], payment_method: Optional[str]) -> int:
    _require_ids(booking_ids)
    if payment_method not in PAYMENT_METHODS:
        raise BadRequest("Valid payment method is required (cash or upi_online)")

    for booking_id in booking_ids:
        db.query(Booking).filter(Booking.id == booking_id).update(
            {Booking.payment_method: payment_method}, synchronize_session=False
        )
        db.commit()
    return len(booking_ids)


def set_payment_status(
    db: Session,
    booking_ids: List[str],
    payment_status: Optional[str],
    payment_method: Optional[str] = None,
    actor: Optional[dict] = None,
) -> List[Booking]:
    """Update status (and optionally method) per booking; returns the bookings that exist"""
    _require_ids(booking_ids)
    if payment_status not in PAYMENT_STATUSES:
        raise BadRequest("Valid payment status is required")
    if payment_method and payment_method not in PAYMENT_METHODS + (SPLIT_METHOD,):
        raise BadRequest("Valid payment method is required (cash, upi_online or split)")

    updated = []
    for booking_id in booking_ids:
        booking = db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            continue
        previous_status, previous_method = booking.payment_status, booking.payment_method
        booking.payment_status = payment_status
        if payment_method:
            booking.payment_method = payment_method
        log_payment(db, actor, booking, previous_status, previous_method)
        db.commit()
        db.refresh(booking)
        updated.append(booking)
    return updated


def parse_amount(value: Any) -> float:
    """Lenient float parsing; anything unusable counts as zero"""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def split_payment(
    db: Session,
    booking_ids: List[str],
    cash_amount: Any,
    upi_amount: Any,
    actor: Optional[dict] = None,
) -> List[Booking]:
    _require_ids(booking_ids)
    cash, upi = parse_amount(cash_amount), parse_amount(upi_amount)
    if cash == 0 and upi == 0:
        raise BadRequest("At least one payment amount must be greater than zero")

    updated = []
    for booking_id in booking_ids:
        booking = db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            continue
        previous_status, previous_method = booking.payment_status, booking.payment_method
        booking.payment_method = SPLIT_METHOD
        booking.cash_amount = f"{cash:.2f}"
        booking.upi_amount = f"{upi:.2f}"
        booking.payment_status = "paid"
        log_payment(db, actor, booking, previous_status, previous_method)
        db.commit()
        db.refresh(booking)
        updated.append(booking)
    return updated
