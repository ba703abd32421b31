"""
Reports and usage analytics over live and archived bookings
"""
import logging
from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from lounge.models.booking import (
    FINISHED_STATUSES,
    OCCUPYING_STATUSES,
    Booking,
    BookingHistory,
)
from lounge.models.device_config import DeviceConfig
from lounge.utils.time_utils import (
    end_of_day,
    last_sunday,
    local_from_ms,
    months_ago,
    resolve_period,
    start_of_day,
    to_ms,
)

logger = logging.getLogger(__name__)

REALTIME_POINTS = 10
REALTIME_STEP_SECONDS = 5


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _price(value: Optional[str]) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _customer_key(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def food_total(bookings: Iterable) -> float:
    """Sum of price x quantity over every food order line"""
    total = 0.0
    for booking in bookings:
        for order in booking.food_orders or []:
            total += _price(order.get("price")) * _price(order.get("quantity", 1))
    return total


def average_minutes(bookings: Sequence) -> int:
    if not bookings:
        return 0
    minutes = sum((b.end_time - b.start_time) / 60000 for b in bookings)
    return round_half_up(minutes / len(bookings))


def _bookings_between(db: Session, model, start_ms: int, end_ms: int) -> List:
    return db.query(model).filter(model.start_time >= start_ms, model.start_time <= end_ms).all()


def stats(db: Session, period: str = "daily", start: Optional[date] = None, end: Optional[date] = None) -> dict:
    """Totals for bookings (live and archived) whose start falls in the window"""
    range_start, range_end = resolve_period(period, start, end)
    start_ms, end_ms = to_ms(range_start), to_ms(range_end)

    bookings = _bookings_between(db, Booking, start_ms, end_ms) + _bookings_between(db, BookingHistory, start_ms, end_ms)
    finished = [b for b in bookings if b.status in FINISHED_STATUSES]

    return {
        "total_bookings": len(bookings),
        "total_revenue": f"{sum(_price(b.price) for b in finished):.2f}",
        "unique_customers": len({_customer_key(b.customer_name) for b in bookings}),
        "avg_session_duration": average_minutes(finished),
        "food_revenue": f"{food_total(bookings):.2f}",
        "completed_bookings": len(finished),
        "period": period,
        "start_date": range_start.astimezone(timezone.utc),
        "end_date": range_end.astimezone(timezone.utc),
    }


def history(db: Session, period: str = "daily", start: Optional[date] = None, end: Optional[date] = None) -> List[BookingHistory]:
    range_start, range_end = resolve_period(period, start, end)
    return db.query(BookingHistory).filter(
        BookingHistory.start_time >= to_ms(range_start),
        BookingHistory.start_time <= to_ms(range_end),
    ).order_by(BookingHistory.archived_at.desc()).all()


def retention_metrics(db: Session, months: int = 6, now: Optional[datetime] = None) -> dict:
    """Customers with more than one archived visit in the trailing months"""
    now = now or datetime.now()
    # windows reaching past 1970 start at the epoch
    months_since_epoch = (now.year - 1970) * 12 + now.month - 1
    start = months_ago(now, months) if months <= months_since_epoch else datetime.fromtimestamp(0)
    archived = _bookings_between(db, BookingHistory, to_ms(start), to_ms(now))

    visits = {}
    for booking in archived:
        key = _customer_key(booking.customer_name)
        visits[key] = visits.get(key, 0) + 1

    total = len(visits)
    returning = len([count for count in visits.values() if count > 1])
    rate = returning / total * 100 if total else 0
    return {
        "total_customers": total,
        "returning_customers": returning,
        "retention_rate": round(rate, 2),
        "period": f"{months} months",
    }


def _usage_window(time_range: str, now: datetime):
    today = now.date()
    if time_range == "week":
        return start_of_day(last_sunday(today)), now
    if time_range == "month":
        return start_of_day(today.replace(day=1)), now
    if time_range == "all":
        return datetime.fromtimestamp(0), now
    return start_of_day(today), end_of_day(today)


def usage_analytics(db: Session, time_range: str = "today", now: Optional[datetime] = None) -> dict:
    """Live occupancy plus booking activity within the selected range"""
    now = now or datetime.now()
    range_start, range_end = _usage_window(time_range, now)
    start_ms, end_ms = to_ms(range_start), to_ms(range_end)

    configs = db.query(DeviceConfig).all()
    occupying = db.query(Booking).filter(Booking.status.in_(OCCUPYING_STATUSES)).all()

    current_occupancy = len(occupying)
    total_capacity = sum(config.count or 0 for config in configs)
    occupancy_rate = current_occupancy / total_capacity * 100 if total_capacity else 0

    category_usage = []
    for config in configs:
        occupied = len([b for b in occupying if b.category == config.category])
        percentage = round_half_up(occupied / config.count * 100) if config.count else 0
        category_usage.append({
            "category": config.category,
            "occupied": occupied,
            "total": config.count,
            "percentage": percentage,
        })

    bookings = _bookings_between(db, Booking, start_ms, end_ms) + _bookings_between(db, BookingHistory, start_ms, end_ms)

    hourly_usage = []
    for hour in range(24):
        in_hour = [b for b in bookings if local_from_ms(b.start_time).hour == hour]
        if in_hour or hour <= now.hour:
            hourly_usage.append({
                "hour": f"{hour:02d}:00",
                "bookings": len(in_hour),
                "revenue": sum(_price(b.price) for b in in_hour),
            })

    # cosmetic series, every point repeats the current occupancy
    realtime_data = [
        {
            "timestamp": (now - timedelta(seconds=(REALTIME_POINTS - 1 - i) * REALTIME_STEP_SECONDS)).strftime("%I:%M:%S %p"),
            "occupancy": current_occupancy,
            "capacity": total_capacity,
        }
        for i in range(REALTIME_POINTS)
    ]

    finished = [b for b in bookings if b.status in FINISHED_STATUSES]
    return {
        "current_occupancy": current_occupancy,
        "total_capacity": total_capacity,
        "occupancy_rate": occupancy_rate,
        "active_bookings": current_occupancy,
        "category_usage": category_usage,
        "hourly_usage": hourly_usage,
        "realtime_data": realtime_data,
        "unique_customers": len({_customer_key(b.customer_name) for b in bookings}),
        "avg_session_duration": average_minutes(finished),
        "total_food_orders": sum(len(b.food_orders or []) for b in bookings),
        "food_revenue": food_total(bookings),
    }


def public_status(db: Session) -> List[dict]:
    """Seat board built from running and paused bookings"""
    occupied_by_category = {}
    for category, seat_name in db.query(Booking.category, Booking.seat_name).filter(
        Booking.status.in_(OCCUPYING_STATUSES)
    ).all():
        occupied_by_category.setdefault(category, []).append(seat_name)

    board = []
    for config in db.query(DeviceConfig).order_by(DeviceConfig.category).all():
        occupied = occupied_by_category.get(config.category, [])
        board.append({
            "category": config.category,
            "total": config.count,
            "available": config.count - len(occupied),
            "occupied": len(occupied),
            "seats": [
                {"name": name, "status": "occupied" if name in occupied else "available"}
                for name in config.seats or []
            ],
        })
    return board
