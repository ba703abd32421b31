"""
Activity log, notifications and payment log
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from lounge.core.exceptions import NotFound
from lounge.models.activity_log import ActivityLog
from lounge.models.booking import Booking
from lounge.models.notification import Notification
from lounge.models.payment_log import PaymentLog

logger = logging.getLogger(__name__)

ACTIVITY_LOG_LIMIT = 500
NOTIFICATION_LIMIT = 100
PAYMENT_LOG_LIMIT = 500


def log_activity(
    db: Session,
    actor: Optional[dict],
    action: str,
    entity_type: str,
    entity_id: str,
    details: str,
) -> Optional[ActivityLog]:
    """Append an audit entry for the session user; anonymous actions are not logged"""
    if not actor or not actor.get("userId"):
        return None

    entry = ActivityLog(
        user_id=actor["userId"],
        username=actor.get("username") or "unknown",
        user_role=actor.get("role") or "staff",
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details,
    )
    db.add(entry)
    db.commit()

    # admins are told about deletions made by staff
    if action == "delete" and entry.user_role != "admin":
        db.add(Notification(
            type=f"{entity_type}_deleted",
            title=f"{entity_type.capitalize()} deleted",
            message=f"{entry.username}: {details}",
            entity_type=entity_type,
            entity_id=entity_id,
            activity_log_id=entry.id,
        ))
        db.commit()
    return entry


def log_payment(
    db: Session,
    actor: Optional[dict],
    booking: Booking,
    previous_status: Optional[str],
    previous_method: Optional[str],
) -> PaymentLog:
    """Record a payment change; the caller commits"""
    actor = actor or {}
    entry = PaymentLog(
        booking_id=booking.id,
        seat_name=booking.seat_name,
        customer_name=booking.customer_name,
        amount=booking.price,
        payment_method=booking.payment_method,
        payment_status=booking.payment_status,
        user_id=actor.get("userId") or "unknown",
        username=actor.get("username") or "unknown",
        previous_status=previous_status,
        previous_method=previous_method,
    )
    db.add(entry)
    return entry


def list_activity_logs(db: Session) -> List[ActivityLog]:
    return db.query(ActivityLog).order_by(ActivityLog.created_at.desc()).limit(ACTIVITY_LOG_LIMIT).all()


def list_notifications(db: Session) -> List[Notification]:
    return db.query(Notification).order_by(Notification.created_at.desc()).limit(NOTIFICATION_LIMIT).all()


def mark_read(db: Session, notification_id: str) -> Notification:
    notification = db.query(Notification).filter(Notification.id == notification_id).first()
    if not notification:
        raise NotFound("Notification not found")
    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return notification


def mark_all_read(db: Session) -> int:
    count = db.query(Notification).filter(Notification.is_read.is_(False)).update(
        {Notification.is_read: True}, synchronize_session=False
    )
    db.commit()
    return count


def list_payment_logs(db: Session) -> List[PaymentLog]:
    return db.query(PaymentLog).order_by(PaymentLog.created_at.desc()).limit(PAYMENT_LOG_LIMIT).all()
