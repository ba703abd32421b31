"""
Data retention windows and cleanup
"""
import logging

from sqlalchemy.orm import Session

from lounge.models.activity_log import ActivityLog
from lounge.models.booking import BookingHistory
from lounge.models.expense import Expense
from lounge.models.retention_config import RetentionConfig
from lounge.schemas.venue import RetentionConfigUpdate
from lounge.utils.time_utils import now_ms

logger = logging.getLogger(__name__)

DAY_MS = 24 * 60 * 60 * 1000


def get_config(db: Session) -> RetentionConfig:
    """The single retention row, created with keep-forever windows on first use"""
    config = db.query(RetentionConfig).first()
    if not config:
        config = RetentionConfig()
        db.add(config)
        db.commit()
        db.refresh(config)
    return config


def update_config(db: Session, config_update: RetentionConfigUpdate) -> RetentionConfig:
    config = get_config(db)
    for field, value in config_update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(config, field, value)
    db.commit()
    db.refresh(config)
    return config


def cleanup(db: Session) -> dict:
    """Delete archived bookings, activity logs and expenses older than their window"""
    config = get_config(db)
    current = now_ms()

    booking_history = db.query(BookingHistory).filter(
        BookingHistory.archived_at < current - config.booking_history_days * DAY_MS
    ).delete(synchronize_session=False)
    activity_logs = db.query(ActivityLog).filter(
        ActivityLog.created_at < current - config.activity_logs_days * DAY_MS
    ).delete(synchronize_session=False)
    expenses = db.query(Expense).filter(
        Expense.date < current - config.expenses_days * DAY_MS
    ).delete(synchronize_session=False)
    db.commit()

    logger.info(
        "Retention cleanup removed %d archived bookings, %d activity logs, %d expenses",
        booking_history, activity_logs, expenses,
    )
    return {
        "booking_history_deleted": booking_history,
        "activity_logs_deleted": activity_logs,
        "expenses_deleted": expenses,
    }
