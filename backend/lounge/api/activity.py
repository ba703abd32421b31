"""
Activity log, notification and payment log API
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import require_auth
from lounge.db.database import get_db
from lounge.schemas.activity import ActivityLogResponse, NotificationResponse, PaymentLogResponse
from lounge.schemas.common import SuccessResponse
from lounge.services import activity_service

router = APIRouter(prefix="/api", tags=["activity"])


@router.get("/activity-logs", response_model=List[ActivityLogResponse])
def get_activity_logs(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    """Latest 500 entries"""
    return activity_service.list_activity_logs(db)


@router.get("/notifications", response_model=List[NotificationResponse])
def get_notifications(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return activity_service.list_notifications(db)


@router.patch("/notifications/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(notification_id: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return activity_service.mark_read(db, notification_id)


@router.post("/notifications/mark-all-read", response_model=SuccessResponse)
def mark_all_notifications_read(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    activity_service.mark_all_read(db)
    return {"success": True}


@router.get("/payment-logs", response_model=List[PaymentLogResponse])
def get_payment_logs(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return activity_service.list_payment_logs(db)
