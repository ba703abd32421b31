"""
Reports and analytics API
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from lounge.api.deps import require_auth
from lounge.core.exceptions import BadRequest
from lounge.db.database import get_db
from lounge.schemas.booking import BookingHistoryResponse
from lounge.schemas.statistics import RetentionMetrics, StatsResponse, UsageAnalytics
from lounge.services import report_service

router = APIRouter(prefix="/api/reports", tags=["reports"])
analytics_router = APIRouter(prefix="/api/analytics", tags=["reports"])

DEFAULT_RETENTION_MONTHS = 6


def parse_date(value: Optional[str], name: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        raise BadRequest(f"Invalid {name}")


def _custom_range(start_date: Optional[str], end_date: Optional[str]):
    start, end = parse_date(start_date, "startDate"), parse_date(end_date, "endDate")
    if start and end:
        return start, end
    return None, None


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    period: str = "daily",
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """
    Booking totals for daily/weekly/monthly or a startDate..endDate range

    Revenue only counts completed and expired bookings; food revenue counts
    every booking in the window.
    """
    start, end = _custom_range(start_date, end_date)
    return report_service.stats(db, period, start, end)


@router.get("/history", response_model=List[BookingHistoryResponse])
def get_history(
    period: str = "daily",
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    start, end = _custom_range(start_date, end_date)
    return report_service.history(db, period, start, end)


@router.get("/retention-metrics", response_model=RetentionMetrics)
def get_retention_metrics(
    months: Optional[str] = None,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """Returning customers over the trailing N months (default 6)"""
    try:
        months_value = int(months) if months else DEFAULT_RETENTION_MONTHS
    except ValueError:
        months_value = DEFAULT_RETENTION_MONTHS
    if months_value <= 0:
        months_value = DEFAULT_RETENTION_MONTHS
    return report_service.retention_metrics(db, months_value)


@analytics_router.get("/usage", response_model=UsageAnalytics)
def get_usage(
    time_range: str = Query("today", alias="timeRange"),
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """Occupancy dashboard for today, week, month or all"""
    return report_service.usage_analytics(db, time_range)
