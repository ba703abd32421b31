"""
Health, public seat board, maintenance and traffic API
"""
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import require_auth
from lounge.db.database import get_db
from lounge.models.device_maintenance import DeviceMaintenance
from lounge.schemas.statistics import (
    DeviceMaintenanceResponse,
    MaintenancePredictions,
    PublicCategoryStatus,
    TrafficPredictions,
)
from lounge.services import prediction_service, report_service

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health():
    """Health check"""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/server-time")
def server_time():
    return {"serverTime": datetime.now(timezone.utc).isoformat()}


@router.get("/public/status", response_model=List[PublicCategoryStatus])
def get_public_status(db: Session = Depends(get_db)):
    """Seat availability board, no login needed"""
    return report_service.public_status(db)


@router.get("/device-maintenance", response_model=List[DeviceMaintenanceResponse])
def get_device_maintenance(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return db.query(DeviceMaintenance).order_by(DeviceMaintenance.updated_at.desc()).all()


@router.get("/ai/maintenance/predictions", response_model=MaintenancePredictions)
def get_maintenance_predictions(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return prediction_service.maintenance_predictions(db)


@router.get("/ai/traffic/predictions", response_model=TrafficPredictions)
def get_traffic_predictions(user: dict = Depends(require_auth)):
    return prediction_service.traffic_predictions()
