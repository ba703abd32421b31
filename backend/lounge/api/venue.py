"""
Gaming center info and data retention API
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import require_admin
from lounge.db.database import get_db
from lounge.models.gaming_center_info import GamingCenterInfo
from lounge.schemas.venue import (
    GamingCenterInfoResponse,
    GamingCenterInfoUpdate,
    RetentionCleanupResponse,
    RetentionConfigResponse,
    RetentionConfigUpdate,
)
from lounge.services import retention_service
from lounge.utils.time_utils import now_ms

router = APIRouter(prefix="/api", tags=["venue"])

DEFAULT_TIMEZONE = "Asia/Kolkata"


@router.get("/gaming-center-info", response_model=Optional[GamingCenterInfoResponse])
def get_gaming_center_info(db: Session = Depends(get_db)):
    """Public venue details, null until configured"""
    return db.query(GamingCenterInfo).first()


@router.post("/gaming-center-info", response_model=GamingCenterInfoResponse)
def save_gaming_center_info(
    info: GamingCenterInfoUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    data = info.model_dump()
    data["timezone"] = data.get("timezone") or DEFAULT_TIMEZONE

    db_info = db.query(GamingCenterInfo).first()
    if db_info:
        for field, value in data.items():
            setattr(db_info, field, value)
        db_info.updated_at = now_ms()
    else:
        db_info = GamingCenterInfo(**data)
        db.add(db_info)
    db.commit()
    db.refresh(db_info)
    return db_info


@router.get("/retention/config", response_model=RetentionConfigResponse)
def get_retention_config(db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    return retention_service.get_config(db)


@router.put("/retention/config", response_model=RetentionConfigResponse)
def update_retention_config(
    config_update: RetentionConfigUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    return retention_service.update_config(db, config_update)


@router.post("/retention/cleanup", response_model=RetentionCleanupResponse)
def run_retention_cleanup(db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    """Delete data older than the configured windows"""
    return {"success": True, **retention_service.cleanup(db)}
