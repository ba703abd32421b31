"""
Device configuration API
"""
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from lounge.api.deps import require_admin, require_auth
from lounge.db.database import get_db
from lounge.schemas.common import SuccessResponse
from lounge.schemas.config import DeviceConfigCreate, DeviceConfigResponse
from lounge.services import pricing_service

router = APIRouter(prefix="/api/device-config", tags=["configuration"])


@router.get("", response_model=List[DeviceConfigResponse])
def get_device_configs(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return pricing_service.list_device_configs(db)


@router.get("/{category}", response_model=DeviceConfigResponse)
def get_device_config(category: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return pricing_service.get_device_config(db, category)


@router.post("", response_model=DeviceConfigResponse, status_code=201)
def save_device_config(
    config: DeviceConfigCreate,
    response: Response,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """Create a category (201) or replace its seat list (200)"""
    db_config, created = pricing_service.upsert_device_config(db, config)
    if not created:
        response.status_code = 200
    return db_config


@router.delete("/{category}", response_model=SuccessResponse)
def delete_device_config(category: str, db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    pricing_service.delete_device_config(db, category)
    return {"success": True, "message": f"Deleted device config for {category}"}
