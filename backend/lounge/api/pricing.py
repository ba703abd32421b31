"""
Pricing and happy hours API
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import require_admin, require_auth
from lounge.db.database import get_db
from lounge.models.pricing import HappyHoursPricing, PricingConfig
from lounge.schemas.common import SuccessResponse
from lounge.schemas.config import (
    HappyHoursActiveResponse,
    HappyHoursReplaceRequest,
    HappyHoursResponse,
    PricingReplaceRequest,
    PricingResponse,
)
from lounge.services import pricing_service

router = APIRouter(prefix="/api", tags=["pricing"])


@router.get("/pricing-config", response_model=List[PricingResponse])
def get_pricing(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return pricing_service.list_prices(db, PricingConfig)


@router.post("/pricing-config", response_model=List[PricingResponse])
def replace_pricing(
    request: PricingReplaceRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """Replace the whole price list of one category"""
    return pricing_service.replace_prices(db, PricingConfig, request)


@router.delete("/pricing-config/{category}", response_model=SuccessResponse)
def delete_pricing(category: str, db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    pricing_service.delete_prices(db, PricingConfig, category)
    return {"success": True, "message": f"Deleted pricing config for {category}"}


@router.get("/happy-hours-pricing", response_model=List[PricingResponse])
def get_happy_hours_pricing(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return pricing_service.list_prices(db, HappyHoursPricing)


@router.post("/happy-hours-pricing", response_model=List[PricingResponse])
def replace_happy_hours_pricing(
    request: PricingReplaceRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    return pricing_service.replace_prices(db, HappyHoursPricing, request)


@router.delete("/happy-hours-pricing/{category}", response_model=SuccessResponse)
def delete_happy_hours_pricing(category: str, db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    pricing_service.delete_prices(db, HappyHoursPricing, category)
    return {"success": True, "message": f"Deleted happy hours pricing for {category}"}


@router.get("/happy-hours-config", response_model=List[HappyHoursResponse])
def get_happy_hours(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return pricing_service.list_happy_hours(db)


@router.post("/happy-hours-config", response_model=List[HappyHoursResponse])
def replace_happy_hours(
    request: HappyHoursReplaceRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """Replace the happy hours windows of one category"""
    return pricing_service.replace_happy_hours(db, request)


@router.delete("/happy-hours-config/{category}", response_model=SuccessResponse)
def delete_happy_hours(category: str, db: Session = Depends(get_db), admin: dict = Depends(require_admin)):
    pricing_service.delete_happy_hours(db, category)
    return {"success": True, "message": f"Deleted happy hours config for {category}"}


@router.get("/happy-hours-active/{category}", response_model=HappyHoursActiveResponse)
def get_happy_hours_active(category: str, db: Session = Depends(get_db)):
    """Public: whether happy hours pricing applies right now"""
    return {"active": pricing_service.is_happy_hour_active(db, category), "category": category}
