"""
Device configuration, price lists and happy hours
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple, Type, Union

from sqlalchemy.orm import Session

from lounge.core.exceptions import NotFound
from lounge.models.device_config import DeviceConfig
from lounge.models.pricing import HappyHoursConfig, HappyHoursPricing, PricingConfig
from lounge.schemas.config import (
    DeviceConfigCreate,
    HappyHoursReplaceRequest,
    PricingReplaceRequest,
)
from lounge.utils.time_utils import hhmm

logger = logging.getLogger(__name__)

PriceModel = Union[Type[PricingConfig], Type[HappyHoursPricing]]


def list_device_configs(db: Session) -> List[DeviceConfig]:
    return db.query(DeviceConfig).order_by(DeviceConfig.category).all()


def get_device_config(db: Session, category: str) -> DeviceConfig:
    config = db.query(DeviceConfig).filter(DeviceConfig.category == category).first()
    if not config:
        raise NotFound("Device config not found")
    return config


def upsert_device_config(db: Session, payload: DeviceConfigCreate) -> Tuple[DeviceConfig, bool]:
    """Create the category or replace its count and seats; returns (config, created)"""
    config = db.query(DeviceConfig).filter(DeviceConfig.category == payload.category).first()
    created = config is None
    if config:
        config.count = payload.count
        config.seats = list(payload.seats)
    else:
        config = DeviceConfig(category=payload.category, count=payload.count, seats=list(payload.seats))
        db.add(config)
    db.commit()
    db.refresh(config)
    return config, created


def delete_device_config(db: Session, category: str) -> int:
    count = db.query(DeviceConfig).filter(DeviceConfig.category == category).delete(synchronize_session=False)
    db.commit()
    return count


def list_prices(db: Session, model: PriceModel) -> List:
    return db.query(model).order_by(model.category).all()


def replace_prices(db: Session, model: PriceModel, payload: PricingReplaceRequest) -> List:
    """Replace every row of the category with the given set"""
    db.query(model).filter(model.category == payload.category).delete(synchronize_session=False)
    for entry in payload.configs:
        db.add(model(
            category=payload.category,
            duration=entry.duration,
            price=entry.price,
            person_count=entry.person_count,
        ))
    db.commit()
    return db.query(model).filter(model.category == payload.category).all()


def delete_prices(db: Session, model: PriceModel, category: str) -> int:
    count = db.query(model).filter(model.category == category).delete(synchronize_session=False)
    db.commit()
    return count


def list_happy_hours(db: Session) -> List[HappyHoursConfig]:
    return db.query(HappyHoursConfig).order_by(HappyHoursConfig.category).all()


def replace_happy_hours(db: Session, payload: HappyHoursReplaceRequest) -> List[HappyHoursConfig]:
    db.query(HappyHoursConfig).filter(
        HappyHoursConfig.category == payload.category
    ).delete(synchronize_session=False)
    for entry in payload.configs:
        db.add(HappyHoursConfig(
            category=payload.category,
            start_time=entry.start_time,
            end_time=entry.end_time,
            enabled=entry.enabled,
        ))
    db.commit()
    return db.query(HappyHoursConfig).filter(HappyHoursConfig.category == payload.category).all()


def delete_happy_hours(db: Session, category: str) -> int:
    count = db.query(HappyHoursConfig).filter(
        HappyHoursConfig.category == category
    ).delete(synchronize_session=False)
    db.commit()
    return count


def is_happy_hour_active(db: Session, category: str, now: Optional[datetime] = None) -> bool:
    """
    True when the category's first enabled window contains the current HH:MM.

    Bounds are inclusive and compared as strings, so windows crossing
    midnight never match.
    """
    config = db.query(HappyHoursConfig).filter(
        HappyHoursConfig.category == category,
        HappyHoursConfig.enabled.is_(True),
    ).first()
    if not config:
        return False

    current = hhmm(now or datetime.now())
    return config.start_time <= current <= config.end_time
