"""
Food item API
"""
from typing import List

from fastapi import APIRouter, Depends
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from lounge.api.deps import require_auth
from lounge.core.exceptions import BadRequest, NotFound
from lounge.db.database import get_db
from lounge.models.food_item import FoodItem
from lounge.schemas.common import SuccessResponse
from lounge.schemas.food_item import FoodItemCreate, FoodItemResponse, FoodItemUpdate, StockAdjust
from lounge.utils.time_utils import to_ms

router = APIRouter(prefix="/api/food-items", tags=["food"])


def _get_item(db: Session, item_id: str) -> FoodItem:
    item = db.query(FoodItem).filter(FoodItem.id == item_id).first()
    if not item:
        raise NotFound("Food item not found")
    return item


@router.get("", response_model=List[FoodItemResponse])
def get_food_items(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return db.query(FoodItem).order_by(FoodItem.name).all()


@router.get("/{item_id}", response_model=FoodItemResponse)
def get_food_item(item_id: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    return _get_item(db, item_id)


@router.post("", response_model=FoodItemResponse, status_code=201)
def create_food_item(item: FoodItemCreate, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    data = item.model_dump()
    if item.expiry_date:
        data["expiry_date"] = to_ms(item.expiry_date)
    db_item = FoodItem(**data)
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item


@router.patch("/{item_id}", response_model=FoodItemResponse)
def update_food_item(
    item_id: str,
    item_update: FoodItemUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    db_item = _get_item(db, item_id)

    update_data = item_update.model_dump(exclude_unset=True)
    columns = FoodItem.__table__.columns
    for field, value in update_data.items():
        if value is None and not columns[field].nullable:
            raise BadRequest(f"{to_camel(field)} cannot be null")
    if update_data.get("expiry_date"):
        update_data["expiry_date"] = to_ms(item_update.expiry_date)

    for field, value in update_data.items():
        setattr(db_item, field, value)
    db.commit()
    db.refresh(db_item)
    return db_item


@router.delete("/{item_id}", response_model=SuccessResponse)
def delete_food_item(item_id: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    db.delete(_get_item(db, item_id))
    db.commit()
    return {"success": True}


@router.post("/{item_id}/adjust-stock", response_model=FoodItemResponse)
def adjust_stock(
    item_id: str,
    stock_adjust: StockAdjust,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    """Add to or subtract from stock; stock never drops below zero"""
    db_item = _get_item(db, item_id)

    current = db_item.current_stock or 0
    if stock_adjust.type == "add":
        db_item.current_stock = current + stock_adjust.quantity
    else:
        db_item.current_stock = max(0, current - stock_adjust.quantity)

    db.commit()
    db.refresh(db_item)
    return db_item
