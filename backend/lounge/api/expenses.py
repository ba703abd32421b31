"""
Expense API
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lounge.api.deps import require_auth
from lounge.core.exceptions import BadRequest, NotFound
from lounge.db.database import get_db
from lounge.models.expense import Expense
from lounge.schemas.common import SuccessResponse
from lounge.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from lounge.utils.time_utils import to_ms

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


def _get_expense(db: Session, expense_id: str) -> Expense:
    expense = db.query(Expense).filter(Expense.id == expense_id).first()
    if not expense:
        raise NotFound("Expense not found")
    return expense


@router.get("", response_model=List[ExpenseResponse])
def get_expenses(db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    """Expenses, latest date first"""
    return db.query(Expense).order_by(Expense.date.desc()).all()


@router.post("", response_model=ExpenseResponse, status_code=201)
def create_expense(expense: ExpenseCreate, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    db_expense = Expense(
        category=expense.category,
        description=expense.description,
        amount=expense.amount,
        date=to_ms(expense.date),
    )
    db.add(db_expense)
    db.commit()
    db.refresh(db_expense)
    return db_expense


@router.patch("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: str,
    expense_update: ExpenseUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(require_auth)
):
    db_expense = _get_expense(db, expense_id)

    update_data = expense_update.model_dump(exclude_unset=True)
    if any(value is None for value in update_data.values()):
        raise BadRequest("Expense fields cannot be null")
    if "date" in update_data:
        update_data["date"] = to_ms(expense_update.date)

    for field, value in update_data.items():
        setattr(db_expense, field, value)
    db.commit()
    db.refresh(db_expense)
    return db_expense


@router.delete("/{expense_id}", response_model=SuccessResponse)
def delete_expense(expense_id: str, db: Session = Depends(get_db), user: dict = Depends(require_auth)):
    db.delete(_get_expense(db, expense_id))
    db.commit()
    return {"success": True}
