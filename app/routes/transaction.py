import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.db.dependency import get_db
from app.models.category import Category
from app.models.transaction import Transaction
from app.models.user import User
from app.schemas.transaction import TransactionCreate, TransactionListOut, TransactionOut, TransactionUpdate
from app.utils.auth import get_current_user
from app.utils.response import send_response
from app.utils.transaction_utils import build_transaction_list

logger = logging.getLogger(__name__)

router = APIRouter()


def _owned_category(db: Session, category_id: int, user_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id, Category.created_by == user_id).first()


def _owned_transaction(db: Session, tx_id: int, user_id: int) -> Optional[Transaction]:
    return (
        db.query(Transaction)
        .options(joinedload(Transaction.category))
        .filter(Transaction.id == tx_id, Transaction.created_by == user_id)
        .first()
    )


@router.post("")
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        category = _owned_category(db, payload.category_id, current_user.id)
        if not category:
            return send_response(False, "Category Not Found", 400, {})

        new_tx = Transaction(
            amount=payload.amount,
            description=payload.description,
            category_id=category.id,
            date=payload.date,
            type=category.type,
            created_by=current_user.id,
        )
        db.add(new_tx)
        db.commit()
        db.refresh(new_tx)
        return send_response(True, "Transaction created successfully", 201, TransactionOut.model_validate(new_tx))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create transaction for user id=%s", current_user.id)
        return send_response(False, "Failed to create transaction", 500)


@router.get("")
def get_transaction_list(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        result = build_transaction_list(db, current_user.id, start_date, end_date)
    except SQLAlchemyError:
        logger.exception("Failed to get transaction list for user id=%s", current_user.id)
        return send_response(False, "Failed to get list transaction", 500)

    return send_response(True, "Get list transaction success", 200, TransactionListOut.model_validate(result))


@router.get("/{tx_id}")
def get_transaction_detail(
    tx_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tx = _owned_transaction(db, tx_id, current_user.id)
    except SQLAlchemyError:
        logger.exception("Failed to get transaction id=%s", tx_id)
        return send_response(False, "Failed to get transaction detail", 500)

    if not tx:
        return send_response(False, "Transaction not found or you do not have permission to access", 404)
    return send_response(True, "Get transaction detail success", 200, TransactionOut.model_validate(tx))


@router.put("/{tx_id}")
def update_transaction(
    tx_id: int,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not payload.is_complete():
        return send_response(False, "All fields are required", 400)

    try:
        tx = _owned_transaction(db, tx_id, current_user.id)
        if not tx:
            return send_response(False, "Transaction not found", 404)

        category = _owned_category(db, payload.category_id, current_user.id)
        if not category:
            return send_response(False, "Category Not Found", 400, {})

        tx.amount = payload.amount
        tx.description = payload.description
        tx.date = payload.date
        tx.category = category
        tx.type = category.type  # type always follows the category

        db.commit()
        db.refresh(tx)
        return send_response(True, "Update transaction success", 200, TransactionOut.model_validate(tx))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update transaction id=%s", tx_id)
        return send_response(False, "Failed to update transaction", 500)


@router.delete("/{tx_id}")
def delete_transaction(
    tx_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tx = _owned_transaction(db, tx_id, current_user.id)
        if not tx:
            return send_response(False, "Transaction not found", 404)

        deleted = TransactionOut.model_validate(tx)
        db.delete(tx)
        db.commit()
        return send_response(True, "Delete transaction success", 200, deleted)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete transaction id=%s", tx_id)
        return send_response(False, "Failed to delete transaction", 500)
