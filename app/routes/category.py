import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.dependency import get_db
from app.models.category import Category
from app.models.transaction import Transaction
from app.models.user import User
from app.schemas.category import CategoryCreate, CategoryOut, CategoryType, CategoryUpdate
from app.utils.auth import get_current_user
from app.utils.response import send_response

logger = logging.getLogger(__name__)

router = APIRouter()


def _owned_category(db: Session, category_id: int, user_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id, Category.created_by == user_id).first()


@router.post("")
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        category = Category(name=payload.name, type=payload.type.value, created_by=current_user.id)
        db.add(category)
        db.commit()
        db.refresh(category)
        return send_response(True, "Category created successfully", 201, CategoryOut.model_validate(category))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create category for user id=%s", current_user.id)
        return send_response(False, "Failed to create category", 500)


@router.get("")
def get_category_list(
    type: Optional[CategoryType] = Query(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        query = db.query(Category).filter(Category.created_by == current_user.id)
        if type is not None:
            query = query.filter(Category.type == type.value)
        categories = query.order_by(Category.name.asc(), Category.id.asc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to list categories for user id=%s", current_user.id)
        return send_response(False, "Failed to get list category", 500)

    return send_response(
        True, "Get list category success", 200, [CategoryOut.model_validate(c) for c in categories]
    )


@router.get("/{category_id}")
def get_category_detail(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        category = _owned_category(db, category_id, current_user.id)
    except SQLAlchemyError:
        logger.exception("Failed to get category id=%s", category_id)
        return send_response(False, "Failed to get category detail", 500)

    if not category:
        return send_response(False, "Category not found", 404)
    return send_response(True, "Get category detail success", 200, CategoryOut.model_validate(category))


@router.put("/{category_id}")
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        category = _owned_category(db, category_id, current_user.id)
        if not category:
            return send_response(False, "Category not found", 404)

        # existing transactions keep the type they were written with
        category.name = payload.name
        category.type = payload.type.value
        db.commit()
        db.refresh(category)
        return send_response(True, "Update category success", 200, CategoryOut.model_validate(category))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update category id=%s", category_id)
        return send_response(False, "Failed to update category", 500)


@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        category = _owned_category(db, category_id, current_user.id)
        if not category:
            return send_response(False, "Category not found", 404)

        in_use = db.query(Transaction.id).filter(Transaction.category_id == category.id).first()
        if in_use:
            return send_response(False, "Category is in use", 400)

        deleted = CategoryOut.model_validate(category)
        db.delete(category)
        db.commit()
        return send_response(True, "Delete category success", 200, deleted)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete category id=%s", category_id)
        return send_response(False, "Failed to delete category", 500)
