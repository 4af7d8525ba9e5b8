import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.dependency import get_db
from app.models.user import User
from app.schemas.user import UserOut, UserUpdate
from app.utils.auth import get_current_user
from app.utils.response import send_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_user_list(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    try:
        users = db.query(User).order_by(User.id.asc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to list users")
        return send_response(False, "Failed to get list user", 500)
    return send_response(True, "Get list user success", 200, [UserOut.model_validate(u) for u in users])


@router.get("/me")
def get_me(current_user: User = Depends(get_current_user)):
    return send_response(True, "Get user success", 200, UserOut.model_validate(current_user))


@router.put("/{user_id}")
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if user_id != current_user.id:
        return send_response(False, "You can only update your own account", 403)

    try:
        if payload.email is not None:
            email = payload.email.lower()
            taken = db.query(User).filter(User.email == email, User.id != current_user.id).first()
            if taken:
                return send_response(False, "Email already registered", 400)
            current_user.email = email
        if payload.name is not None:
            current_user.name = payload.name
        if payload.password is not None:
            current_user.set_password(payload.password)

        db.commit()
        db.refresh(current_user)
        return send_response(True, "Update user success", 200, UserOut.model_validate(current_user))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update user id=%s", user_id)
        return send_response(False, "Failed to update user", 500)


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if user_id != current_user.id:
        return send_response(False, "You can only delete your own account", 403)

    try:
        deleted = UserOut.model_validate(current_user)
        db.delete(current_user)
        db.commit()
        logger.info("Deleted user id=%s", user_id)
        return send_response(True, "Delete user success", 200, deleted)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete user id=%s", user_id)
        return send_response(False, "Failed to delete user", 500)
