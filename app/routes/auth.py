import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.dependency import get_db
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest, TokenOut
from app.schemas.user import UserOut
from app.utils.auth import create_access_token
from app.utils.response import send_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register")
def register_user(
    payload: RegisterRequest,
    db: Session = Depends(get_db)
):
    email = payload.email.lower()
    try:
        existing_user = db.query(User).filter_by(email=email).first()
        if existing_user:
            return send_response(False, "Email already registered", 400)

        user = User(name=payload.name, email=email)
        user.set_password(payload.password)

        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Registered user id=%s", user.id)
        return send_response(True, "User registered successfully", 201, UserOut.model_validate(user))

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Unexpected registration error for %s", email)
        return send_response(False, "Registration failed", 500)

@router.post("/login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    try:
        db_user = db.query(User).filter(User.email == payload.email.lower()).first()
    except SQLAlchemyError:
        logger.exception("Login lookup failed")
        return send_response(False, "Login failed", 500)

    if not db_user or not db_user.check_password(payload.password):
        logger.warning("Failed login for %s", payload.email)
        return send_response(False, "Invalid credentials", 401)

    access_token = create_access_token(data={"sub": str(db_user.id)})
    token = TokenOut(access_token=access_token, user=UserOut.model_validate(db_user))
    return send_response(True, "Login success", 200, token)
