import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auth import hash_password, verify_password, create_access_token
from db import get_db
from models import User
from schemas import RegisterRequest, LoginRequest, AuthResponse, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _issue_token(user: User) -> str:
    return create_access_token(data={"id": user.id, "email": user.email})


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """
    Create a user and return it with a signed token.

    Duplicate emails are rejected by the unique constraint on users.email and
    surface as a 500 like any other database error.
    """
    db_user = User(
        email=payload.email,
        password=hash_password(payload.password),
        name=payload.name,
        company_id=payload.company_id,
        role=payload.role,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    logger.info(f"Registered user {db_user.id} ({db_user.email})")
    return {"user": UserOut.model_validate(db_user), "token": _issue_token(db_user)}


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == payload.email).first()
    if not user:
        logger.warning(f"Login failed, unknown email: {payload.email}")
        raise HTTPException(status_code=401, detail="User not found")
    if not verify_password(payload.password, user.password):
        logger.warning(f"Login failed, bad password for user {user.id}")
        raise HTTPException(status_code=401, detail="Invalid password")

    # UserOut drops the password hash from the payload
    return {"user": UserOut.model_validate(user), "token": _issue_token(user)}
