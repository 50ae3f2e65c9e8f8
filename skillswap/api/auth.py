import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from skillswap.crud import user as user_crud
from skillswap.database import get_db
from skillswap.models.user import User
from skillswap.schemas import AuthResponse, LoginRequest, MessageResponse, RegisterRequest
from skillswap.utils.security import (
    authenticate_user,
    end_session,
    get_current_user,
    get_password_hash,
    start_session,
)
from skillswap.utils.session_store import SessionStore, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    """Create an account and log it in."""
    if user_crud.get_user_by_username(db, user_data.username):
        raise HTTPException(status_code=400, detail="Username already taken")

    normalized_email = user_data.email.strip().lower()
    if user_crud.get_user_by_email(db, normalized_email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = user_crud.create_user(
        db,
        username=user_data.username,
        email=normalized_email,
        password_hash=get_password_hash(user_data.password),
        full_name=user_data.full_name,
    )
    start_session(response, store, user.id)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return {"user": user}


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    """Verify credentials and set the session cookie"""
    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.info("Failed login for username %r", credentials.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    start_session(response, store, user.id)
    logger.info("User %s logged in", user.id)
    return {"user": user}


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    end_session(request, response, store)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=AuthResponse)
def me(current_user: User = Depends(get_current_user)):
    return {"user": current_user}
