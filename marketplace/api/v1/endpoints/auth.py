from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.core.security import create_access_token
from marketplace.dependencies import get_current_user
from marketplace.middlewares.rate_limit import limiter
from marketplace.models import User
from marketplace.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UpdateProfileRequest
from marketplace.schemas.user import UserOut
from marketplace.services.users import authenticate, register_user, update_profile

router = APIRouter()


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(token=create_access_token(str(user.id)), user=UserOut.model_validate(user))


@router.post("/register", response_model=AuthResponse)
@limiter.limit("10/minute")
def register(request: Request, payload: RegisterRequest, db: Session = Depends(get_db)):
    user = register_user(db, payload)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
@limiter.limit("10/minute")
def login(request: Request, payload: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate(db, payload.email, payload.password)
    return _auth_response(user)


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user


@router.put("/profile", response_model=UserOut)
def put_profile(payload: UpdateProfileRequest, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return update_profile(db, user, payload)
