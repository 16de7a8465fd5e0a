import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from marketplace.core.database import get_db
from marketplace.core.errors import AuthenticationRequired, AuthorizationDenied
from marketplace.core.security import decode_token
from marketplace.models import RoleLevel, User

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequired()

    try:
        payload = decode_token(credentials.credentials)
    except jwt.PyJWTError:
        raise AuthorizationDenied()
    if payload.get("type") != "access":
        raise AuthorizationDenied()

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise AuthorizationDenied()

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise AuthorizationDenied("User not found")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    # The role comes from the row loaded above, never from the token.
    if not RoleLevel(user.role).at_least(RoleLevel.ADMIN):
        raise AuthorizationDenied("Admin access required")
    return user
