import logging

from sqlalchemy import func, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from marketplace.core.config import get_settings, parse_email_list
from marketplace.core.errors import Conflict, InsufficientPrivilege, InvalidCredentials, NotFound
from marketplace.core.logging import mask_email
from marketplace.core.security import hash_password, verify_password
from marketplace.models import OnlineStatus, RoleLevel, User
from marketplace.schemas.auth import RegisterRequest, UpdateProfileRequest

logger = logging.getLogger(__name__)


def normalize_email(value: str) -> str:
    return str(value or "").strip().lower()


def _lock_users_table(db: Session) -> None:
    # SQLite serializes writers once the INSERT runs; PostgreSQL needs an
    # explicit lock so concurrent first registrations see each other.
    if db.get_bind().dialect.name == "postgresql":
        db.execute(text("LOCK TABLE users IN SHARE ROW EXCLUSIVE MODE"))


def register_user(db: Session, payload: RegisterRequest) -> User:
    settings = get_settings()
    email = normalize_email(payload.email)
    if db.query(User).filter(User.email == email).first():
        raise Conflict("Email already registered")

    user = User(
        email=email,
        full_name=payload.full_name.strip(),
        phone=(payload.phone or "").strip() or None,
        hashed_password=hash_password(payload.password),
        wallet_balance=0,
        role=RoleLevel.MEMBER,
        online_status=OnlineStatus.OFFLINE,
    )
    try:
        _lock_users_table(db)
        db.add(user)
        db.flush()
        # Bootstrap: the first account ever created administers the rest. The
        # insert above holds the write lock, so only one registration can see
        # itself as the lowest id.
        if settings.first_user_is_super_admin and db.query(func.min(User.id)).scalar() == user.id:
            user.role = RoleLevel.SUPER_ADMIN
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict("Email already registered") from exc
    db.refresh(user)

    logger.info("Registered user_id=%s email=%s role=%s", user.id, mask_email(email), user.role.name)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user or not verify_password(password, user.hashed_password):
        logger.info("Failed login email=%s", mask_email(normalize_email(email)))
        raise InvalidCredentials("Invalid email or password")
    return user


def update_profile(db: Session, user: User, payload: UpdateProfileRequest) -> User:
    changes = payload.model_dump(exclude_unset=True)
    if "full_name" in changes:
        full_name = (changes["full_name"] or "").strip()
        if full_name:
            user.full_name = full_name
    if "phone" in changes:
        user.phone = (changes["phone"] or "").strip() or None
    if "profile_picture" in changes:
        user.profile_picture = changes["profile_picture"]
    if "bio" in changes:
        user.bio = changes["bio"]
    if changes.get("online_status") is not None:
        user.online_status = changes["online_status"]
    db.commit()
    db.refresh(user)
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id.asc()).all()


def set_user_role(db: Session, actor: User, target_id: int, role: RoleLevel) -> User:
    # Only a super-admin may hand out super-admin.
    if role == RoleLevel.SUPER_ADMIN and not RoleLevel(actor.role).at_least(RoleLevel.SUPER_ADMIN):
        logger.warning("Refused super-admin grant actor_id=%s target_id=%s", actor.id, target_id)
        raise InsufficientPrivilege()

    target = db.query(User).filter(User.id == target_id).first()
    if not target:
        raise NotFound("User not found")

    previous = target.role
    target.role = role
    db.commit()
    logger.info(
        "Role change actor_id=%s target_id=%s %s->%s",
        actor.id,
        target_id,
        RoleLevel(previous).name,
        role.name,
    )
    return target


def bootstrap_super_admins(db: Session) -> int:
    emails = parse_email_list(get_settings().bootstrap_super_admin_emails)
    if not emails:
        return 0

    updated = 0
    missing: list[str] = []
    for email in emails:
        user = db.query(User).filter(User.email == email).first()
        if not user:
            missing.append(email)
            continue
        if user.role != RoleLevel.SUPER_ADMIN:
            user.role = RoleLevel.SUPER_ADMIN
            updated += 1
    if updated:
        db.commit()
        logger.info("Bootstrapped super-admin role for %s user(s).", updated)
    if missing:
        logger.warning(
            "BOOTSTRAP_SUPER_ADMIN_EMAILS users not found: %s",
            ", ".join(mask_email(item) for item in missing),
        )
    return updated
