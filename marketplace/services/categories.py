import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from marketplace.core.errors import Conflict, ValidationFailed
from marketplace.models import Category, STARTER_CATEGORIES

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def add_category(db: Session, name: str) -> Category:
    name = str(name or "").strip()
    if not name:
        raise ValidationFailed("Category name is required")
    if len(name) > 120:
        raise ValidationFailed("Category name is too long")
    if db.query(Category).filter(Category.name == name).first():
        raise Conflict("Category already exists")

    category = Category(name=name)
    db.add(category)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict("Category already exists") from exc
    db.refresh(category)
    logger.info("Added category id=%s name=%s", category.id, name)
    return category


def delete_category(db: Session, category_id: int) -> None:
    # Ads keep their category text; nothing cascades.
    deleted = db.query(Category).filter(Category.id == category_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("Deleted category id=%s", category_id)


def seed_categories(db: Session, names=STARTER_CATEGORIES) -> int:
    existing = {row[0] for row in db.query(Category.name).all()}
    added = 0
    for name in names:
        if name not in existing:
            db.add(Category(name=name))
            added += 1
    if added:
        db.commit()
    return added
