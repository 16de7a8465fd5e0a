from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.dependencies import require_admin
from marketplace.schemas.category import CategoryCreate, CategoryOut
from marketplace.services.categories import add_category, delete_category, list_categories

router = APIRouter()


@router.get("", response_model=list[CategoryOut])
def get_categories(db: Session = Depends(get_db)):
    return list_categories(db)


@router.post("", response_model=CategoryOut)
def create_category(payload: CategoryCreate, admin=Depends(require_admin), db: Session = Depends(get_db)):
    return add_category(db, payload.name)


@router.delete("/{category_id}")
def remove_category(category_id: int, admin=Depends(require_admin), db: Session = Depends(get_db)):
    delete_category(db, category_id)
    return {"success": True}
