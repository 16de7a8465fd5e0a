from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.dependencies import require_admin
from marketplace.schemas.ad import AdminEditAdRequest, AdOut
from marketplace.schemas.admin import AdminStatsOut, AdminUserOut, SetRoleRequest
from marketplace.services.ads import ad_payload, delete_ad, edit_ad, list_all_ads
from marketplace.services.stats import admin_stats
from marketplace.services.users import list_users, set_user_role

router = APIRouter()


@router.get("/users", response_model=list[AdminUserOut])
def get_users(admin=Depends(require_admin), db: Session = Depends(get_db)):
    return list_users(db)


@router.put("/users/{user_id}/role", response_model=AdminUserOut)
def put_user_role(user_id: int, payload: SetRoleRequest, admin=Depends(require_admin), db: Session = Depends(get_db)):
    return set_user_role(db, admin, user_id, payload.role)


@router.get("/ads", response_model=list[AdOut])
def get_ads(admin=Depends(require_admin), db: Session = Depends(get_db)):
    return list_all_ads(db)


@router.put("/ads/{ad_id}", response_model=AdOut)
def put_ad(ad_id: int, payload: AdminEditAdRequest, admin=Depends(require_admin), db: Session = Depends(get_db)):
    ad = edit_ad(db, ad_id, payload)
    return ad_payload(ad, ad.author.full_name if ad.author else None)


@router.delete("/ads/{ad_id}")
def remove_ad(ad_id: int, admin=Depends(require_admin), db: Session = Depends(get_db)):
    delete_ad(db, ad_id)
    return {"success": True}


@router.get("/stats", response_model=AdminStatsOut)
def get_stats(admin=Depends(require_admin), db: Session = Depends(get_db)):
    return admin_stats(db)
