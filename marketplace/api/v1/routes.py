from fastapi import APIRouter
from marketplace.api.v1.endpoints import auth, ads, wallet, categories, admin

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(ads.router, prefix="/ads", tags=["ads"])
router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
