from marketplace.models.user import User, RoleLevel, OnlineStatus
from marketplace.models.ad import Ad
from marketplace.models.transaction import Transaction, TransactionStatus, TransactionType
from marketplace.models.category import Category, STARTER_CATEGORIES

__all__ = [
    "User",
    "RoleLevel",
    "OnlineStatus",
    "Ad",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "Category",
    "STARTER_CATEGORIES",
]
