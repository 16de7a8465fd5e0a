from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, JSON, Numeric, String, Text
from sqlalchemy.orm import relationship
from marketplace.core.database import Base
from marketplace.models.base import TimestampMixin


class Ad(Base, TimestampMixin):
    """
    A paid listing. ``category`` holds the category name by value; there is no
    foreign key, so removing a category leaves existing ads untouched.

    Ads past ``expires_at`` drop out of the public listing but are kept.
    """

    __tablename__ = "ads"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(12, 2), nullable=False, default=0)
    location = Column(String(255), nullable=False, default="")
    category = Column(String(120), nullable=False, default="")
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    images = Column(JSON, nullable=False, default=list)  # inline data URLs
    expires_at = Column(DateTime(timezone=True), nullable=False)

    author = relationship("User", back_populates="ads")


Index("ix_ads_expires_created", Ad.expires_at, Ad.created_at)
Index("ix_ads_category", Ad.category)
