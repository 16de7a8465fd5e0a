from sqlalchemy import Column, Integer, String
from marketplace.core.database import Base

STARTER_CATEGORIES = (
    "Bricolage",
    "Ménage",
    "Cours particuliers",
    "Informatique",
    "Livraison",
    "Beauté",
    "Santé",
    "Déménagement",
)


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), unique=True, nullable=False)
