import argparse

from marketplace.core.database import SessionLocal
from marketplace.models import STARTER_CATEGORIES
from marketplace.services.categories import seed_categories


def main():
    parser = argparse.ArgumentParser(description="Insert the starter categories that are missing.")
    parser.add_argument("names", nargs="*", help="Category names (defaults to the starter set)")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        added = seed_categories(db, args.names or STARTER_CATEGORIES)
        print(f"Added {added} categor{'y' if added == 1 else 'ies'}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
