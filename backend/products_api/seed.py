from sqlalchemy.orm import Session

from products_api.core.db import SessionLocal, reset_db
from products_api.core.logging_config import setup_logging
from products_api.models.product import Product

SAMPLE_PRODUCT_NAMES = [
    "Widget",
    "Gadget",
    "Sprocket",
    "Flux Capacitor",
    "USB-C Cable (1m)",
]


def seed_products(db: Session) -> list[Product]:
    products = [Product(name=name) for name in SAMPLE_PRODUCT_NAMES]
    db.add_all(products)
    db.flush()
    return products


def main():
    logger = setup_logging()
    # Drops & recreates the products table
    reset_db()

    db = SessionLocal()
    try:
        products = seed_products(db)
        db.commit()
        logger.info(f"Seed complete: {len(products)} products")
        for p in products:
            logger.info(f"- {p.id}: {p.name}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
