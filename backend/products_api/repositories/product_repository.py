import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from products_api.core.exceptions import ProductNotFoundError
from products_api.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Data access for the products table.

    Every method is a single read or a single write. Writes commit on
    success and roll the session back before re-raising on failure.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Product]:
        return list(self.db.scalars(select(Product)).all())

    def find_by_id(self, product_id: int) -> Product | None:
        return self.db.get(Product, product_id)

    def save(self, product: Product) -> Product:
        """
        Insert the product when it has no id yet, otherwise write the row
        keyed by its id.

        Returns:
            The persisted Product with its id populated
        """
        is_new = not product.id
        label = "new product" if is_new else f"product {product.id}"
        try:
            if is_new:
                product.id = None
                self.db.add(product)
            else:
                product = self.db.merge(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save {label}: {e}")
            raise

        if is_new:
            logger.info(f"Created product {product.id}")
        else:
            logger.info(f"Updated product {product.id}")
        return product

    def delete_by_id(self, product_id: int) -> None:
        product = self.db.get(Product, product_id)
        if product is None:
            logger.warning(f"Product {product_id} not found for delete")
            raise ProductNotFoundError(product_id)

        try:
            self.db.delete(product)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete product {product_id}: {e}")
            raise

        logger.info(f"Deleted product {product_id}")
