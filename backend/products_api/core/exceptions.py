"""
Exceptions raised by the persistence layer.
"""


class PersistenceError(Exception):
    """Base class for storage failures that are not SQLAlchemy errors."""
    pass


class ProductNotFoundError(PersistenceError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"No product with id {product_id}")
