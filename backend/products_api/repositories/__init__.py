from products_api.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
