from fastapi import Depends
from sqlalchemy.orm import Session

from products_api.core.db import get_db
from products_api.repositories import ProductRepository


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)
