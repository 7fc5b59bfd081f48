from fastapi import APIRouter, Depends, Path, Response, status

from products_api.api.deps import get_product_repository
from products_api.models.product import Product
from products_api.repositories import ProductRepository
from products_api.schemas.product import (
    PRODUCT_ID_MAX,
    PRODUCT_ID_MIN,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)

router = APIRouter(tags=["products"])

NOT_FOUND = {404: {"description": "Product not found (empty body)"}}


@router.get("", response_model=list[ProductRead])
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    return repo.find_all()


@router.get("/{product_id}", response_model=ProductRead, responses=NOT_FOUND)
def get_product(
    product_id: int = Path(ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX),
    repo: ProductRepository = Depends(get_product_repository),
):
    product = repo.find_by_id(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(req: ProductCreate, repo: ProductRepository = Depends(get_product_repository)):
    # id from the body is never trusted; the table assigns it
    return repo.save(Product(name=req.name))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(
    product_id: int = Path(ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX),
    repo: ProductRepository = Depends(get_product_repository),
):
    # A missing id raises ProductNotFoundError and surfaces as a 500
    repo.delete_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("", response_model=ProductRead, responses=NOT_FOUND)
def update_product(req: ProductUpdate, repo: ProductRepository = Depends(get_product_repository)):
    """
    Rename an existing product.

    The stored record is fetched and only its name is overwritten, so the
    key always comes from the table. There is no version check: two
    concurrent updates of the same id are last-write-wins.
    """
    product = repo.find_by_id(req.id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    product.name = req.name
    return repo.save(product)
