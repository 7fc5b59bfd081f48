from pydantic import BaseModel, ConfigDict, Field

# Ids are bound to the signed 64-bit range of the products.id column.
PRODUCT_ID_MIN = -2**63
PRODUCT_ID_MAX = 2**63 - 1

# name is deliberately optional on input: the products table rejects
# missing or over-long names, not the request layer.


class ProductCreate(BaseModel):
    name: str | None = None


class ProductUpdate(BaseModel):
    id: int = Field(ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX)
    name: str | None = None


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
