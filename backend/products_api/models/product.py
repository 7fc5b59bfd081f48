from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from products_api.core.db import Base

NAME_MAX_LENGTH = 50


class Product(Base):
    __tablename__ = "products"
    # sqlite ignores VARCHAR lengths, so the bound lives in the table too
    __table_args__ = (
        CheckConstraint(f"length(name) <= {NAME_MAX_LENGTH}", name="ck_products_name_length"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r})"
