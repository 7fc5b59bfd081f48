from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from products_api.core.db import Base
from products_api.core.exceptions import PersistenceError, ProductNotFoundError
from products_api.models.product import Product
from products_api.repositories import ProductRepository


def test_find_all_on_empty_table_returns_empty_list(db):
    assert ProductRepository(db).find_all() == []


def test_save_new_product_assigns_id(db):
    repo = ProductRepository(db)

    saved = repo.save(Product(name="Widget"))

    assert saved.id is not None
    assert repo.find_by_id(saved.id).name == "Widget"


def test_save_treats_zero_id_as_unset(db):
    repo = ProductRepository(db)
    first = repo.save(Product(name="First"))

    second = repo.save(Product(id=0, name="Second"))

    assert second.id not in (0, first.id)
    assert {p.name for p in repo.find_all()} == {"First", "Second"}


def test_save_with_id_writes_existing_row(db):
    repo = ProductRepository(db)
    saved = repo.save(Product(name="Widget"))

    repo.save(Product(id=saved.id, name="Gadget"))

    db.expire_all()
    products = repo.find_all()
    assert len(products) == 1
    assert products[0].id == saved.id
    assert products[0].name == "Gadget"


def test_find_by_id_missing_returns_none(db):
    assert ProductRepository(db).find_by_id(999) is None


def test_find_all_returns_each_row_once(db):
    repo = ProductRepository(db)
    ids = [repo.save(Product(name=f"Item {i}")).id for i in range(5)]

    found = repo.find_all()

    assert sorted(p.id for p in found) == sorted(ids)


def test_save_without_name_is_rejected_by_table(db):
    repo = ProductRepository(db)

    with pytest.raises(IntegrityError):
        repo.save(Product(name=None))

    # session was rolled back and is still usable
    assert repo.find_all() == []
    assert repo.save(Product(name="After")).name == "After"


def test_name_length_bound_is_enforced_by_table(db):
    repo = ProductRepository(db)

    assert repo.save(Product(name="x" * 50)).id is not None
    with pytest.raises(IntegrityError):
        repo.save(Product(name="x" * 51))
    assert len(repo.find_all()) == 1


def test_delete_by_id_removes_row(db):
    repo = ProductRepository(db)
    keep = repo.save(Product(name="Keep"))
    drop = repo.save(Product(name="Drop"))

    repo.delete_by_id(drop.id)

    assert repo.find_by_id(drop.id) is None
    assert [p.id for p in repo.find_all()] == [keep.id]


def test_delete_by_id_missing_raises_not_found(db):
    repo = ProductRepository(db)
    repo.save(Product(name="Widget"))

    with pytest.raises(ProductNotFoundError) as exc_info:
        repo.delete_by_id(42)

    assert exc_info.value.product_id == 42
    assert isinstance(exc_info.value, PersistenceError)
    assert len(repo.find_all()) == 1


def test_concurrent_updates_are_last_write_wins(tmp_path):
    """
    Two sessions read the same row, then both write. Nothing detects the
    conflict: the second write silently replaces the first.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'race.db'}")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    with factory() as setup:
        pid = ProductRepository(setup).save(Product(name="Original")).id

    session_a, session_b = factory(), factory()
    try:
        repo_a, repo_b = ProductRepository(session_a), ProductRepository(session_b)
        product_a = repo_a.find_by_id(pid)
        product_b = repo_b.find_by_id(pid)

        product_a.name = "From A"
        repo_a.save(product_a)
        product_b.name = "From B"
        repo_b.save(product_b)
    finally:
        session_a.close()
        session_b.close()

    with factory() as check:
        assert ProductRepository(check).find_by_id(pid).name == "From B"
    engine.dispose()
