from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from products_api.core.config import settings


def _connect_args(url: str) -> dict:
    # sqlite connections are handed across the request threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.SQL_ECHO,
    connect_args=_connect_args(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session for one request and close it afterwards.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    # Import models so Base.metadata knows them
    import products_api.models  # noqa

    Base.metadata.create_all(bind=engine)


def reset_db() -> None:
    import products_api.models  # noqa

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
