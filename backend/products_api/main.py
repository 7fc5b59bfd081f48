import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from products_api.api import products
from products_api.core.config import settings
from products_api.core.db import init_db
from products_api.core.exceptions import PersistenceError
from products_api.core.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(f"{settings.PROJECT_NAME} starting on {settings.HOST}:{settings.PORT}")
    # Create tables (no migration tooling)
    if settings.CREATE_TABLES:
        init_db()
        logger.info("Database tables created or already present")
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down")


app = FastAPI(title=settings.PROJECT_NAME, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.exception(f"{request.method} {request.url.path} -> unhandled error ({elapsed_ms:.1f} ms)")
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(PersistenceError)
async def storage_error_handler(request: Request, exc: Exception):
    # Storage failures are not mapped to client errors; answer an opaque 500
    logger.error(f"Unhandled storage error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


app.include_router(products.router, prefix="/products")


@app.get("/")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
