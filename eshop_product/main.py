# eshop_product/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from eshop_product.api.errors import register_error_handlers
from eshop_product.api.routers import health, products
from eshop_product.data.database import init_db
from eshop_product.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database")
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
