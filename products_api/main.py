import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from products_api.config import get_settings
from products_api.database import Database
from products_api.errors import register_exception_handlers
from products_api.routes import products_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Settings are read per startup so tests can point DATABASE_PATH elsewhere
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    db = Database(settings.database_path)
    db.open()
    app.state.db = db
    try:
        yield
    finally:
        db.close()


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        status_code = getattr(response, "status_code", "ERR")
        logger.info(
            "%s %s -> %s in %.1fms",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
        )


def create_app() -> FastAPI:
    app = FastAPI(title="Products API", version="1.0.0", lifespan=lifespan)

    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    # Register routers
    app.include_router(products_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
