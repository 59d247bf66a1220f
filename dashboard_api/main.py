# File: dashboard_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from dashboard_api.api import orders, products
from dashboard_api.core.config import settings
from dashboard_api.core.errors import register_exception_handlers
from dashboard_api.core.logging_config import log_requests, setup_logging
from dashboard_api.db.mongo import MongoStore, connect_store

logger = logging.getLogger(__name__)


def create_app(store: MongoStore = None) -> FastAPI:
    """
    Build the API. Pass ``store`` to run against an existing store (tests);
    otherwise one is created from the environment when the app starts.
    """
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = store is None
        app.state.store = connect_store(settings) if owns_store else store
        # an unreachable cluster is not fatal; get_store retries per request
        if app.state.store is not None:
            app.state.store.ping()
        yield
        if owns_store and app.state.store is not None:
            app.state.store.close()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    if store is not None:
        app.state.store = store

    # --- CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    # --- Include Routers ---
    app.include_router(products.router)
    app.include_router(orders.router)

    # --- Root Endpoint ---
    @app.get("/", response_class=PlainTextResponse)
    def read_root():
        return "Dashboard Server running successfully"

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server is running on port: {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
